"""Two-player showdown: deck, shuffle, deal and evaluate.

This module provides:
- ShowdownConfig: seed for a showdown
- shuffle_deck / deal_hand: deck handling around the rules package
- Showdown: the result record of one two-player comparison
- play_showdown: deal two hands from a fresh shuffled deck and evaluate them
- evaluate_showdown: evaluate two hands supplied by the caller

Game flow:
1. Build the 52-card deck
2. Shuffle it with a seeded NumPy generator
3. Deal 5 cards to player 1, then 5 to player 2
4. Reject the deal if the players share a card
5. Classify both hands and compare them
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from mini_poker.rules import (
    HAND_SIZE,
    Card,
    Hand,
    HandCategory,
    ValidationError,
    assert_distinct,
    classify,
    compare,
    create_standard_deck,
)

logger = logging.getLogger(__name__)

NUM_PLAYERS = 2


@dataclass
class ShowdownConfig:
    """Showdown configuration."""

    seed: Optional[int] = None


@dataclass(frozen=True)
class Showdown:
    """Outcome of comparing two players' hands.

    Attributes:
        hand_one: Player 1's hand
        hand_two: Player 2's hand
        category_one: Player 1's category
        category_two: Player 2's category
        result: 1 if player 1 wins, -1 if player 2 wins, 0 for a tie
    """

    hand_one: Hand
    hand_two: Hand
    category_one: HandCategory
    category_two: HandCategory
    result: int

    @property
    def winner(self) -> Optional[int]:
        """Winning player number (1 or 2), or None on a tie."""
        if self.result > 0:
            return 1
        if self.result < 0:
            return 2
        return None


def shuffle_deck(deck: List[Card], rng: np.random.Generator) -> List[Card]:
    """Return a shuffled copy of `deck`.

    Args:
        deck: Cards to shuffle (left untouched)
        rng: NumPy generator supplying the permutation

    Returns:
        New list with the same cards in random order
    """
    order = rng.permutation(len(deck))
    return [deck[i] for i in order]


def deal_hand(deck: List[Card], count: int = HAND_SIZE) -> Hand:
    """Remove the top `count` cards from `deck` and build a Hand.

    The deck is left untouched when the cards do not form a valid hand.

    Raises:
        ValidationError: If the dealt cards do not form a valid hand
    """
    try:
        hand = Hand(deck[:count])
    except ValidationError as e:
        logger.error("Error dealing hand: %s", e)
        raise
    del deck[:count]
    return hand


def evaluate_showdown(hand_one: Hand, hand_two: Hand) -> Showdown:
    """Validate, classify and compare two players' hands.

    Raises:
        ValidationError: If the hands share a card
    """
    assert_distinct(hand_one, hand_two)

    showdown = Showdown(
        hand_one=hand_one,
        hand_two=hand_two,
        category_one=classify(hand_one),
        category_two=classify(hand_two),
        result=compare(hand_one, hand_two),
    )
    logger.debug(
        "Showdown %s (%s) vs %s (%s) -> %d",
        hand_one,
        showdown.category_one,
        hand_two,
        showdown.category_two,
        showdown.result,
    )
    return showdown


def play_showdown(config: Optional[ShowdownConfig] = None) -> Showdown:
    """Deal two hands from a freshly shuffled deck and evaluate them.

    Args:
        config: Seed; defaults to an unseeded deal

    Returns:
        The Showdown record
    """
    config = config or ShowdownConfig()
    rng = np.random.default_rng(config.seed)

    deck = shuffle_deck(create_standard_deck(), rng)
    hands = [deal_hand(deck) for _ in range(NUM_PLAYERS)]
    logger.debug("Dealt %d hands, %d cards left in deck", len(hands), len(deck))

    return evaluate_showdown(hands[0], hands[1])
