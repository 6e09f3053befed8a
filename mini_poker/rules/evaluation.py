"""Hand classification and comparison.

Categories (strongest first):
- Royal flush: 10-J-Q-K-A, all one suit
- Straight flush: straight and flush
- Four of a kind
- Full house: three of a kind plus a pair
- Flush: all one suit
- Straight: five consecutive values, or the ace-low wheel A-2-3-4-5
- Three of a kind
- Two pair
- Pair
- High card

Comparison rules:
- Higher category wins
- Same category: compare all five values sorted high to low, first
  difference wins. Kickers are not grouped by category, so a pair of
  nines with an ace kicker beats a pair of tens with a king kicker.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, FrozenSet, Tuple

from .hands import Hand

ROYAL_VALUES = frozenset([10, 11, 12, 13, 14])
WHEEL_VALUES = (2, 3, 4, 5, 14)


class HandCategory(IntEnum):
    """Poker hand categories. The value is the strength ordinal."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    def __str__(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


@dataclass(frozen=True)
class HandFacts:
    """Everything the classifier needs, derived once per hand.

    Attributes:
        values: Ordinal values sorted ascending
        counts: Ordinal value -> multiplicity
        is_flush: All five cards share one suit
        is_straight: Five consecutive values, or the wheel
    """

    values: Tuple[int, ...]
    counts: Dict[int, int]
    is_flush: bool
    is_straight: bool

    @property
    def value_set(self) -> FrozenSet[int]:
        return frozenset(self.values)

    def has_multiplicity(self, n: int) -> bool:
        return n in self.counts.values()

    def multiplicity_count(self, n: int) -> int:
        return sum(1 for c in self.counts.values() if c == n)


def _is_straight(values: Tuple[int, ...]) -> bool:
    """Check sorted ascending values for a five-card run.

    The wheel (A-2-3-4-5) is matched literally before the general run test.
    """
    if values == WHEEL_VALUES:
        return True

    if len(set(values)) < len(values):
        return False

    for i in range(1, len(values)):
        if values[i] != values[i - 1] + 1:
            return False
    return True


def derive_facts(hand: Hand) -> HandFacts:
    """Compute sorted values, value counts, flush and straight flags."""
    values = tuple(sorted(hand.ordinal_values()))
    suits = hand.suits()
    return HandFacts(
        values=values,
        counts=hand.value_counts(),
        is_flush=all(s == suits[0] for s in suits),
        is_straight=_is_straight(values),
    )


# Evaluated strongest first; first match wins.
CATEGORY_CASCADE: Tuple[Tuple[Callable[[HandFacts], bool], HandCategory], ...] = (
    (lambda f: f.is_flush and f.value_set == ROYAL_VALUES, HandCategory.ROYAL_FLUSH),
    (lambda f: f.is_straight and f.is_flush, HandCategory.STRAIGHT_FLUSH),
    (lambda f: f.has_multiplicity(4), HandCategory.FOUR_OF_A_KIND),
    (lambda f: f.has_multiplicity(3) and f.has_multiplicity(2), HandCategory.FULL_HOUSE),
    (lambda f: f.is_flush, HandCategory.FLUSH),
    (lambda f: f.is_straight, HandCategory.STRAIGHT),
    (lambda f: f.has_multiplicity(3), HandCategory.THREE_OF_A_KIND),
    (lambda f: f.multiplicity_count(2) == 2, HandCategory.TWO_PAIR),
    (lambda f: f.has_multiplicity(2), HandCategory.PAIR),
)


def classify(hand: Hand) -> HandCategory:
    """Classify a five-card hand into its poker category.

    Args:
        hand: A valid Hand

    Returns:
        The strongest HandCategory whose predicate matches
    """
    facts = derive_facts(hand)
    for predicate, category in CATEGORY_CASCADE:
        if predicate(facts):
            return category
    return HandCategory.HIGH_CARD


def category_strength(category: HandCategory) -> int:
    """Strength ordinal of a category (HIGH_CARD=0 ... ROYAL_FLUSH=9)."""
    return int(category)


def compare(hand_a: Hand, hand_b: Hand) -> int:
    """Compare two hands.

    Args:
        hand_a: First hand
        hand_b: Second hand

    Returns:
        1 if hand_a is stronger, -1 if weaker, 0 for a tie
    """
    strength_a = category_strength(classify(hand_a))
    strength_b = category_strength(classify(hand_b))

    if strength_a != strength_b:
        return 1 if strength_a > strength_b else -1

    values_a = sorted(hand_a.ordinal_values(), reverse=True)
    values_b = sorted(hand_b.ordinal_values(), reverse=True)

    for value_a, value_b in zip(values_a, values_b):
        if value_a != value_b:
            return 1 if value_a > value_b else -1

    return 0
