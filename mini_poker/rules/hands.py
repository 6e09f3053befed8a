"""Five-card hands and cross-hand validation.

A Hand is exactly five distinct cards. Construction is the only place cards
are assigned, so every Hand that exists is well formed. Whether two hands
share a card is not a Hand invariant: `assert_distinct` checks it for a pair
of players' hands.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .ranks import (
    Card,
    Suit,
    ValidationError,
    get_value_counts,
    sort_cards,
)

HAND_SIZE = 5


@dataclass(frozen=True)
class Hand:
    """An immutable five-card poker hand.

    Attributes:
        cards: Tuple of cards in the order they were given
    """

    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        if self.cards is None:
            raise ValidationError(
                f"A poker hand must contain exactly {HAND_SIZE} cards",
                ValidationError.HAND_SIZE,
            )
        try:
            cards = tuple(self.cards)
        except TypeError as e:
            raise ValidationError(
                f"A poker hand must contain exactly {HAND_SIZE} cards",
                ValidationError.HAND_SIZE,
            ) from e
        if not all(isinstance(c, Card) for c in cards):
            raise ValidationError(
                "A poker hand may only contain Card objects",
                ValidationError.INVALID_CARD,
            )
        if len(cards) != HAND_SIZE:
            raise ValidationError(
                f"A poker hand must contain exactly {HAND_SIZE} cards",
                ValidationError.HAND_SIZE,
            )
        if len(set(cards)) != len(cards):
            raise ValidationError(
                "Duplicate cards are not allowed in a poker hand",
                ValidationError.DUPLICATE_CARD,
            )
        object.__setattr__(self, "cards", cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def ordinal_values(self) -> List[int]:
        """Ordinal value of each card, in input order (unsorted)."""
        return [card.ordinal_rank() for card in self.cards]

    def suits(self) -> List[Suit]:
        """Suit of each card, in input order."""
        return [card.suit for card in self.cards]

    def value_counts(self) -> Dict[int, int]:
        """Map each ordinal value to how many cards share it."""
        return get_value_counts(self.cards)

    def shares_card_with(self, other: "Hand") -> bool:
        """Check whether this hand and `other` hold a common card.

        Symmetric: ``a.shares_card_with(b) == b.shares_card_with(a)``.
        """
        return not set(self.cards).isdisjoint(other.cards)

    def sorted_cards(self) -> List[Card]:
        """Cards from highest to lowest rank, for display."""
        return sort_cards(self.cards, descending=True)


def assert_distinct(hand_a: Hand, hand_b: Hand) -> None:
    """Require that two players' hands have no card in common.

    Raises:
        ValidationError: If the hands share at least one card
    """
    if hand_a.shares_card_with(hand_b):
        raise ValidationError(
            "Players cannot share the same card",
            ValidationError.SHARED_CARD,
        )


# Helper functions for creating hands for testing


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "3H 4D 5C 6S 7H".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]


def make_hand_from_string(s: str) -> Hand:
    """Build a Hand from a string like "10H JH QH KH AH"."""
    return Hand(make_cards_from_string(s))

