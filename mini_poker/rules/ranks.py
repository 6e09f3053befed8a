"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit enumerations
- Card representation and validation
- The ValidationError raised by every rules constructor
- Deck and counting utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Union


class ValidationError(ValueError):
    """Raised when cards, hands or pairs of hands break a rules invariant.

    Attributes:
        code: Failure kind, one of the class-level codes
    """

    INVALID_CARD = "invalid_card"
    HAND_SIZE = "hand_size"
    DUPLICATE_CARD = "duplicate_card"
    SHARED_CARD = "shared_card"

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


class Rank(IntEnum):
    """Card ranks. The value is the ordinal used for comparison (Ace = 14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Always high on the card itself


class Suit(IntEnum):
    """Card suits. Identity only, suits never break ties."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3


# Rank symbols for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

SUIT_LETTERS = {
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.SPADE: "S",
}

SUIT_NAMES = {
    Suit.HEART: "Hearts",
    Suit.DIAMOND: "Diamonds",
    Suit.CLUB: "Clubs",
    Suit.SPADE: "Spades",
}

# Symbol to rank/suit mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({v: k for k, v in SUIT_LETTERS.items()})

_VALID_SUITS_TEXT = ", ".join(f"{SUIT_LETTERS[s]} ({SUIT_NAMES[s]})" for s in Suit)


def _coerce_suit(value: Union[Suit, str]) -> Suit:
    if isinstance(value, Suit):
        return value
    if isinstance(value, str) and value in SYMBOL_TO_SUIT:
        return SYMBOL_TO_SUIT[value]
    raise ValidationError(
        f"Invalid suit: {value}. Valid suits are: {_VALID_SUITS_TEXT}.",
        ValidationError.INVALID_CARD,
    )


def _coerce_rank(value: Union[Rank, str]) -> Rank:
    if isinstance(value, Rank):
        return value
    if isinstance(value, str) and value in SYMBOL_TO_RANK:
        return SYMBOL_TO_RANK[value]
    raise ValidationError(
        f"Invalid value: {value}. Valid values are: 2-10, J, Q, K, A.",
        ValidationError.INVALID_CARD,
    )


@dataclass(frozen=True)
class Card:
    """A playing card with suit and rank.

    Accepts enum members or their text symbols ("H"/"♥", "10"/"J"/...).
    Immutable and hashable for use in sets.
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "suit", _coerce_suit(self.suit))
        object.__setattr__(self, "rank", _coerce_rank(self.rank))

    def ordinal_rank(self) -> int:
        """Ordinal value 2-14 of this card's rank (Ace = 14)."""
        return int(self.rank)

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like '3♥' or '10S'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValidationError: If string cannot be parsed
        """
        if not s:
            raise ValidationError(f"Invalid card: {s!r}", ValidationError.INVALID_CARD)
        return cls(suit=s[-1], rank=s[:-1])


def get_value_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each ordinal value in a collection of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping ordinal value (2-14) to count
    """
    counts: Dict[int, int] = {}
    for card in cards:
        value = card.ordinal_rank()
        counts[value] = counts.get(value, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck, suit by suit.

    Returns:
        List of 52 Card objects (4 suits × 13 ranks)
    """
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit=suit, rank=rank))
    return deck


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank, then by suit.

    Args:
        cards: Card objects
        descending: Highest rank first when True

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda c: (int(c.rank), int(c.suit)), reverse=descending)
