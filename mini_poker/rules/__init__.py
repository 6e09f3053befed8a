"""Poker rules implementations.

This module provides:
- Card, rank and suit definitions (ranks.py)
- Five-card hands and cross-hand validation (hands.py)
- Hand classification and comparison (evaluation.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    ValidationError,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_LETTERS,
    get_value_counts,
    create_standard_deck,
    sort_cards,
)

from .hands import (
    HAND_SIZE,
    Hand,
    assert_distinct,
    make_cards_from_string,
    make_hand_from_string,
)

from .evaluation import (
    HandCategory,
    CATEGORY_LABELS,
    classify,
    compare,
    category_strength,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "ValidationError",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_LETTERS",
    "get_value_counts",
    "create_standard_deck",
    "sort_cards",
    # Hands
    "HAND_SIZE",
    "Hand",
    "assert_distinct",
    "make_cards_from_string",
    "make_hand_from_string",
    # Evaluation
    "HandCategory",
    "CATEGORY_LABELS",
    "classify",
    "compare",
    "category_strength",
]
