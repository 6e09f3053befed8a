"""Two-player showdown engine.

This module provides:
- ShowdownConfig: Showdown configuration
- Showdown: Result of comparing two hands
- play_showdown: Deal and evaluate two hands from a shuffled deck
- evaluate_showdown: Evaluate two caller-supplied hands
"""

from .showdown import (
    NUM_PLAYERS,
    ShowdownConfig,
    Showdown,
    shuffle_deck,
    deal_hand,
    evaluate_showdown,
    play_showdown,
)

__all__ = [
    "NUM_PLAYERS",
    "ShowdownConfig",
    "Showdown",
    "shuffle_deck",
    "deal_hand",
    "evaluate_showdown",
    "play_showdown",
]
