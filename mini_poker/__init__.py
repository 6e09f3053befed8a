"""Mini Poker - five-card hand ranking.

Classifies five-card poker hands into the ten standard categories and
decides the winner of a two-player showdown.
"""

__version__ = "0.1.0"
__author__ = "Mini Poker Team"

from mini_poker.utils.seeding import resolve_seed

__all__ = ["__version__", "resolve_seed"]
