#!/usr/bin/env python
"""Play a two-player five-card showdown in the terminal.

Deals two hands from a shuffled deck (or takes them from the command line),
prints each player's cards and category, and announces the winner.

Usage:
    python -m mini_poker.scripts.play
    python -m mini_poker.scripts.play --seed 42
    python -m mini_poker.scripts.play --hands "10H JH QH KH AH" "9S 9D 9C 9H 7S"
    python -m mini_poker.scripts.play --help

Exit status is 1 when the cards do not form two valid, distinct hands.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from mini_poker import resolve_seed
from mini_poker.engine import Showdown, ShowdownConfig, evaluate_showdown, play_showdown
from mini_poker.rules import Card, Hand, Suit, ValidationError, make_hand_from_string

logger = logging.getLogger(__name__)

SUIT_STYLES = {
    Suit.HEART: "bold red1",
    Suit.DIAMOND: "bold red1",
    Suit.CLUB: "bold green1",
    Suit.SPADE: "bold cyan1",
}


def get_card_rich_text(card: Card) -> Text:
    """Return a Rich Text object for a card, coloured by suit."""
    return Text(str(card), style=SUIT_STYLES[card.suit])


def get_hand_rich_text(hand: Hand) -> Text:
    return Text(" ").join(get_card_rich_text(c) for c in hand.cards)


def render_showdown(console: Console, showdown: Showdown) -> None:
    """Print both hands, their categories and the result."""
    players = (
        (1, showdown.hand_one, showdown.category_one),
        (2, showdown.hand_two, showdown.category_two),
    )
    for number, hand, category in players:
        console.print(Text(f"Player {number}'s hand: ").append_text(get_hand_rich_text(hand)))
        console.print(f"Player {number} has: {category.label}")

    if showdown.winner is None:
        console.print("It's a tie!", style="bold yellow")
    else:
        console.print(f"Player {showdown.winner} wins!", style="bold yellow")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player five-card poker showdown")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the shuffle (default: random, logged with --verbose)",
    )
    parser.add_argument(
        "--hands",
        nargs=2,
        metavar="HAND",
        default=None,
        help='Evaluate two given hands instead of dealing, e.g. "10H JH QH KH AH"',
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    console = Console(highlight=False)

    console.print("Welcome to Mini Poker Game!", style="bold")

    try:
        if args.hands:
            hand_one = make_hand_from_string(args.hands[0])
            hand_two = make_hand_from_string(args.hands[1])
            showdown = evaluate_showdown(hand_one, hand_two)
        else:
            seed = resolve_seed(args.seed)
            logger.debug("Using seed: %d", seed)
            showdown = play_showdown(ShowdownConfig(seed=seed))
    except ValidationError as e:
        logger.error("Validation failed (%s): %s", e.code, e)
        console.print(f"Game error: {e}", style="bold red", markup=False)
        return 1

    render_showdown(console, showdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
