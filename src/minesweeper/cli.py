"""
Command-line entry point.

Usage:
    minesweeper [--scores PATH] [--seed N] [--no-color] [--verbose]
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig
from .console.menu import MenuApp
from .scores.log import DEFAULT_SCORE_FILE


def parse_args(argv: Optional[List[str]] = None) -> AppConfig:
    """Parse command-line options into an application config."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in your terminal"
    )
    parser.add_argument(
        "--scores",
        default=DEFAULT_SCORE_FILE,
        help="Path of the score log file",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for board generation"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Draw the board without colors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    return AppConfig(
        score_file=args.scores,
        seed=args.seed,
        color=not args.no_color,
        verbose=args.verbose,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the menu."""
    config = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    app = MenuApp(config)
    try:
        app.run()
    except (EOFError, KeyboardInterrupt) as exc:
        app.console.print("\nGoodbye!")
        return 130 if isinstance(exc, KeyboardInterrupt) else 0
    return 0
