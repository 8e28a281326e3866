"""
Application configuration.
"""
from dataclasses import dataclass
from typing import Optional

from .scores.log import DEFAULT_SCORE_FILE


@dataclass
class AppConfig:
    """
    Runtime options for the console game.

    Attributes:
        score_file: Path of the score log.
        seed: Random seed for reproducible boards (None = random).
        color: Whether to draw the board in color.
        verbose: Whether to emit debug logging.
    """

    score_file: str = DEFAULT_SCORE_FILE
    seed: Optional[int] = None
    color: bool = True
    verbose: bool = False
