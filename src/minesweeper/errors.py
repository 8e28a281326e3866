"""
Exception hierarchy for the Minesweeper package.
"""


class MinesweeperError(Exception):
    """Base class for all package errors."""


class GameOverError(MinesweeperError):
    """Raised when a finished session is asked to play another turn."""


class GameInProgressError(MinesweeperError):
    """Raised when a result is requested before the session has ended."""


class ScoreLogUnavailableError(MinesweeperError):
    """Raised when the score log cannot be read or written."""
