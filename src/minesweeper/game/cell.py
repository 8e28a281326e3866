"""
Cell module for Minesweeper game.

Defines the visibility codes stored in the board grid, the visual state
of a cell, and the render hint handed to the presentation layer.
"""
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

# Visibility grid codes. Revealed cells store their adjacent bomb count (0-8).
HIDDEN = -1
FLAGGED = -2

# Truth observation code for a bomb.
BOMB = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()

    @classmethod
    def from_code(cls, code: int) -> "CellState":
        """Map a visibility grid code to a state."""
        if code == HIDDEN:
            return cls.HIDDEN
        if code == FLAGGED:
            return cls.FLAGGED
        return cls.REVEALED


class RenderHint(Enum):
    """What the presentation layer should draw for a cell."""

    HIDDEN = auto()
    FLAG = auto()
    BOMB = auto()
    EMPTY = auto()
    NUMBER = auto()


def hint_for_code(code: int) -> RenderHint:
    """
    Convert a grid code to a render hint.

    Accepts both visibility codes and truth observation codes.
    """
    if code == HIDDEN:
        return RenderHint.HIDDEN
    if code == FLAGGED:
        return RenderHint.FLAG
    if code == BOMB:
        return RenderHint.BOMB
    if code == 0:
        return RenderHint.EMPTY
    return RenderHint.NUMBER

