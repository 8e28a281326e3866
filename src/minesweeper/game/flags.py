"""
Flag bookkeeping for Minesweeper.

A player may hold at most as many flags as there are bombs.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .board import Board
from .cell import CellState


class FlagOutcome(Enum):
    """Result of a flag toggle."""

    PLACED = auto()
    REMOVED = auto()
    NO_FLAGS_LEFT = auto()
    IGNORED = auto()


@dataclass
class FlagBudget:
    """
    Remaining flags a player may place.

    Attributes:
        capacity: Total flags available (the bomb count).
        remaining: Flags not yet placed.
    """

    capacity: int
    remaining: Optional[int] = None

    def __post_init__(self) -> None:
        """Start with a full budget unless told otherwise."""
        if self.capacity < 0:
            raise ValueError("Flag capacity cannot be negative")
        if self.remaining is None:
            self.remaining = self.capacity
        if not 0 <= self.remaining <= self.capacity:
            raise ValueError("Remaining flags must be within capacity")

    def take(self) -> bool:
        """Use one flag; False when none are left."""
        if self.remaining == 0:
            return False
        self.remaining -= 1
        return True

    def give_back(self) -> None:
        """Return one flag to the budget."""
        if self.remaining == self.capacity:
            raise ValueError("No placed flag to give back")
        self.remaining += 1


def toggle_flag(board: Board, budget: FlagBudget, row: int, col: int) -> FlagOutcome:
    """
    Place or remove a flag.

    Invalid toggles leave the board and budget untouched and are reported
    through the outcome rather than raised.

    Args:
        board: Board to update in place.
        budget: Flag budget owned by the session.
        row: Row index.
        col: Column index.

    Returns:
        What happened to the cell.
    """
    if not board.is_valid_position(row, col):
        return FlagOutcome.IGNORED

    state = board.state_at(row, col)
    if state == CellState.HIDDEN:
        if not budget.take():
            return FlagOutcome.NO_FLAGS_LEFT
        board.mark_flagged(row, col)
        return FlagOutcome.PLACED
    if state == CellState.FLAGGED:
        board.mark_hidden(row, col)
        budget.give_back()
        return FlagOutcome.REMOVED
    return FlagOutcome.IGNORED
