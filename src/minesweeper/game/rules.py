"""
Win detection for Minesweeper.
"""
from typing import Optional

from .board import Board


def is_won(board: Board, bomb_count: Optional[int] = None) -> bool:
    """
    Check if every non-bomb cell has been revealed.

    Flagged cells do not count as revealed. Losses are detected by the
    session when a bomb is targeted, not here.

    Args:
        board: Board to inspect.
        bomb_count: Bombs on the board (default: counted from the board).

    Returns:
        True if the game is won.
    """
    if bomb_count is None:
        bomb_count = board.bomb_count
    return board.revealed_count() == board.total_cells - bomb_count
