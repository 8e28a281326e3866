"""
Flood-fill reveal for Minesweeper.

Uncovers a cell and, when it has no adjacent bombs, every connected cell
reachable through zero-count cells.
"""
from .board import Board
from .cell import CellState


def reveal(board: Board, row: int, col: int) -> int:
    """
    Reveal a cell and expand through zero-count regions.

    Out-of-bounds and non-hidden targets are ignored, so the call is safe
    to make speculatively. Flagged cells are never uncovered by expansion.

    Args:
        board: Board to update in place.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Number of cells newly revealed.

    Raises:
        ValueError: If the target cell is a hidden bomb.
    """
    if not _can_reveal(board, row, col):
        return 0
    if board.is_bomb(row, col):
        raise ValueError(f"Cell ({row}, {col}) is a bomb")

    revealed = 0
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        # A cell can be pushed twice before it is popped.
        if not _can_reveal(board, current_row, current_col):
            continue

        count = board.count_adjacent_bombs(current_row, current_col)
        board.mark_revealed(current_row, current_col, count)
        revealed += 1

        if count == 0:
            for neighbor in board.neighbors(current_row, current_col):
                if _can_reveal(board, *neighbor):
                    stack.append(neighbor)

    return revealed


def _can_reveal(board: Board, row: int, col: int) -> bool:
    """Check if a cell is on the board and still hidden."""
    if not board.is_valid_position(row, col):
        return False
    return board.state_at(row, col) == CellState.HIDDEN
