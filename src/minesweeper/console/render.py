"""
Board rendering for the terminal.

Turns board grids into styled rich text. The board engine only supplies
render hints; symbols and colors live here.
"""
from typing import Dict, Mapping, Optional

import numpy as np
from rich.text import Text

from ..game.board import Board
from ..game.cell import RenderHint, hint_for_code


# ============================================================================
# Theme
# ============================================================================

SYMBOLS: Dict[RenderHint, str] = {
    RenderHint.BOMB: "*",
    RenderHint.FLAG: "F",
    RenderHint.HIDDEN: "-",
    RenderHint.EMPTY: " ",
}

DEFAULT_THEME: Dict[RenderHint, str] = {
    RenderHint.BOMB: "bold red",
    RenderHint.FLAG: "yellow",
    RenderHint.NUMBER: "blue",
    RenderHint.EMPTY: "green",
    RenderHint.HIDDEN: "grey50",
}


def symbol_for(code: int) -> str:
    """Character drawn for a grid code."""
    hint = hint_for_code(code)
    if hint == RenderHint.NUMBER:
        return str(code)
    return SYMBOLS[hint]


# ============================================================================
# Rendering
# ============================================================================

def render_grid(
    grid: np.ndarray, theme: Optional[Mapping[RenderHint, str]] = None
) -> Text:
    """
    Render a grid of cell codes with row and column labels.

    Sample output::

           0  1  2
         0 | -  -  -
         1 | -  F  2

    Args:
        grid: 2D array of visibility or truth codes.
        theme: Style per render hint (default: DEFAULT_THEME).

    Returns:
        Styled text ready for ``Console.print``.
    """
    theme = DEFAULT_THEME if theme is None else theme
    rows, cols = grid.shape

    text = Text("   ")
    for col in range(cols):
        text.append(f"{col:>2} ")
    text.append("\n")

    for row in range(rows):
        text.append(f"{row:>2} |")
        for col in range(cols):
            code = int(grid[row, col])
            style = theme.get(hint_for_code(code), "")
            text.append(symbol_for(code), style=style)
            text.append("  ")
        text.append("\n")

    text.rstrip()
    return text


def render_board(
    board: Board,
    reveal_all: bool = False,
    theme: Optional[Mapping[RenderHint, str]] = None,
) -> Text:
    """
    Render a board as the player sees it, or fully uncovered.

    Args:
        board: Board to draw.
        reveal_all: Show the truth board instead of the player's view.
        theme: Style per render hint.
    """
    grid = board.truth_observation() if reveal_all else board.get_observation()
    return render_grid(grid, theme)
