"""
Board module for Minesweeper game.

Holds the truth grid (where the bombs are) and the visibility grid (what
the player sees), and implements bomb placement around a safe cell.
"""
import logging
import random
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import BOMB, FLAGGED, HIDDEN, CellState
from .settings import MIN_BOARD_SIZE, MIN_BOMBS, GameSettings, bomb_count_for

logger = logging.getLogger(__name__)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Square Minesweeper board.

    The truth grid is a boolean numpy array (True = bomb). The visibility
    grid is an int8 numpy array using the codes from the cell module:
    -1 hidden, -2 flagged, 0-8 revealed with that adjacent bomb count.
    """

    def __init__(self, bombs: np.ndarray) -> None:
        """
        Initialize a board from a bomb layout, every cell hidden.

        Args:
            bombs: Square boolean array, True where a bomb is.
        """
        bombs = np.asarray(bombs, dtype=bool)
        if bombs.ndim != 2 or bombs.shape[0] != bombs.shape[1]:
            raise ValueError("Bomb layout must be a square grid")
        if bombs.shape[0] < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}")
        self.size = bombs.shape[0]
        self._bombs = bombs.copy()
        self._visible = np.full((self.size, self.size), HIDDEN, dtype=np.int8)

    # ========================================================================
    # Construction (Low-level)
    # ========================================================================

    @classmethod
    def generate(
        cls,
        size: int,
        bomb_density_percent: int,
        safe_row: int,
        safe_col: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Generate a board with random bombs, keeping one cell bomb-free.

        Args:
            size: Number of rows and columns.
            bomb_density_percent: Share of cells holding a bomb, in percent.
            safe_row: Row of the cell that must stay bomb-free.
            safe_col: Column of the cell that must stay bomb-free.
            rng: Random source (default: module-level random).

        Returns:
            New board with all cells hidden.
        """
        bomb_count = bomb_count_for(size, bomb_density_percent)
        return cls._generate(size, bomb_count, safe_row, safe_col, rng)

    @classmethod
    def from_settings(
        cls,
        settings: GameSettings,
        safe_row: int,
        safe_col: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Generate a board for the given session settings."""
        return cls._generate(
            settings.size, settings.bomb_count, safe_row, safe_col, rng
        )

    @classmethod
    def from_layout(cls, bombs: Sequence[Sequence[bool]]) -> "Board":
        """
        Build a board with a fixed bomb layout.

        Args:
            bombs: Rows of booleans (or 0/1), True where a bomb is.

        Returns:
            New board with all cells hidden.
        """
        return cls(np.array(bombs, dtype=bool))

    @classmethod
    def _generate(
        cls,
        size: int,
        bomb_count: int,
        safe_row: int,
        safe_col: int,
        rng: Optional[random.Random],
    ) -> "Board":
        """Validate arguments, then place bombs by rejection sampling."""
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}")
        if not (0 <= safe_row < size and 0 <= safe_col < size):
            raise ValueError(f"Safe cell ({safe_row}, {safe_col}) is off the board")
        if bomb_count < MIN_BOMBS or bomb_count >= size * size:
            raise ValueError(
                f"Bomb count must be between {MIN_BOMBS} and {size * size - 1}"
            )

        bombs = np.zeros((size, size), dtype=bool)
        cls._place_bombs(bombs, bomb_count, (safe_row, safe_col), rng or random)
        logger.debug(
            "Generated %dx%d board with %d bombs, safe cell (%d, %d)",
            size, size, bomb_count, safe_row, safe_col,
        )
        return cls(bombs)

    @staticmethod
    def _place_bombs(
        bombs: np.ndarray,
        bomb_count: int,
        exclude: Tuple[int, int],
        rng,
    ) -> None:
        """
        Place bombs uniformly at random, excluding a specific cell.

        Args:
            bombs: Truth grid to fill in place.
            bomb_count: Number of bombs to place.
            exclude: (row, col) position to keep bomb-free.
            rng: Object with a randint method.
        """
        size = bombs.shape[0]
        placed = 0
        while placed < bomb_count:
            row = rng.randint(0, size - 1)
            col = rng.randint(0, size - 1)
            if (row, col) == exclude or bombs[row, col]:
                continue
            bombs[row, col] = True
            placed += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def count_adjacent_bombs(self, row: int, col: int) -> int:
        """Count bombs in the 8 cells around a position."""
        window = self._bombs[max(0, row - 1):row + 2, max(0, col - 1):col + 2]
        return int(np.count_nonzero(window)) - int(self._bombs[row, col])

    # ========================================================================
    # Visibility Updates (Mid-level)
    # ========================================================================

    def mark_revealed(self, row: int, col: int, adjacent_bombs: int) -> None:
        """Store a revealed cell with its adjacent bomb count."""
        if not 0 <= adjacent_bombs <= 8:
            raise ValueError(f"Adjacent bomb count out of range: {adjacent_bombs}")
        self._visible[row, col] = adjacent_bombs

    def mark_flagged(self, row: int, col: int) -> None:
        """Put a flag on a cell."""
        self._visible[row, col] = FLAGGED

    def mark_hidden(self, row: int, col: int) -> None:
        """Return a cell to the hidden state."""
        self._visible[row, col] = HIDDEN

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def bomb_count(self) -> int:
        """Number of bombs on the board."""
        return int(np.count_nonzero(self._bombs))

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    def is_bomb(self, row: int, col: int) -> bool:
        """Check whether a cell holds a bomb."""
        return bool(self._bombs[row, col])

    def state_at(self, row: int, col: int) -> CellState:
        """Get the visual state of a cell."""
        return CellState.from_code(int(self._visible[row, col]))

    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return int(np.count_nonzero(self._visible >= 0))

    def get_observation(self) -> np.ndarray:
        """
        Get the visibility grid as the player sees it.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
        """
        return self._visible.copy()

    def truth_observation(self) -> np.ndarray:
        """
        Get the full truth board, every cell shown as if revealed.

        Returns:
            2D int8 array with 9 for bombs and the adjacent count elsewhere.
        """
        padded = np.pad(self._bombs.astype(np.int8), 1)
        counts = np.zeros((self.size, self.size), dtype=np.int8)
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                counts += padded[
                    1 + delta_row:1 + delta_row + self.size,
                    1 + delta_col:1 + delta_col + self.size,
                ]
        counts[self._bombs] = BOMB
        return counts
