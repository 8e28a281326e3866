"""
Game settings for Minesweeper.

Difficulty presets and the immutable per-session configuration derived
from them.
"""
from dataclasses import dataclass
from enum import Enum


# ============================================================================
# Constants
# ============================================================================

MIN_BOARD_SIZE = 2
MIN_BOMBS = 1


def bomb_count_for(size: int, density_percent: int) -> int:
    """
    Number of bombs for a square board at the given density.

    The count is floored, raised to at least one bomb.

    Args:
        size: Board side length.
        density_percent: Share of cells holding a bomb, in percent.

    Returns:
        Bomb count for the board.
    """
    return max(MIN_BOMBS, size * size * density_percent // 100)


class Difficulty(Enum):
    """Preset difficulty levels as (menu number, label, size, density %)."""

    EASY = (1, "Easy", 6, 15)
    MEDIUM = (2, "Medium", 8, 18)
    HARD = (3, "Hard", 12, 20)

    def __init__(
        self, number: int, label: str, size: int, density_percent: int
    ) -> None:
        self.number = number
        self.label = label
        self.size = size
        self.density_percent = density_percent

    @classmethod
    def from_number(cls, number: int) -> "Difficulty":
        """Look up a difficulty by its menu number."""
        for difficulty in cls:
            if difficulty.number == number:
                return difficulty
        raise ValueError(f"Unknown difficulty number: {number}")


# ============================================================================
# Game Settings
# ============================================================================

@dataclass(frozen=True)
class GameSettings:
    """
    Configuration for one game session.

    Attributes:
        size: Number of rows and columns.
        bomb_count: Total bombs to place.
        difficulty: Difficulty label recorded with the result.
    """

    size: int
    bomb_count: int
    difficulty: str

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}")
        if self.bomb_count < MIN_BOMBS:
            raise ValueError(f"Board needs at least {MIN_BOMBS} bomb")
        max_bombs = self.size * self.size - 1
        if self.bomb_count > max_bombs:
            raise ValueError(f"Too many bombs (max {max_bombs})")
        if not self.difficulty or any(ch.isspace() for ch in self.difficulty):
            raise ValueError("Difficulty label must be a single word")

    @classmethod
    def from_difficulty(cls, difficulty: Difficulty) -> "GameSettings":
        """Derive settings from a difficulty preset."""
        return cls(
            size=difficulty.size,
            bomb_count=bomb_count_for(difficulty.size, difficulty.density_percent),
            difficulty=difficulty.label,
        )


# Preset settings
EASY = GameSettings.from_difficulty(Difficulty.EASY)
MEDIUM = GameSettings.from_difficulty(Difficulty.MEDIUM)
HARD = GameSettings.from_difficulty(Difficulty.HARD)
