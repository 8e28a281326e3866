"""
Unit tests for difficulty presets and game settings.
"""
import pytest
from minesweeper.game import Difficulty, EASY, GameSettings, HARD, MEDIUM
from minesweeper.game.settings import bomb_count_for


# ============================================================================
# Preset Tests
# ============================================================================

class TestPresets:
    """Test the three difficulty presets."""

    def test_easy_preset(self) -> None:
        """Easy is 6x6 with 15% bombs (5)."""
        assert (EASY.size, EASY.bomb_count, EASY.difficulty) == (6, 5, "Easy")

    def test_medium_preset(self) -> None:
        """Medium is 8x8 with 18% bombs (11)."""
        assert (MEDIUM.size, MEDIUM.bomb_count, MEDIUM.difficulty) == (
            8, 11, "Medium",
        )

    def test_hard_preset(self) -> None:
        """Hard is 12x12 with 20% bombs (28)."""
        assert (HARD.size, HARD.bomb_count, HARD.difficulty) == (12, 28, "Hard")

    def test_settings_are_frozen(self) -> None:
        """Settings cannot change during a session."""
        with pytest.raises(AttributeError):
            EASY.size = 10


# ============================================================================
# Difficulty Lookup Tests
# ============================================================================

class TestDifficulty:
    """Test difficulty lookups."""

    @pytest.mark.parametrize(
        "number, difficulty",
        [(1, Difficulty.EASY), (2, Difficulty.MEDIUM), (3, Difficulty.HARD)],
    )
    def test_from_number(self, number: int, difficulty: Difficulty) -> None:
        """Menu numbers map to presets."""
        assert Difficulty.from_number(number) is difficulty

    def test_from_number_unknown(self) -> None:
        """Unknown numbers raise ValueError."""
        with pytest.raises(ValueError):
            Difficulty.from_number(4)


# ============================================================================
# Validation Tests
# ============================================================================

class TestValidation:
    """Test settings validation."""

    def test_size_one_is_rejected(self) -> None:
        """Boards must be at least 2x2."""
        with pytest.raises(ValueError, match="at least 2"):
            GameSettings(size=1, bomb_count=1, difficulty="Tiny")

    def test_zero_bombs_is_rejected(self) -> None:
        """At least one bomb is required."""
        with pytest.raises(ValueError, match="at least 1 bomb"):
            GameSettings(size=4, bomb_count=0, difficulty="Custom")

    def test_too_many_bombs_is_rejected(self) -> None:
        """At least one cell must stay safe."""
        with pytest.raises(ValueError, match="Too many bombs"):
            GameSettings(size=3, bomb_count=9, difficulty="Custom")

    def test_max_bombs_is_valid(self) -> None:
        """size^2 - 1 bombs is the maximum."""
        settings = GameSettings(size=3, bomb_count=8, difficulty="Custom")
        assert settings.bomb_count == 8

    def test_label_with_space_is_rejected(self) -> None:
        """Labels are written to the score log as one word."""
        with pytest.raises(ValueError, match="single word"):
            GameSettings(size=4, bomb_count=2, difficulty="Very Hard")

    @pytest.mark.parametrize(
        "size, density, expected",
        [(6, 15, 5), (8, 18, 11), (12, 20, 28), (2, 1, 1), (10, 0, 1)],
    )
    def test_bomb_count_for(self, size: int, density: int, expected: int) -> None:
        """Bomb counts are floored, with a minimum of one."""
        assert bomb_count_for(size, density) == expected
