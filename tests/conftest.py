"""
Pytest configuration and shared fixtures.
"""
import io
import random
import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from minesweeper.game import Board, EASY, GameSession
from minesweeper.scores import ScoreLog


# ============================================================================
# Layouts
# ============================================================================

# 6x6 Easy layout: five bombs down the right-hand column, (5, 5) safe.
# Revealing (0, 0) uncovers the 30 cells of columns 0-4; (5, 5) is the
# only safe cell left after that.
EASY_LAYOUT = [
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0],
]

# 3x3 layout with a single bomb in the centre: every other cell shows 1.
CENTER_LAYOUT = [
    [0, 0, 0],
    [0, 1, 0],
    [0, 0, 0],
]


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedInput:
    """Input source that replays prepared answers and records prompts."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("No more scripted input")
        return self.answers.pop(0)


def make_console() -> Console:
    """Console writing to memory without colors."""
    return Console(file=io.StringIO(), no_color=True, width=120, highlight=False)


def console_output(console: Console) -> str:
    """Everything printed to a console built by make_console."""
    return console.file.getvalue()


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def easy_board() -> Board:
    """Create the fixed 6x6 board with 5 bombs."""
    return Board.from_layout(EASY_LAYOUT)


@pytest.fixture
def center_board() -> Board:
    """Create a 3x3 board with one bomb in the centre."""
    return Board.from_layout(CENTER_LAYOUT)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no bombs for cascade testing."""
    return Board.from_layout([[0] * 5 for _ in range(5)])


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Controllable wall clock."""
    return FakeClock()


@pytest.fixture
def easy_session(easy_board: Board, clock: FakeClock) -> GameSession:
    """Easy session started at (0, 0) on the fixed layout."""
    session = GameSession(EASY, "alice", clock=clock)
    session.start_with_board(easy_board, 0, 0)
    return session


# ============================================================================
# Score Fixtures
# ============================================================================

@pytest.fixture
def score_path(tmp_path: Path) -> Path:
    """Location for a score log that does not exist yet."""
    return tmp_path / "highscore.txt"


@pytest.fixture
def score_log(score_path: Path) -> ScoreLog:
    """Score log in a temporary directory."""
    return ScoreLog(score_path)

