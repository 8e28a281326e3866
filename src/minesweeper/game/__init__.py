"""
Minesweeper game module.

Provides the board engine: generation, flood-fill reveal, flag
bookkeeping, win detection and the session state machine.
"""
from .cell import CellState, RenderHint, hint_for_code
from .settings import Difficulty, GameSettings, EASY, MEDIUM, HARD
from .board import Board
from .reveal import reveal
from .flags import FlagBudget, FlagOutcome, toggle_flag
from .rules import is_won
from .session import Action, GameSession, SessionState, TurnResult

__all__ = [
    "CellState",
    "RenderHint",
    "hint_for_code",
    "Difficulty",
    "GameSettings",
    "EASY",
    "MEDIUM",
    "HARD",
    "Board",
    "reveal",
    "FlagBudget",
    "FlagOutcome",
    "toggle_flag",
    "is_won",
    "Action",
    "GameSession",
    "SessionState",
    "TurnResult",
]
