"""
Game session for Minesweeper.

Runs one playthrough: generates the board around a safe starting cell,
applies reveal and flag actions, and tracks the outcome and elapsed time.
"""
import logging
import random
import time
from enum import Enum, auto
from typing import Callable, Optional, Union

from ..errors import GameInProgressError, GameOverError, MinesweeperError
from ..scores.records import Outcome, PlayerRecord
from .board import Board
from .cell import CellState
from .flags import FlagBudget, FlagOutcome, toggle_flag
from .reveal import reveal
from .rules import is_won
from .settings import GameSettings

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class SessionState(Enum):
    """Possible states of a session."""

    AWAITING_INPUT = auto()
    WON = auto()
    LOST = auto()


class Action(Enum):
    """Player actions on a target cell."""

    REVEAL = "r"
    FLAG = "f"

    @classmethod
    def parse(cls, text: str) -> Optional["Action"]:
        """
        Parse a single action character, ignoring case.

        Returns:
            The action, or None if the text is not a known action.
        """
        key = text.strip().lower()
        for action in cls:
            if action.value == key:
                return action
        return None


class TurnResult(Enum):
    """What a single turn did."""

    OUT_OF_BOUNDS = auto()
    ALREADY_REVEALED = auto()
    INVALID_ACTION = auto()
    FLAG_PLACED = auto()
    FLAG_REMOVED = auto()
    NO_FLAGS_LEFT = auto()
    CELL_FLAGGED = auto()
    REVEALED = auto()
    WON = auto()
    LOST = auto()


_FLAG_RESULTS = {
    FlagOutcome.PLACED: TurnResult.FLAG_PLACED,
    FlagOutcome.REMOVED: TurnResult.FLAG_REMOVED,
    FlagOutcome.NO_FLAGS_LEFT: TurnResult.NO_FLAGS_LEFT,
}


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One playthrough of Minesweeper.

    The session owns its board, flag budget and timer; nothing is shared
    between sessions.
    """

    def __init__(
        self,
        settings: GameSettings,
        player_name: str = "Player",
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the session.

        Args:
            settings: Board size, bomb count and difficulty label.
            player_name: Name recorded with the result.
            rng: Random source for the safe cell and bomb placement.
            clock: Wall-clock time source in seconds.
        """
        self.settings = settings
        self.player_name = player_name
        self.flags = FlagBudget(settings.bomb_count)
        self._rng = rng or random.Random()
        self._clock = clock
        self._board: Optional[Board] = None
        self._state = SessionState.AWAITING_INPUT
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def start(
        self, safe_row: Optional[int] = None, safe_col: Optional[int] = None
    ) -> Board:
        """
        Generate the board and reveal the safe starting cell.

        Args:
            safe_row: Row of the safe cell (default: random).
            safe_col: Column of the safe cell (default: random).

        Returns:
            The generated board.
        """
        if self._board is not None:
            raise MinesweeperError("Session already started")

        size = self.settings.size
        if safe_row is None:
            safe_row = self._rng.randrange(size)
        if safe_col is None:
            safe_col = self._rng.randrange(size)

        board = Board.from_settings(self.settings, safe_row, safe_col, self._rng)
        return self.start_with_board(board, safe_row, safe_col)

    def start_with_board(self, board: Board, safe_row: int, safe_col: int) -> Board:
        """
        Start on a prepared board, revealing the given safe cell.

        Args:
            board: Board matching the session settings.
            safe_row: Row of a bomb-free cell to reveal first.
            safe_col: Column of a bomb-free cell to reveal first.

        Returns:
            The board.
        """
        if self._board is not None:
            raise MinesweeperError("Session already started")
        if board.size != self.settings.size:
            raise ValueError("Board size does not match settings")
        if board.bomb_count != self.settings.bomb_count:
            raise ValueError("Board bomb count does not match settings")
        if not board.is_valid_position(safe_row, safe_col):
            raise ValueError(f"Safe cell ({safe_row}, {safe_col}) is off the board")
        if board.is_bomb(safe_row, safe_col):
            raise ValueError(f"Safe cell ({safe_row}, {safe_col}) is a bomb")

        self._board = board
        reveal(board, safe_row, safe_col)
        self._start_time = self._clock()
        logger.debug(
            "Session for %s started on %s board", self.player_name,
            self.settings.difficulty,
        )
        if is_won(board, self.settings.bomb_count):
            self._finish(SessionState.WON)
        return board

    def _finish(self, state: SessionState) -> None:
        """Enter a terminal state and stop the timer."""
        self._state = state
        self._end_time = self._clock()
        logger.debug(
            "Session for %s ended %s after %ds",
            self.player_name, state.name, self.elapsed_seconds,
        )

    # ========================================================================
    # Turns
    # ========================================================================

    def target_error(self, row: int, col: int) -> Optional[TurnResult]:
        """
        Check whether a cell can be targeted.

        Hidden and flagged cells are legal targets.

        Returns:
            None for a legal target, otherwise the rejection result.
        """
        board = self.board
        if not board.is_valid_position(row, col):
            return TurnResult.OUT_OF_BOUNDS
        if board.state_at(row, col) == CellState.REVEALED:
            return TurnResult.ALREADY_REVEALED
        return None

    def play_turn(
        self, row: int, col: int, action: Union[Action, str]
    ) -> TurnResult:
        """
        Apply one action to a target cell.

        Args:
            row: Target row.
            col: Target column.
            action: Action or its single-character form.

        Returns:
            What the turn did. Rejected targets and unknown actions leave
            the session unchanged.

        Raises:
            GameOverError: If the session has already ended.
        """
        if self.is_over:
            raise GameOverError("Game is already over")

        rejection = self.target_error(row, col)
        if rejection is not None:
            return rejection

        if isinstance(action, str):
            action = Action.parse(action)
        if action is None:
            return TurnResult.INVALID_ACTION

        if action == Action.FLAG:
            return _FLAG_RESULTS[toggle_flag(self.board, self.flags, row, col)]
        return self._reveal(row, col)

    def _reveal(self, row: int, col: int) -> TurnResult:
        """Reveal a target cell and evaluate the outcome."""
        board = self.board
        if board.is_bomb(row, col):
            self._finish(SessionState.LOST)
            return TurnResult.LOST

        # A flag protects a safe cell until the player removes it.
        if board.state_at(row, col) == CellState.FLAGGED:
            return TurnResult.CELL_FLAGGED
        reveal(board, row, col)

        if is_won(board, self.settings.bomb_count):
            self._finish(SessionState.WON)
            return TurnResult.WON
        return TurnResult.REVEALED

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """The session's board."""
        if self._board is None:
            raise MinesweeperError("Session has not started")
        return self._board

    @property
    def state(self) -> SessionState:
        """Get current session state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the session reached a terminal state."""
        return self._state != SessionState.AWAITING_INPUT

    @property
    def is_won(self) -> bool:
        """Check if the session was won."""
        return self._state == SessionState.WON

    @property
    def is_lost(self) -> bool:
        """Check if the session was lost."""
        return self._state == SessionState.LOST

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds from start to the end of the game (or to now)."""
        if self._start_time is None:
            return 0
        end = self._end_time if self._end_time is not None else self._clock()
        return int(end - self._start_time)

    def to_record(self) -> PlayerRecord:
        """
        Build the score record for a finished session.

        Raises:
            GameInProgressError: If the session has not ended.
        """
        if not self.is_over:
            raise GameInProgressError("Game is still in progress")
        outcome = Outcome.WIN if self.is_won else Outcome.LOSS
        return PlayerRecord(
            name=self.player_name,
            difficulty=self.settings.difficulty,
            elapsed_seconds=self.elapsed_seconds,
            outcome=outcome,
        )
