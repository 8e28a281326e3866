"""
Main menu and interactive play loop.
"""
import logging
import random
from typing import Optional

from rich.console import Console

from ..config import AppConfig
from ..errors import ScoreLogUnavailableError
from ..game.session import GameSession, TurnResult
from ..game.settings import Difficulty, GameSettings
from ..scores.log import ScoreLog
from ..scores.ranking import player_stats, top_winners, winners_for
from .prompts import Prompter
from .render import DEFAULT_THEME, render_board

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

PLAY, HIGH_SCORES, PLAYER_STATS, HELP, EXIT = range(1, 6)

MENU_TEXT = (
    "\n===== MINESWEEPER MENU =====\n"
    "1. Play Game\n"
    "2. View High Scores\n"
    "3. Player Stats\n"
    "4. Help\n"
    "5. Exit\n"
    "============================="
)

HELP_TEXT = (
    "\n===== HOW TO PLAY =====\n"
    "- Goal: Reveal all non-bomb cells.\n"
    "- 'r' to reveal a cell.\n"
    "- 'f' to flag/unflag a cell.\n"
    "- You have one flag per bomb.\n"
    "- Avoid bombs!"
)

DIFFICULTY_PROMPT = "Select difficulty (1: Easy, 2: Medium, 3: Hard): "

_TURN_MESSAGES = {
    TurnResult.INVALID_ACTION: "Invalid action!",
    TurnResult.NO_FLAGS_LEFT: "No flags left.",
    TurnResult.CELL_FLAGGED: "Cell is flagged. Unflag it first.",
}


# ============================================================================
# Menu Application
# ============================================================================

class MenuApp:
    """
    Console front end.

    Shows the main menu, runs games and answers score queries.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
    ) -> None:
        """
        Initialize the application.

        Args:
            config: Runtime options.
            console: Output console (default: stdout).
            prompter: Input source (default: reads from the console).
        """
        self.config = config or AppConfig()
        self.console = console or Console(
            no_color=not self.config.color, highlight=False
        )
        self.prompter = prompter or Prompter(self.console)
        self.scores = ScoreLog(self.config.score_file)
        self.theme = DEFAULT_THEME
        self.rng = random.Random(self.config.seed)

    # ========================================================================
    # Main Menu
    # ========================================================================

    def run(self) -> None:
        """Show the menu until the player chooses to exit."""
        while True:
            self.console.print(MENU_TEXT)
            choice = self.prompter.ask_int("Enter your choice: ", PLAY, EXIT)
            if choice == EXIT:
                self.console.print("Exiting the game. Goodbye!")
                return

            if choice == PLAY:
                self.play()
            elif choice == HIGH_SCORES:
                self.show_high_scores()
            elif choice == PLAYER_STATS:
                self.show_player_stats()
            else:
                self.console.print(HELP_TEXT)

            self.prompter.pause()
            self.console.clear()

    # ========================================================================
    # Playing
    # ========================================================================

    def play(self) -> None:
        """Ask for a name, then play games until the player goes back."""
        name = self.prompter.ask_word("Enter your name: ")

        while True:
            number = self.prompter.ask_int(DIFFICULTY_PROMPT, 1, 3)
            settings = GameSettings.from_difficulty(Difficulty.from_number(number))
            session = GameSession(settings, name, rng=self.rng)
            session.start()

            self.play_session(session)
            self.save_result(session)

            self.console.print("\nWhat do you want to do next?")
            self.console.print("1. Play Again")
            self.console.print("2. Go Back to Main Menu")
            if self.prompter.ask_int("Enter choice: ", 1, 2) == 2:
                return

    def play_session(self, session: GameSession) -> None:
        """
        Run the turn loop of a started session until it ends.

        Args:
            session: Session whose board is already generated.
        """
        board = session.board
        last = board.size - 1

        while not session.is_over:
            self.console.print()
            self.console.print(render_board(board, theme=self.theme))
            self.console.print(f"Flags left: {session.flags.remaining}")

            row = self.prompter.ask_int("\nEnter row: ", 0, last)
            col = self.prompter.ask_int("Enter column: ", 0, last)
            if session.target_error(row, col) is not None:
                self.console.print("This cell is already revealed. Try again.")
                continue

            action = self.prompter.ask("Enter action (r to reveal, f to flag): ")
            result = session.play_turn(row, col, action)
            message = _TURN_MESSAGES.get(result)
            if message:
                self.console.print(message)

        if session.is_lost:
            self.console.print("\nBOOM! You hit a bomb!", style="bold red")
        else:
            self.console.print(
                "\nCongratulations! You cleared the minefield!", style="bold green"
            )
        self.console.print(render_board(board, reveal_all=True, theme=self.theme))
        self.console.print(f"Time taken: {session.elapsed_seconds}s")

    def save_result(self, session: GameSession) -> None:
        """Append the finished session to the score log."""
        record = session.to_record()
        try:
            self.scores.append(record)
        except ScoreLogUnavailableError as exc:
            logger.warning("%s", exc)
            self.console.print("Warning: your score could not be saved.")

    # ========================================================================
    # Score Queries
    # ========================================================================

    def show_high_scores(self) -> None:
        """List the fastest winners for a difficulty."""
        difficulty = self.prompter.ask_word(
            "Enter difficulty to filter (Easy/Medium/Hard): "
        ).lower()

        try:
            records = self.scores.read()
        except ScoreLogUnavailableError as exc:
            logger.debug("%s", exc)
            self.console.print("No high scores available.")
            return

        winners = winners_for(records, difficulty)
        if not winners:
            self.console.print(f"No winners for {difficulty}.", markup=False)
            return

        count = len(winners)
        top = self.prompter.ask_int(
            f"Enter number of top players to display (1-{count}): ", 1, count
        )
        self.console.print(f"\nTop {top} players for {difficulty}:", markup=False)
        for record in top_winners(records, difficulty, top):
            self.console.print(
                f"{record.name} - Time: {record.elapsed_seconds}s", markup=False
            )

    def show_player_stats(self) -> None:
        """Show totals for one player."""
        try:
            records = self.scores.read()
        except ScoreLogUnavailableError as exc:
            logger.debug("%s", exc)
            self.console.print("No player stats available.")
            return

        name = self.prompter.ask_word("Enter player name to view stats: ").lower()
        stats = player_stats(records, name)
        if stats is None:
            self.console.print(f"No records found for player {name}.", markup=False)
            return

        self.console.print(f"\nStats for player {name}:", markup=False)
        self.console.print(f"Total Games Played: {stats.games}")
        self.console.print(f"Wins: {stats.wins}")
        self.console.print(f"Losses: {stats.losses}")
        self.console.print(f"Average Time: {stats.average_seconds}s")
