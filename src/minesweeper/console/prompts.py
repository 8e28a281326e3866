"""
Validated console input.

Every prompt re-asks until it gets an acceptable answer, so callers only
ever see clean values.
"""
from typing import Callable, Optional

from rich.console import Console


class Prompter:
    """Reads and validates player input."""

    def __init__(
        self,
        console: Console,
        read: Optional[Callable[[str], str]] = None,
    ) -> None:
        """
        Initialize the prompter.

        Args:
            console: Console used for error messages.
            read: Function that shows a prompt and returns one line
                (default: ``console.input``).
        """
        self.console = console
        self._read = read or console.input

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the raw answer."""
        return self._read(prompt)

    def ask_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """
        Ask until the answer is an integer in [minimum, maximum].

        Args:
            prompt: Text shown before each attempt.
            minimum: Smallest accepted value.
            maximum: Largest accepted value.
        """
        while True:
            answer = self.ask(prompt)
            try:
                value = int(answer.strip())
            except ValueError:
                value = None
            if value is not None and minimum <= value <= maximum:
                return value
            self.console.print(
                f"Invalid input. Enter a number between {minimum} and {maximum}."
            )

    def ask_word(self, prompt: str) -> str:
        """Ask until the answer is non-blank; keeps only the first word."""
        while True:
            words = self.ask(prompt).split()
            if words:
                return words[0]
            self.console.print("Please enter a single word.")

    def pause(self) -> None:
        """Wait for the player to press Enter."""
        self.ask("Press Enter to continue...")
