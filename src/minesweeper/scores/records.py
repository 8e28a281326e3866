"""
Completed-game records.

A record is one line of the score log: ``name difficulty seconds outcome``.
"""
from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """How a game ended, as written to the score log."""

    WIN = "Win"
    LOSS = "Loss"


@dataclass(frozen=True)
class PlayerRecord:
    """
    Result of one completed game.

    Attributes:
        name: Player name (single token).
        difficulty: Difficulty label (single token).
        elapsed_seconds: Whole seconds the game took.
        outcome: Win or loss.
    """

    name: str
    difficulty: str
    elapsed_seconds: int
    outcome: Outcome

    def __post_init__(self) -> None:
        """Validate the record so it can always be written as one line."""
        for label, value in (("Name", self.name), ("Difficulty", self.difficulty)):
            if not value or len(value.split()) != 1 or value != value.strip():
                raise ValueError(f"{label} must be a single word: {value!r}")
        if self.elapsed_seconds < 0:
            raise ValueError("Elapsed time cannot be negative")

    @property
    def is_win(self) -> bool:
        """Check if the game was won."""
        return self.outcome == Outcome.WIN

    def to_line(self) -> str:
        """Format the record as a score log line (no newline)."""
        return (
            f"{self.name} {self.difficulty} "
            f"{self.elapsed_seconds} {self.outcome.value}"
        )

    @classmethod
    def from_line(cls, line: str) -> "PlayerRecord":
        """
        Parse a score log line.

        Args:
            line: Whitespace-separated ``name difficulty seconds outcome``.

        Returns:
            The parsed record.

        Raises:
            ValueError: If the line does not have that shape.
        """
        fields = line.split()
        if len(fields) != 4:
            raise ValueError(f"Expected 4 fields, got {len(fields)}")
        name, difficulty, seconds, outcome = fields
        return cls(
            name=name,
            difficulty=difficulty,
            elapsed_seconds=int(seconds),
            outcome=Outcome(outcome),
        )
