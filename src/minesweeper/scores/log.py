"""
Append-only score log stored as a plain text file.
"""
import logging
from pathlib import Path
from typing import List, Union

from ..errors import ScoreLogUnavailableError
from .records import PlayerRecord

logger = logging.getLogger(__name__)

DEFAULT_SCORE_FILE = "highscore.txt"


class ScoreLog:
    """
    Score log with one completed game per line.

    Every call opens and closes the file, so records written by one call
    are visible to the next.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SCORE_FILE) -> None:
        """
        Initialize the log.

        Args:
            path: Location of the score file.
        """
        self.path = Path(path)

    def append(self, record: PlayerRecord) -> None:
        """
        Append one record.

        Raises:
            ScoreLogUnavailableError: If the file cannot be written.
        """
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(record.to_line() + "\n")
        except OSError as exc:
            raise ScoreLogUnavailableError(
                f"Could not save score to {self.path}: {exc}"
            ) from exc
        logger.debug("Appended %r to %s", record, self.path)

    def read(self) -> List[PlayerRecord]:
        """
        Read every record in file order.

        Blank lines are skipped; malformed lines are skipped with a warning.

        Raises:
            ScoreLogUnavailableError: If the file is missing or unreadable.
        """
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                lines = handle.readlines()
        except OSError as exc:
            raise ScoreLogUnavailableError(
                f"Could not read scores from {self.path}: {exc}"
            ) from exc

        records = []
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                records.append(PlayerRecord.from_line(line))
            except ValueError as exc:
                logger.warning(
                    "Skipping malformed line %d in %s: %s", number, self.path, exc
                )
        return records
