"""
Ranking and per-player statistics over score records.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .records import PlayerRecord


# ============================================================================
# Ranking
# ============================================================================

def winners_for(
    records: Iterable[PlayerRecord], difficulty: str
) -> List[PlayerRecord]:
    """
    Winning records for a difficulty, fastest first.

    The difficulty is matched ignoring case. Ties keep log order.

    Args:
        records: Records to search.
        difficulty: Difficulty label to match.

    Returns:
        Matching wins sorted by elapsed time.
    """
    wanted = difficulty.lower()
    wins = [
        record for record in records
        if record.is_win and record.difficulty.lower() == wanted
    ]
    return sorted(wins, key=lambda record: record.elapsed_seconds)


def top_winners(
    records: Iterable[PlayerRecord], difficulty: str, limit: int
) -> List[PlayerRecord]:
    """
    Fastest winning records for a difficulty.

    Args:
        records: Records to search.
        difficulty: Difficulty label to match, ignoring case.
        limit: Maximum number of records to return.

    Returns:
        Up to ``limit`` wins, fastest first.
    """
    if limit < 0:
        raise ValueError("Limit cannot be negative")
    return winners_for(records, difficulty)[:limit]


# ============================================================================
# Player Statistics
# ============================================================================

@dataclass(frozen=True)
class PlayerStats:
    """Aggregate results for one player."""

    name: str
    games: int
    wins: int
    losses: int
    total_seconds: int

    @property
    def average_seconds(self) -> int:
        """Average game time in whole seconds."""
        if self.games == 0:
            return 0
        return self.total_seconds // self.games


def player_stats(
    records: Iterable[PlayerRecord], name: str
) -> Optional[PlayerStats]:
    """
    Aggregate every game played under a name, ignoring case.

    Returns:
        Statistics, or None if the player has no records.
    """
    wanted = name.lower()
    games = wins = total = 0
    for record in records:
        if record.name.lower() != wanted:
            continue
        games += 1
        total += record.elapsed_seconds
        if record.is_win:
            wins += 1

    if games == 0:
        return None
    return PlayerStats(
        name=name,
        games=games,
        wins=wins,
        losses=games - wins,
        total_seconds=total,
    )
