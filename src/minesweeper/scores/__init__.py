"""
Score persistence module.

Records completed games in a plain text log and answers ranking and
per-player statistics queries.
"""
from .records import Outcome, PlayerRecord
from .log import DEFAULT_SCORE_FILE, ScoreLog
from .ranking import PlayerStats, player_stats, top_winners, winners_for

__all__ = [
    "Outcome",
    "PlayerRecord",
    "DEFAULT_SCORE_FILE",
    "ScoreLog",
    "PlayerStats",
    "player_stats",
    "top_winners",
    "winners_for",
]
