"""Internal application services (pure helpers, no I/O)."""

from .validation import ValidationError, validate_badminton_score, validate_teams
from .records import MatchResult, PlayerRecord, recompute_player_records
from .stats import (
    Medal,
    PlayerStats,
    compute_rankings,
    format_win_percentage,
    medal_class,
    medal_for_rank,
)

__all__ = [
    "ValidationError",
    "validate_badminton_score",
    "validate_teams",
    "MatchResult",
    "PlayerRecord",
    "recompute_player_records",
    "Medal",
    "PlayerStats",
    "compute_rankings",
    "format_win_percentage",
    "medal_class",
    "medal_for_rank",
]
