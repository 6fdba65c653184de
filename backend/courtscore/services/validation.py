from typing import Any, Sequence, Tuple

from ..scoring.badminton import is_valid_score

MAX_TEAM_SIZE = 2

INVALID_SCORE_MESSAGE = (
    "Invalid badminton score. Scores must follow badminton rules "
    "(21 points to win, must win by 2, max 30)"
)


class ValidationError(Exception):
    """Raised when submitted match data is invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def validate_teams(team1_ids: Sequence[str], team2_ids: Sequence[str]) -> None:
    """Validate the player ids on both sides of a match.

    Rules:
    - Each team has at least one and at most ``MAX_TEAM_SIZE`` players
    - No player id appears twice, within a team or across teams
    """

    for label, ids in (("Team 1", team1_ids), ("Team 2", team2_ids)):
        if len(ids) == 0:
            raise ValidationError(f"{label} must have at least one player")
        if len(ids) > MAX_TEAM_SIZE:
            raise ValidationError(
                f"{label} must have at most {MAX_TEAM_SIZE} players"
            )
        if len(set(ids)) != len(ids):
            raise ValidationError("A player cannot appear twice in the same team")

    all_ids = list(team1_ids) + list(team2_ids)
    if len(set(all_ids)) != len(all_ids):
        raise ValidationError("A player cannot be in both teams")


def _score_int(raw: Any) -> int:
    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(raw, bool):
        raise ValidationError("Scores must be integers.")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValidationError("Scores must be integers.")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Scores must be integers.")


def validate_badminton_score(score1: Any, score2: Any) -> Tuple[int, int]:
    a = _score_int(score1)
    b = _score_int(score2)
    if not is_valid_score(a, b):
        raise ValidationError(INVALID_SCORE_MESSAGE)
    return a, b
