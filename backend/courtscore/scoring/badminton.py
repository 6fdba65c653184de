"""Badminton scoring rules.

Rally scoring to 21 points with a win-by-2 requirement and a 30-point cap.
Only single games are modelled: a score is one ``(team1, team2)`` pair.
"""

from enum import IntEnum

POINTS_TO = 21
WIN_BY = 2
MAX_POINT = 30


class Winner(IntEnum):
    NONE = 0
    TEAM1 = 1
    TEAM2 = 2


def is_valid_score(score1: int, score2: int) -> bool:
    """Return ``True`` if ``score1``-``score2`` is a legal game score.

    Scores below 21 are games still in progress and are always accepted.
    At or above 21 only terminal scores pass: 21 with the loser on 19 or
    fewer, a two point lead beyond 21, or 30-29 at the cap.
    """

    if score1 < 0 or score2 < 0:
        return False
    if score1 > MAX_POINT or score2 > MAX_POINT:
        return False

    hi = max(score1, score2)
    lo = min(score1, score2)

    if hi < POINTS_TO:
        return True
    if hi == POINTS_TO and lo <= POINTS_TO - WIN_BY:
        return True
    if hi > POINTS_TO and hi - lo == WIN_BY:
        return True
    if hi == MAX_POINT and lo == MAX_POINT - 1:
        return True
    return False


def is_game_complete(score1: int, score2: int) -> bool:
    """Return ``True`` for a valid score that ends the game."""

    return is_valid_score(score1, score2) and max(score1, score2) >= POINTS_TO


def determine_winner(score1: int, score2: int) -> Winner:
    # Plain comparison; in-progress and invalid scores are tolerated.
    if score1 > score2:
        return Winner.TEAM1
    if score1 < score2:
        return Winner.TEAM2
    return Winner.NONE
