from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Sequence


class HasRecord(Protocol):
    wins: int
    matches: int


@dataclass
class PlayerStats:
    """Ranked view of a single player. Rebuilt on every ranking pass."""

    player: Any
    rank: int
    win_percentage: float


class Medal(str, Enum):
    NONE = ""
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


_MEDALS = {1: Medal.GOLD, 2: Medal.SILVER, 3: Medal.BRONZE}


def win_ratio(wins: int, matches: int) -> float:
    return wins / matches if matches > 0 else 0.0


def compute_rankings(players: Sequence[HasRecord]) -> list[PlayerStats]:
    """Rank players by win percentage, then by total wins.

    Args:
        players: Records exposing ``wins`` and ``matches``. Duplicates are
            kept as-is.
    Returns:
        One ``PlayerStats`` per input player, ordered by rank. Ranks run
        ``1..n`` with no shared positions; players tied on both keys keep
        their input order.
    """
    stats = [
        PlayerStats(player=p, rank=0, win_percentage=win_ratio(p.wins, p.matches))
        for p in players
    ]
    # sorted() is stable, so equal keys keep input order.
    ranked = sorted(stats, key=lambda s: (-s.win_percentage, -s.player.wins))
    for i, s in enumerate(ranked):
        s.rank = i + 1
    return ranked


def format_win_percentage(wins: int, matches: int) -> str:
    """Return the win percentage (0-100) with exactly five decimals.

    Rounding follows ``format(x, ".5f")`` on the float value.
    """
    if matches == 0:
        return "0.00000"
    return f"{(wins / matches) * 100:.5f}"


def medal_for_rank(rank: int) -> Medal:
    return _MEDALS.get(rank, Medal.NONE)


def medal_class(rank: int) -> str:
    medal = medal_for_rank(rank)
    return f"medal-{medal.value}" if medal is not Medal.NONE else ""
