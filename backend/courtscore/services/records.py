from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..scoring.badminton import Winner, determine_winner, is_game_complete


@dataclass
class PlayerRecord:
    matches: int = 0
    wins: int = 0
    losses: int = 0


@dataclass(frozen=True)
class MatchResult:
    team1: Sequence[str]
    team2: Sequence[str]
    score1: int
    score2: int


def recompute_player_records(
    player_ids: Iterable[str], matches: Iterable[MatchResult]
) -> dict[str, PlayerRecord]:
    """Rebuild match/win/loss counters for ``player_ids`` from ``matches``.

    Only finished games count: tied and in-progress scores leave records
    untouched, so every record keeps ``matches == wins + losses``.
    Ids missing from ``player_ids`` are skipped.
    """
    records = {pid: PlayerRecord() for pid in player_ids}
    for m in matches:
        if not is_game_complete(m.score1, m.score2):
            continue
        winner = determine_winner(m.score1, m.score2)
        winners, losers = (
            (m.team1, m.team2) if winner is Winner.TEAM1 else (m.team2, m.team1)
        )
        for pid in winners:
            rec = records.get(pid)
            if rec is not None:
                rec.matches += 1
                rec.wins += 1
        for pid in losers:
            rec = records.get(pid)
            if rec is not None:
                rec.matches += 1
                rec.losses += 1
    return records
