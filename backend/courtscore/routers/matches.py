# backend/courtscore/routers/matches.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_session
from ..models import Match, Player
from ..schemas import MatchCreate, MatchUpdate, MatchOut, TeamOut, PlayerNameOut
from ..scoring.badminton import Winner, determine_winner, is_game_complete
from ..services import (
    MatchResult,
    ValidationError,
    recompute_player_records,
    validate_badminton_score,
    validate_teams,
)
from ..exceptions import (
    MatchNotFound,
    MatchValidationFailed,
    ProblemDetail,
    UnknownPlayers,
)
from ..time_utils import coerce_utc, naive_utc

logger = logging.getLogger(__name__)

# Resource-only prefix; versioning is added in main.py
router = APIRouter(
    prefix="/matches",
    tags=["matches"],
    responses={
        400: {"model": ProblemDetail},
        404: {"model": ProblemDetail},
        422: {"model": ProblemDetail},
    },
)

_WINNER_LABELS = {Winner.TEAM1: "team1", Winner.TEAM2: "team2"}


def _team_ids(team: Any) -> list[str]:
    ids = team.get("playerIds") if isinstance(team, dict) else None
    return [pid for pid in ids if isinstance(pid, str)] if isinstance(ids, list) else []


def _team_score(team: Any) -> int:
    score = team.get("score") if isinstance(team, dict) else None
    if isinstance(score, bool) or not isinstance(score, int):
        return 0
    return score


def _match_result(m: Match) -> MatchResult:
    return MatchResult(
        team1=_team_ids(m.team1),
        team2=_team_ids(m.team2),
        score1=_team_score(m.team1),
        score2=_team_score(m.team2),
    )


async def _validated_teams(
    session: AsyncSession,
    body: MatchCreate,
    recorded: frozenset[str] = frozenset(),
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Check team and score rules, then that every new player id exists.

    Ids in ``recorded`` are already on the stored match and may belong to
    deleted players.
    """
    try:
        validate_teams(body.team1.playerIds, body.team2.playerIds)
        score1, score2 = validate_badminton_score(body.team1.score, body.team2.score)
    except ValidationError as e:
        raise MatchValidationFailed(e.detail)

    wanted = (set(body.team1.playerIds) | set(body.team2.playerIds)) - recorded
    if wanted:
        found = set(
            (
                await session.execute(
                    select(Player.id).where(Player.id.in_(sorted(wanted)))
                )
            )
            .scalars()
            .all()
        )
        missing = wanted - found
        if missing:
            raise UnknownPlayers(missing)

    return (
        {"playerIds": list(body.team1.playerIds), "score": score1},
        {"playerIds": list(body.team2.playerIds), "score": score2},
    )


async def _refresh_player_records(session: AsyncSession) -> None:
    """Rewrite every player's counters from the full match list."""

    players = (await session.execute(select(Player))).scalars().all()
    matches = (await session.execute(select(Match))).scalars().all()
    records = recompute_player_records(
        [p.id for p in players], [_match_result(m) for m in matches]
    )
    for p in players:
        rec = records[p.id]
        p.matches = rec.matches
        p.wins = rec.wins
        p.losses = rec.losses


async def _match_out(session: AsyncSession, m: Match) -> MatchOut:
    result = _match_result(m)
    ids = set(result.team1) | set(result.team2)
    players = {}
    if ids:
        rows = (
            await session.execute(select(Player).where(Player.id.in_(sorted(ids))))
        ).scalars().all()
        players = {p.id: p for p in rows}

    def team(player_ids: list[str], score: int) -> TeamOut:
        names = []
        for pid in player_ids:
            p = players.get(pid)
            if p is None:
                names.append(PlayerNameOut(id=pid, name="Deleted player"))
            else:
                names.append(PlayerNameOut(id=p.id, name=p.name, avatar=p.avatar))
        return TeamOut(players=names, score=score)

    winner = determine_winner(result.score1, result.score2)
    return MatchOut(
        id=m.id,
        date=coerce_utc(m.date),
        team1=team(list(result.team1), result.score1),
        team2=team(list(result.team2), result.score2),
        winner=_WINNER_LABELS.get(winner),
        complete=is_game_complete(result.score1, result.score2),
        createdAt=coerce_utc(m.created_at),
    )


@router.post("", response_model=MatchOut)
async def create_match(
    body: MatchCreate,
    session: AsyncSession = Depends(get_session),
):
    team1, team2 = await _validated_teams(session, body)
    mid = uuid.uuid4().hex
    m = Match(
        id=mid,
        date=naive_utc(body.date),
        team1=team1,
        team2=team2,
        created_at=naive_utc(datetime.now(timezone.utc)),
    )
    session.add(m)
    await _refresh_player_records(session)
    await session.commit()
    logger.info(
        "Recorded match %s (%d-%d)", mid, team1["score"], team2["score"]
    )
    return await _match_out(session, m)


@router.get("", response_model=list[MatchOut])
async def list_matches(session: AsyncSession = Depends(get_session)):
    rows = (
        await session.execute(select(Match).order_by(Match.date.desc(), Match.id))
    ).scalars().all()
    return [await _match_out(session, m) for m in rows]


@router.get("/{match_id}", response_model=MatchOut)
async def get_match(match_id: str, session: AsyncSession = Depends(get_session)):
    m = await session.get(Match, match_id)
    if not m:
        raise MatchNotFound(match_id)
    return await _match_out(session, m)


@router.put("/{match_id}", response_model=MatchOut)
async def update_match(
    match_id: str,
    body: MatchUpdate,
    session: AsyncSession = Depends(get_session),
):
    m = await session.get(Match, match_id)
    if not m:
        raise MatchNotFound(match_id)
    recorded = frozenset(_team_ids(m.team1)) | frozenset(_team_ids(m.team2))
    team1, team2 = await _validated_teams(session, body, recorded)
    m.date = naive_utc(body.date)
    m.team1 = team1
    m.team2 = team2
    await _refresh_player_records(session)
    await session.commit()
    return await _match_out(session, m)


@router.delete("/{match_id}", status_code=204)
async def delete_match(
    match_id: str,
    session: AsyncSession = Depends(get_session),
):
    m = await session.get(Match, match_id)
    if not m:
        raise MatchNotFound(match_id)
    await session.delete(m)
    await _refresh_player_records(session)
    await session.commit()
    logger.info("Deleted match %s", match_id)
    return Response(status_code=204)
