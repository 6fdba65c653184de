import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, Query
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ..avatars import avatar_options, random_avatar
from ..db import get_session
from ..models import Player
from ..schemas import PlayerCreate, PlayerUpdate, PlayerOut, PlayerListOut
from ..exceptions import ProblemDetail, PlayerNotFound
from ..services import format_win_percentage
from ..time_utils import coerce_utc, naive_utc

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/players",
    tags=["players"],
    responses={400: {"model": ProblemDetail}, 404: {"model": ProblemDetail}},
)


def player_out(p: Player) -> PlayerOut:
    return PlayerOut(
        id=p.id,
        name=p.name,
        avatar=p.avatar,
        matches=p.matches or 0,
        wins=p.wins or 0,
        losses=p.losses or 0,
        winPercentage=format_win_percentage(p.wins or 0, p.matches or 0),
        createdAt=coerce_utc(p.created_at),
    )


@router.post("", response_model=PlayerOut)
async def create_player(
    body: PlayerCreate,
    session: AsyncSession = Depends(get_session),
):
    pid = uuid.uuid4().hex
    p = Player(
        id=pid,
        name=body.name,
        avatar=body.avatar or random_avatar(),
        matches=0,
        wins=0,
        losses=0,
        created_at=naive_utc(datetime.now(timezone.utc)),
    )
    session.add(p)
    await session.commit()
    logger.info("Created player %s (%s)", pid, p.name)
    return player_out(p)


@router.get("", response_model=PlayerListOut)
async def list_players(session: AsyncSession = Depends(get_session)):
    total = (await session.execute(select(func.count()).select_from(Player))).scalar()
    rows = (
        await session.execute(select(Player).order_by(Player.created_at, Player.id))
    ).scalars().all()
    return PlayerListOut(players=[player_out(p) for p in rows], total=total or 0)


# Registered before "/{player_id}" so "avatars" is not taken for an id.
@router.get("/avatars", response_model=list[str])
async def list_avatar_options(count: int = Query(24, ge=1, le=100)):
    return avatar_options(count)


@router.get("/{player_id}", response_model=PlayerOut)
async def get_player(player_id: str, session: AsyncSession = Depends(get_session)):
    p = await session.get(Player, player_id)
    if not p:
        raise PlayerNotFound(player_id)
    return player_out(p)


@router.put("/{player_id}", response_model=PlayerOut)
@router.patch("/{player_id}", response_model=PlayerOut)
async def update_player(
    player_id: str,
    body: PlayerUpdate,
    session: AsyncSession = Depends(get_session),
):
    p = await session.get(Player, player_id)
    if not p:
        raise PlayerNotFound(player_id)
    # Counters are owned by match results; only profile fields are editable.
    if body.name is not None:
        p.name = body.name
    if body.avatar is not None:
        p.avatar = body.avatar
    await session.commit()
    return player_out(p)


@router.delete("/{player_id}", status_code=204)
async def delete_player(
    player_id: str,
    session: AsyncSession = Depends(get_session),
):
    p = await session.get(Player, player_id)
    if not p:
        raise PlayerNotFound(player_id)
    await session.delete(p)
    await session.commit()
    logger.info("Deleted player %s", player_id)
    return Response(status_code=204)
