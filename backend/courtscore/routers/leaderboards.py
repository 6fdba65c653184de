from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_session
from ..models import Player
from ..services import (
    compute_rankings,
    format_win_percentage,
    medal_class,
    medal_for_rank,
)
from ..schemas import LeaderboardEntryOut, LeaderboardOut
from .players import player_out

# Resource-only prefix; no /api or /api/v0 here
router = APIRouter(prefix="/leaderboards", tags=["leaderboards"])


# GET /api/v0/leaderboards
@router.get("", response_model=LeaderboardOut)
async def leaderboard(session: AsyncSession = Depends(get_session)):
    # Creation order is the input order, which decides full ties.
    rows = (
        await session.execute(select(Player).order_by(Player.created_at, Player.id))
    ).scalars().all()
    leaders = [
        LeaderboardEntryOut(
            rank=s.rank,
            medal=medal_for_rank(s.rank).value,
            medalClass=medal_class(s.rank),
            winPercentage=s.win_percentage,
            winPercentageDisplay=format_win_percentage(s.player.wins, s.player.matches),
            player=player_out(s.player),
        )
        for s in compute_rankings(rows)
    ]
    return LeaderboardOut(leaders=leaders, total=len(leaders))
