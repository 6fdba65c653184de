import asyncio
import logging
import os
import uuid
from datetime import datetime, timezone

from sqlalchemy import select

from courtscore import db
from courtscore.avatars import DEFAULT_AVATARS
from courtscore.models import Player
from courtscore.time_utils import naive_utc

logger = logging.getLogger("seed")

if not os.getenv("DATABASE_URL"):
    raise RuntimeError("DATABASE_URL environment variable is required")

DEMO_PLAYERS = [
    "Alex Chen",
    "Sarah Johnson",
    "Mike Wilson",
    "Emma Davis",
    "David Brown",
]


async def main():
    await db.create_all()
    assert db.AsyncSessionLocal is not None
    async with db.AsyncSessionLocal() as s:
        have = {
            x.name for x in (await s.execute(select(Player))).scalars().all()
        }
        now = naive_utc(datetime.now(timezone.utc))
        for i, name in enumerate(DEMO_PLAYERS):
            if name in have:
                continue
            s.add(
                Player(
                    id=uuid.uuid4().hex,
                    name=name,
                    avatar=DEFAULT_AVATARS[i],
                    matches=0,
                    wins=0,
                    losses=0,
                    created_at=now,
                )
            )
            logger.info("Seeded player %s", name)
        await s.commit()
    await db.get_engine().dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
