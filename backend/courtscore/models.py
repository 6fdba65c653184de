from sqlalchemy import (
    Column,
    String,
    DateTime,
    JSON,
    Integer,
    Index,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from .config import PLAYERS_TABLE, MATCHES_TABLE
from .db import Base


class Player(Base):
    __tablename__ = PLAYERS_TABLE
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    avatar = Column(String, nullable=False)
    # Derived from the matches table; rewritten after every match change.
    matches = Column(Integer, nullable=False, default=0)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class Match(Base):
    __tablename__ = MATCHES_TABLE
    id = Column(String, primary_key=True)
    date = Column(DateTime, nullable=False)
    # {"playerIds": [...], "score": int}
    team1 = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False)
    team2 = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index(f"ix_{MATCHES_TABLE}_date", "date"),
    )
