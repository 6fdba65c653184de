from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field, model_validator, field_validator, ConfigDict

from .time_utils import require_utc

MAX_NAME_LENGTH = 50


def _clean_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError("name must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValueError("name must not be empty")
    return trimmed


def _clean_avatar(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError("avatar must be a string")
    return value.strip() or None


class PlayerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    avatar: Optional[str] = Field(default=None, max_length=2000)

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value: Optional[str]) -> Optional[str]:
        return _clean_name(value)

    @field_validator("avatar", mode="before")
    @classmethod
    def _normalize_avatar(cls, value: Optional[str]) -> Optional[str]:
        return _clean_avatar(value)


class PlayerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    avatar: Optional[str] = Field(default=None, max_length=2000)

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value: Optional[str]) -> Optional[str]:
        return _clean_name(value)

    @field_validator("avatar", mode="before")
    @classmethod
    def _normalize_avatar(cls, value: Optional[str]) -> Optional[str]:
        return _clean_avatar(value)

    @model_validator(mode="after")
    def _ensure_fields(self) -> "PlayerUpdate":
        if all(getattr(self, field) is None for field in ("name", "avatar")):
            raise ValueError("at least one field must be provided")
        return self


class PlayerOut(BaseModel):
    id: str
    name: str
    avatar: str
    matches: int
    wins: int
    losses: int
    winPercentage: str
    createdAt: Optional[datetime] = None


class PlayerListOut(BaseModel):
    players: List[PlayerOut]
    total: int


class PlayerNameOut(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None


class TeamIn(BaseModel):
    playerIds: List[str]
    score: int

    @field_validator("playerIds")
    @classmethod
    def _strip_ids(cls, value: List[str]) -> List[str]:
        return [pid.strip() for pid in value if pid and pid.strip()]


class MatchCreate(BaseModel):
    date: datetime
    team1: TeamIn
    team2: TeamIn

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, v: datetime) -> datetime:
        return require_utc(v, field_name="date")


class MatchUpdate(MatchCreate):
    pass


class TeamOut(BaseModel):
    players: List[PlayerNameOut]
    score: int


class MatchOut(BaseModel):
    id: str
    date: datetime
    team1: TeamOut
    team2: TeamOut
    winner: Optional[Literal["team1", "team2"]] = None
    complete: bool
    createdAt: Optional[datetime] = None


class LeaderboardEntryOut(BaseModel):
    rank: int
    medal: Literal["gold", "silver", "bronze", ""]
    medalClass: str
    winPercentage: float
    winPercentageDisplay: str
    player: PlayerOut


class LeaderboardOut(BaseModel):
    leaders: List[LeaderboardEntryOut]
    total: int
