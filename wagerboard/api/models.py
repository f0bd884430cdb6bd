"""Pydantic models for affiliate API responses and leaderboard output."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wagerboard.services.cycle import Cycle


class AffiliateRecord(BaseModel):
    username: str = ""
    # Kept raw; ranking coerces anything unparseable to 0 per record
    wagered_amount: Any = None

    @field_validator("username", mode="before")
    @classmethod
    def coerce_username(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)


class AffiliatesResponse(BaseModel):
    affiliates: list[AffiliateRecord]


class RankedEntry(BaseModel):
    """A display-ready leaderboard row. Username is already masked."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    wagered: int
    weighted_wager: int = Field(alias="weightedWager")


class LeaderboardSnapshot(BaseModel):
    """Immutable ranked result for one cycle, as held by the cache."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[RankedEntry, ...] = ()
    cycle: Cycle | None = None
    refreshed_at: datetime | None = None

    def as_json(self) -> list[dict]:
        return [e.model_dump(by_alias=True) for e in self.entries]
