"""Epoch-anchored fixed-length leaderboard cycles (all UTC)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

EPOCH = datetime(2025, 8, 11, tzinfo=timezone.utc)
CYCLE_LENGTH = timedelta(days=14)

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class Cycle:
    """A cycle window. ``end`` is the last millisecond inside the window."""

    start: datetime
    end: datetime

    @property
    def label(self) -> str:
        return f"{format_ymd(self.start)} -> {format_ymd(self.end)}"


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def cycle_index(
    now: datetime | None = None,
    *,
    epoch: datetime = EPOCH,
    length: timedelta = CYCLE_LENGTH,
) -> int:
    """Index of the cycle containing ``now``. Instants before the epoch are cycle 0."""
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    elapsed = max(timedelta(0), now - epoch)
    return elapsed // length


def compute_cycle(
    offset: int = 0,
    now: datetime | None = None,
    *,
    epoch: datetime = EPOCH,
    length: timedelta = CYCLE_LENGTH,
) -> Cycle:
    """Return the cycle ``offset`` steps away from the one containing ``now``.

    Negative indices clamp to cycle 0 rather than raising, so callers that
    need "no such cycle" must check the index themselves (see
    :func:`cycle_index`).
    """
    idx = max(0, cycle_index(now, epoch=epoch, length=length) + offset)
    start = epoch + idx * length
    return Cycle(start=start, end=start + length - _ONE_MS)


def format_ymd(dt: datetime) -> str:
    """Format as ``YYYY-MM-DD`` in UTC."""
    return _as_utc(dt).strftime("%Y-%m-%d")
