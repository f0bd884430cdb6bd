"""Orchestrator: compute cycle windows, fetch affiliates, rank, fill the cache."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from wagerboard.api.client import AffiliatesAPIClient
from wagerboard.api.endpoints import fetch_records
from wagerboard.api.models import LeaderboardSnapshot, RankedEntry
from wagerboard.config import Settings
from wagerboard.services.cache import LeaderboardCache
from wagerboard.services.cycle import Cycle, compute_cycle, cycle_index
from wagerboard.services.ranking import default_weight, rank

log = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LeaderboardService:
    """Fetches and ranks affiliate wagers for cycle windows."""

    def __init__(
        self,
        settings: Settings,
        client: AffiliatesAPIClient | None = None,
        cache: LeaderboardCache | None = None,
        clock: Callable[[], datetime] = utc_now,
        weigher: Callable[[float], int] = default_weight,
    ) -> None:
        self.settings = settings
        self.client = client or AffiliatesAPIClient(
            settings.api_key,
            base_url=settings.upstream_base_url,
            timeout=settings.request_timeout,
        )
        self.cache = cache or LeaderboardCache()
        self.clock = clock
        self.weigher = weigher

    async def close(self) -> None:
        await self.client.close()

    def cycle_for(self, offset: int = 0, now: datetime | None = None) -> Cycle:
        return compute_cycle(
            offset,
            now or self.clock(),
            epoch=self.settings.cycle_epoch,
            length=self.settings.cycle_length,
        )

    async def top_for_window(self, cycle: Cycle) -> list[RankedEntry]:
        """Fetch + rank one window. Upstream errors propagate."""
        records = await fetch_records(self.client, cycle)
        return rank(records, limit=self.settings.leaderboard_size, weigher=self.weigher)

    async def refresh_current(self) -> LeaderboardSnapshot:
        """Build a snapshot for the current cycle and store it in the cache.

        The cache is only touched after the fetch and rank both succeed.
        """
        now = self.clock()
        cycle = self.cycle_for(0, now)
        entries = await self.top_for_window(cycle)
        snapshot = LeaderboardSnapshot(entries=tuple(entries), cycle=cycle, refreshed_at=now)
        self.cache.replace(snapshot)
        log.info("Leaderboard updated for %s (%d entries)", cycle.label, len(entries))
        return snapshot

    def current_leaderboard(self) -> LeaderboardSnapshot:
        return self.cache.read()

    async def previous_cycle_leaderboard(self, now: datetime | None = None) -> list[RankedEntry]:
        """Rank the cycle before the current one, uncached.

        Returns ``[]`` without calling upstream while still in the first cycle
        (or before the epoch), since no earlier cycle exists.
        """
        now = now or self.clock()
        current = cycle_index(
            now, epoch=self.settings.cycle_epoch, length=self.settings.cycle_length
        )
        if current <= 0:
            return []
        return await self.top_for_window(self.cycle_for(-1, now))
