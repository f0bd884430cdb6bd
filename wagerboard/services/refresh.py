"""Background refresh of the current-cycle leaderboard cache."""

from __future__ import annotations

import logging

from wagerboard.api.errors import UpstreamError
from wagerboard.services.leaderboard_service import LeaderboardService
from wagerboard.services.periodic import PeriodicTask

log = logging.getLogger(__name__)


class RefreshScheduler(PeriodicTask):
    """Repopulates the cache on a fixed interval, independent of requests.

    Failures are logged and the previous snapshot is kept; the next tick
    simply tries again. There is no backoff.
    """

    name = "leaderboard-refresh"

    def __init__(self, service: LeaderboardService, interval: float = 300) -> None:
        super().__init__(interval)
        self.service = service
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def refresh_once(self) -> bool:
        """Run one refresh. Returns True if the cache was replaced."""
        if self._in_flight:
            log.debug("Refresh already in flight, skipping")
            return False
        self._in_flight = True
        try:
            await self.service.refresh_current()
            return True
        except UpstreamError as exc:
            log.warning("Failed to fetch affiliate data: %s", exc)
            return False
        except Exception:
            log.exception("Leaderboard refresh failed")
            return False
        finally:
            self._in_flight = False

    async def tick(self) -> None:
        await self.refresh_once()
