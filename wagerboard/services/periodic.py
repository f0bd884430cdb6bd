"""Base for background jobs that run a tick immediately, then every interval."""

from __future__ import annotations

import asyncio
import contextlib
import logging

log = logging.getLogger(__name__)


class PeriodicTask:
    """Runs :meth:`tick` on the event loop every ``interval`` seconds.

    Ticks run back to back within one task, so a slow tick delays the next
    one instead of overlapping it.
    """

    name = "periodic"

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop and return without waiting for the first tick."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self.name)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def tick(self) -> None:
        raise NotImplementedError

    async def _run(self) -> None:
        log.info("Starting %s loop (every %ss)", self.name, self.interval)
        while True:
            try:
                await self.tick()
            except Exception:
                log.exception("Unhandled error in %s tick", self.name)
            await asyncio.sleep(self.interval)
