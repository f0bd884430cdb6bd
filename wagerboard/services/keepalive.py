"""Optional self-ping so idle free-tier hosts don't spin the service down."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wagerboard.services.periodic import PeriodicTask

log = logging.getLogger(__name__)


class KeepAlivePinger(PeriodicTask):
    name = "keep-alive"

    def __init__(
        self,
        url: str,
        interval: float = 270,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(interval)
        self.url = url
        kwargs: dict[str, Any] = {"timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def ping(self) -> bool:
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            log.warning("Self-ping of %s failed: %s", self.url, exc)
            return False
        log.info("Self-pinged %s", self.url)
        return True

    async def tick(self) -> None:
        await self.ping()
