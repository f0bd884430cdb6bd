"""Async httpx wrapper with auth and upstream error classification."""

from __future__ import annotations

from typing import Any

import httpx

from wagerboard.api.errors import UpstreamMalformed, UpstreamUnavailable

BASE_URL = "https://services.rainbet.com"


class AffiliatesAPIClient:
    """Async HTTP client for the Rainbet external affiliates API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        kwargs: dict[str, Any] = {"base_url": base_url, "timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make an authenticated GET request and return decoded JSON.

        Error messages never include the request URL, since it carries the key.
        """
        params = params or {}
        params["key"] = self._api_key
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamUnavailable(
                f"{path} returned HTTP {exc.response.status_code}"
            ) from None
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(
                f"{path} request failed: {type(exc).__name__}"
            ) from None
        try:
            return response.json()
        except ValueError:
            raise UpstreamMalformed(f"{path} returned a non-JSON body") from None
