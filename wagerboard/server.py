"""FastAPI app exposing the current and previous cycle leaderboards."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wagerboard.api.errors import UpstreamError
from wagerboard.config import Settings
from wagerboard.services.keepalive import KeepAlivePinger
from wagerboard.services.leaderboard_service import LeaderboardService
from wagerboard.services.refresh import RefreshScheduler

log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

PREV_ERROR_MESSAGE = "Failed to fetch previous leaderboard data."


def create_app(settings: Settings, service: LeaderboardService | None = None) -> FastAPI:
    service = service or LeaderboardService(settings)
    scheduler = RefreshScheduler(service, interval=settings.refresh_interval)
    pinger = (
        KeepAlivePinger(
            settings.self_url,
            interval=settings.keepalive_interval,
            timeout=settings.request_timeout,
        )
        if settings.self_url
        else None
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # First refresh runs in the background; requests see an empty board until it lands
        scheduler.start()
        if pinger is not None:
            pinger.start()
        yield
        await scheduler.stop()
        if pinger is not None:
            await pinger.stop()
            await pinger.close()
        await service.close()

    app = FastAPI(title="wagerboard", lifespan=lifespan)
    app.state.settings = settings
    app.state.service = service
    app.state.scheduler = scheduler
    app.state.pinger = pinger

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/leaderboard/top14")
    async def current_leaderboard() -> JSONResponse:
        return JSONResponse(service.current_leaderboard().as_json())

    @app.get("/leaderboard/prev")
    async def previous_leaderboard() -> JSONResponse:
        try:
            entries = await service.previous_cycle_leaderboard()
        except UpstreamError as exc:
            log.error("Failed to fetch previous leaderboard: %s", exc)
            return JSONResponse({"error": PREV_ERROR_MESSAGE}, status_code=500)
        except Exception:
            log.exception("Unexpected error building previous leaderboard")
            return JSONResponse({"error": PREV_ERROR_MESSAGE}, status_code=500)
        return JSONResponse([e.model_dump(by_alias=True) for e in entries])

    return app
