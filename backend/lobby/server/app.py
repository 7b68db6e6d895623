from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

import structlog
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from lobby.server.middleware import SlashNormalizationMiddleware
from lobby.server.settings import LobbyServerSettings
from lobby.session.stats import StatsReporter
from lobby.session.store import SessionStore
from lobby.views.errors import EXCEPTION_HANDLERS
from lobby.views.handlers import (
    get_game,
    get_room,
    join_room,
    launch_room,
    leave_room,
    list_rooms,
    new_player,
    new_room,
    play_round,
)
from shared.logging import setup_logging

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.requests import Request


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def status(request: Request) -> JSONResponse:
    store: SessionStore = request.app.state.store
    stats = await store.stats()
    return JSONResponse({"status": "ok", **stats.model_dump()})


def create_app(
    settings: LobbyServerSettings | None = None,
    store: SessionStore | None = None,
) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = LobbyServerSettings()
    if store is None:
        store = SessionStore()

    routes = [
        Route("/player/new", new_player, methods=["GET"], name="new_player"),
        Route("/rooms/list", list_rooms, methods=["GET"], name="list_rooms"),
        Route("/room/new", new_room, methods=["GET"], name="new_room"),
        Route("/room/join", join_room, methods=["GET"], name="join_room"),
        Route("/room/leave", leave_room, methods=["GET"], name="leave_room"),
        Route("/room/data", get_room, methods=["GET"], name="get_room"),
        Route("/room/launch", launch_room, methods=["GET"], name="launch_room"),
        Route("/game/data", get_game, methods=["GET"], name="get_game"),
        Route("/game/play", play_round, methods=["GET"], name="play_round"),
        Route("/health", health, methods=["GET"], name="health"),
        Route("/status", status, methods=["GET"], name="status"),
    ]

    stats_reporter = StatsReporter(store.stats, interval_seconds=settings.stats_interval_seconds)

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncGenerator[None]:
        stats_reporter.start()
        yield
        await stats_reporter.stop()

    app = Starlette(routes=routes, lifespan=lifespan, exception_handlers=EXCEPTION_HANDLERS)
    app.add_middleware(SlashNormalizationMiddleware)  # type: ignore[arg-type]
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )
    app.state.settings = settings
    app.state.store = store
    app.state.stats_reporter = stats_reporter

    logger.info("lobby server ready")
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory lobby.server.app:get_app."""
    settings = LobbyServerSettings()
    setup_logging(log_dir=settings.log_dir)
    return create_app(settings=settings)
