"""Conversion of core errors into HTTP responses."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, cast

import structlog
from pydantic import ValidationError
from starlette.responses import JSONResponse

from game.logic.exceptions import LobbyError, LobbyErrorCode

if TYPE_CHECKING:
    from starlette.requests import Request

logger = structlog.get_logger()

_STATUS_BY_CODE: dict[LobbyErrorCode, HTTPStatus] = {
    LobbyErrorCode.UNKNOWN_PLAYER: HTTPStatus.NOT_FOUND,
    LobbyErrorCode.UNKNOWN_ROOM: HTTPStatus.NOT_FOUND,
    LobbyErrorCode.UNKNOWN_GAME: HTTPStatus.NOT_FOUND,
    LobbyErrorCode.NOT_IN_ROOM: HTTPStatus.FORBIDDEN,
    LobbyErrorCode.NOT_IN_GAME: HTTPStatus.FORBIDDEN,
    LobbyErrorCode.NOT_HOST: HTTPStatus.FORBIDDEN,
    LobbyErrorCode.INVALID_SETTINGS: HTTPStatus.UNPROCESSABLE_ENTITY,
    LobbyErrorCode.INVALID_ACTION: HTTPStatus.UNPROCESSABLE_ENTITY,
    LobbyErrorCode.NAME_TAKEN: HTTPStatus.CONFLICT,
    LobbyErrorCode.ALREADY_IN_ROOM: HTTPStatus.CONFLICT,
    LobbyErrorCode.ROOM_FULL: HTTPStatus.CONFLICT,
    LobbyErrorCode.ROOM_NOT_FULL: HTTPStatus.CONFLICT,
    LobbyErrorCode.GAME_ENDED: HTTPStatus.CONFLICT,
}


def status_for(code: LobbyErrorCode) -> HTTPStatus:
    return _STATUS_BY_CODE[code]


async def lobby_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = cast("LobbyError", exc)
    logger.info("request rejected", path=request.url.path, code=error.code, reason=error.message)
    return JSONResponse(
        {"error": error.message, "code": error.code.value},
        status_code=status_for(error.code),
    )


async def validation_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    error = cast("ValidationError", exc)
    return JSONResponse(
        {"error": str(error), "code": "validation_error"},
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
    )


EXCEPTION_HANDLERS = {
    LobbyError: lobby_error_handler,
    ValidationError: validation_error_handler,
}
