"""
Application factory.

command-line: uvicorn numguess.main:app --reload
(or simply: python -m numguess.main)
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from numguess.api.models import ErrorResponse
from numguess.api.router import router
from numguess.core.config import Settings, get_settings
from numguess.core.exceptions import (
    GameError,
    GameNotFoundError,
    GameStateError,
    InvalidRequestError,
)
from numguess.core.log import configure_logging
from numguess.db.memory_registry import InMemoryGameRegistry
from numguess.db.registry import GameRegistry
from numguess.services.game_service import GameService

logger = logging.getLogger(__name__)

# Most specific first: the first matching class decides the status code.
_STATUS_BY_ERROR: list[tuple[type[GameError], int]] = [
    (GameNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (GameStateError, status.HTTP_409_CONFLICT),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=message, status=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_game_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (code for error_type, code in _STATUS_BY_ERROR if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error("Unhandled game error on %s %s", request.method, request.url.path, exc_info=exc)
    else:
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
    return error_response(status_code, str(exc))


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")


def create_app(
    settings: Optional[Settings] = None, registry: Optional[GameRegistry] = None
) -> FastAPI:
    """Wire registry, service and routes together. Pass a registry to share or inspect state (e.g. in tests)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.title,
        description="Number guessing game exposed as a hypermedia-driven (HATEOAS) REST API.",
        version="1.0.0",
        root_path=settings.root_path,
    )
    app.state.service = GameService(registry if registry is not None else InMemoryGameRegistry())
    app.include_router(router)
    app.add_exception_handler(GameError, handle_game_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    current = get_settings()
    uvicorn.run(app, host=current.host, port=current.port)
