"""
Quirky game server - FastAPI application

Run locally with: uvicorn src.main:app --port 8010
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.api.routes import router
from src.core.config import settings
from src.core.exceptions import (
    GameError,
    GameStateError,
    InvalidRequestError,
    PlacementRejectedError,
    UnknownPlayerError,
    UnknownSessionError,
)
from src.db.memory_repository import InMemorySessionRepository
from src.services.game_service import GameService

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def not_found_handler(request: Request, exc: GameError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, exc)


async def conflict_handler(request: Request, exc: GameError) -> JSONResponse:
    return _error(status.HTTP_409_CONFLICT, exc)


async def placement_rejected_handler(
    request: Request, exc: PlacementRejectedError
) -> JSONResponse:
    logger.info("Placement rejected in %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message, "reason": exc.reason},
    )


async def invalid_request_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    logger.warning("Unhandled game error in %s: %s", request.url.path, exc)
    return _error(status.HTTP_400_BAD_REQUEST, exc)


def create_app(service: Optional[GameService] = None) -> FastAPI:
    """Build the app. Tests pass in their own service (and with it their own repository)."""
    app = FastAPI(
        title="Quirky",
        description="Multiplayer tile placement game server",
        version="0.1.0",
    )
    app.state.service = service or GameService(InMemorySessionRepository())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Starlette picks the handler registered for the closest class in the exception's MRO
    app.add_exception_handler(UnknownSessionError, not_found_handler)
    app.add_exception_handler(UnknownPlayerError, not_found_handler)
    app.add_exception_handler(GameStateError, conflict_handler)
    app.add_exception_handler(PlacementRejectedError, placement_rejected_handler)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(ValidationError, invalid_request_handler)
    app.add_exception_handler(GameError, game_error_handler)

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
