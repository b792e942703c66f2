"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from life_tracker.api.foods import router as foods_router
from life_tracker.api.workouts import router as workouts_router
from life_tracker.app_logging import configure_logging
from life_tracker.config import parse_cors_origins
from life_tracker.containers import AppContainer
from life_tracker.domain.errors import TrackerError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        backup_service = app.state.container.backup_service
        if backup_service is not None:
            try:
                backup_service.ensure_daily_backup()
            except Exception:
                logger.exception("Failed to create the daily backup")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    prefix = container.settings.api_prefix.rstrip("/")
    app.include_router(foods_router, prefix=prefix)
    app.include_router(workouts_router, prefix=prefix)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(
        request: Request, exc: TrackerError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.exception(
                "Request failed: %s %s", request.method, request.url.path, exc_info=exc
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": _describe(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _describe(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into a single readable message."""
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = str(error.get("msg"))
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts) or "Invalid request"
