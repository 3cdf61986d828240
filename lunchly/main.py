"""FastAPI application entry point.

Lunchly API - customers and reservations for a restaurant.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lunchly.errors import NotFoundError
from lunchly.routes import api_router
from lunchly.schemas import ErrorResponse
from lunchly.settings import Settings, get_settings
from lunchly.stores.postgres import init_db, close_db, ping_db

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the connection pool for the app's lifetime.

    A database that is down at startup is logged, not fatal; requests then
    fail with a 500 until the app is restarted.
    """
    try:
        await init_db()
        await ping_db()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres init failed")

    yield

    await close_db()


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Map store errors onto the ErrorResponse body.

    NotFoundError -> 404 NOT_FOUND
    anything else -> 500 INTERNAL_ERROR (exception text only in debug)
    """

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content=ErrorResponse.of("NOT_FOUND", str(exc)))

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
        message = str(exc) if settings.debug else "Internal server error"
        return JSONResponse(status_code=500, content=ErrorResponse.of("INTERNAL_ERROR", message))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Restaurant customers and reservations API",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app, settings)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "lunchly.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
