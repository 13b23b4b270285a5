"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from app.api.routes import router as api_router
from app.core.config import Settings, get_settings
from app.core.database import Database
from app.core.errors import NotFound, register_error_handlers
from app.core.logging import configure_logging
from app.seed import init_database

logger = logging.getLogger(__name__)


def _mount_spa(app: FastAPI, settings: Settings) -> None:
    """Serve the built frontend; unknown non-API paths fall back to index.html."""
    static_root = Path(settings.STATIC_DIR).resolve()
    index_file = static_root / "index.html"
    api_prefix = settings.API_PREFIX.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    def spa(full_path: str) -> FileResponse:
        if api_prefix and (full_path == api_prefix or full_path.startswith(api_prefix + "/")):
            raise NotFound("Route not found")
        candidate = (static_root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(static_root):
            return FileResponse(candidate)
        if not index_file.is_file():
            raise NotFound("Route not found")
        return FileResponse(index_file)

    logger.info("Serving static frontend from %s", static_root)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; tests pass their own Settings (e.g. in-memory SQLite)."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
        database.open()
        init_database(database, settings)
        app.state.database = database
        logger.info("BNBinsights API started", extra={"environment": settings.APP_ENV})
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title="BNBinsights API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    if settings.SERVE_STATIC:
        _mount_spa(app, settings)
    else:

        @app.get("/")
        def root() -> dict[str, str]:
            """Root route; minimal payload for discovery."""
            return {"message": "BNBinsights API"}

    return app


app = create_app()
