"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.infrastructure.logging.logger import setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _static_dir(settings: Settings) -> Path | None:
    """Return the demo page directory if it exists."""
    if not settings.static_dir:
        return None
    path = Path(settings.static_dir)
    return path if path.is_dir() else None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    app_settings: Settings = app.state.settings
    logger.info("Starting %s %s", app_settings.app_name, app_settings.app_version)
    if _static_dir(app_settings) is None:
        logger.info("No static directory at '%s', demo page disabled", app_settings.static_dir)
    yield
    logger.info("Shutting down %s", app_settings.app_name)


def create_app(settings: Settings) -> FastAPI:
    """Build the API application for the given settings."""
    app = FastAPI(
        title=settings.app_name,
        description="Turn free-text chart requests into visualization specs",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials="*" not in settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

    app.include_router(api_router)

    static_dir = _static_dir(settings)

    @app.get("/", include_in_schema=False, response_model=None)
    async def root() -> FileResponse | dict[str, Any]:
        """Serve the demo page, or a welcome payload when none is installed."""
        if static_dir is not None and (static_dir / "index.html").is_file():
            return FileResponse(static_dir / "index.html")
        return {"message": f"Welcome to the {settings.app_name} API"}

    # Mounted last so API routes take precedence over static assets
    if static_dir is not None:
        app.mount("/", StaticFiles(directory=static_dir), name="static")

    return app


app = create_app(settings)
