"""
Main Application - Main Layer

This module builds the FastAPI application. It initializes the container,
sets the application metadata and runs the startup hook once the
container is ready. No application routes are registered.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from src.main.config import AppSettings, get_settings
from src.main.container import app_lifespan, init_container
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

# Load settings for the profile given by APP_PROFILE
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

logger = get_logger(__name__)


def on_start(settings: AppSettings) -> None:
    """Post-initialization hook, run once the container is ready."""
    logger.info("App Loaded")
    logger.warning("*** Application started at PORT ***", port=settings.server.port)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Runs on startup and shutdown, delegating resource handling
    to the container's app_lifespan.
    """
    app.state.started_at = datetime.now(timezone.utc)

    async with app_lifespan() as container:
        app.state.container = container
        on_start(app.state.settings)
        yield

    logger.info("Application shutting down")


def create_app(app_settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; loaded for the active profile if omitted.

    Returns:
        FastAPI: The configured FastAPI application
    """
    app_settings = app_settings or get_settings()

    init_container(app_settings)

    app = FastAPI(
        title=app_settings.app.title,
        description=app_settings.app.description,
        version=app_settings.app.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    return app


app = create_app(settings)
