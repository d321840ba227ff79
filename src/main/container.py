"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
that builds the application services from the settings.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.services import GreetingService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    # Settings
    config = providers.Configuration()

    # Application services
    greeting_service = providers.Singleton(
        GreetingService,
        application_name=config.app.title,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle management for the container's singletons.

    Singletons are built before the server accepts requests and
    dropped again on shutdown.
    """
    container = get_container()

    container.greeting_service()
    logger.info("container.resources.initialized")

    try:
        yield container
    finally:
        container.reset_singletons()
        logger.info("container.resources.shutdown")
