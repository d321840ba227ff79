"""
Server Entry Point - Main Layer

This module is the process entry point. It selects the configuration
profile, exports it for the application module and hands the ASGI
application to uvicorn.
"""

import os
from typing import Optional

import typer
import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings
from src.shared.consts import PROFILE_ENV_VAR

APP_IMPORT_PATH = "src.main.app:app"

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False, help="Run the application server.")


@cli.command()
def serve(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        envvar=PROFILE_ENV_VAR,
        help="Configuration profile to activate (e.g. dev, test)",
    ),
    host: Optional[str] = typer.Option(
        None, "--host", help="Override the configured host"
    ),
    port: Optional[int] = typer.Option(
        None, "--port", help="Override the configured port"
    ),
) -> None:
    """Start the HTTP server for the selected profile."""
    configure_logging()

    # src.main.app resolves its settings from the environment.
    if profile:
        os.environ[PROFILE_ENV_VAR] = profile
    if host:
        os.environ["SERVER__HOST"] = host
    if port is not None:
        os.environ["SERVER__PORT"] = str(port)

    settings = get_settings(profile)
    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        profile=settings.profile,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )

    uvicorn.run(
        APP_IMPORT_PATH,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_config=None,
    )


def main() -> None:
    """Main entry point for the server."""
    cli()


if __name__ == "__main__":
    main()
