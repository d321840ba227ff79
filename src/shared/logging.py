"""
Logging Configuration - Shared Layer

This module wires structlog on top of the standard logging module so that
application events and uvicorn's own loggers share the same handlers.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment

# Loggers created by uvicorn with their own handlers; they are rerouted to root.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _get_log_config_from_env() -> dict:
    """
    Get logging configuration from environment variables.

    Used for the bootstrap configuration, before settings are loaded.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _build_renderer(environment: str, json_format: Optional[bool]) -> Processor:
    if json_format is None:
        json_format = environment.lower() == EnumEnvironment.PRODUCTION.value
    if json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _route_server_loggers() -> None:
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
    json_format: Optional[bool] = None,
) -> None:
    """
    Configure structlog and the standard logging root logger.

    Args:
        level: Optional override for the log level.
        file_path: Optional log file, written in addition to stdout.
        environment: Application environment; production renders JSON.
        json_format: Force (True) or disable (False) JSON rendering.
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_file = file_path or env_config["file_path"]
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(environment, json_format),
        ],
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)
    _route_server_loggers()

    logging.debug("Logging configured with level: %s", log_level)
    if log_file:
        logging.debug("Logging to file: %s", log_file)


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging once the application settings are available.

    Args:
        settings: The application settings object from Pydantic.
    """
    try:
        log_level = (
            settings.logging.level.value
            if hasattr(settings.logging.level, "value")
            else settings.logging.level
        )
        environment = (
            settings.environment.value
            if hasattr(settings.environment, "value")
            else settings.environment
        )
        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
            json_format=getattr(settings.logging, "json_format", None),
        )
    except (AttributeError, OSError) as e:
        logging.error("Failed to update logging from settings: %s", e)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
