"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides the utilities used by every other layer:

- Constants and enums (environments, log levels, profile variables)
- Configuration errors
- Profile file resolution
- Logging setup

It must not depend on the Application or Main layers.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .errors import ConfigurationError, InvalidProfileError, ProfileNotFoundError
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "ConfigurationError",
    "InvalidProfileError",
    "ProfileNotFoundError",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
