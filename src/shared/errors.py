"""
Configuration Errors

Errors raised while resolving the active configuration profile.
Anything else (port already in use, invalid values) is left to the
framework and pydantic to report.
"""

from pathlib import Path
from typing import Any, Dict, Optional


class ConfigurationError(Exception):
    """Base class for configuration errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidProfileError(ConfigurationError):
    """Raised when a profile name cannot be mapped to a file name."""

    def __init__(self, profile: str):
        message = f"Invalid profile name: {profile!r}"
        super().__init__(message, {"profile": profile})


class ProfileNotFoundError(ConfigurationError):
    """Raised when the file for the requested profile does not exist."""

    def __init__(self, profile: str, path: Path):
        message = f"Configuration for profile '{profile}' not found at {path}"
        super().__init__(message, {"profile": profile, "path": str(path)})
