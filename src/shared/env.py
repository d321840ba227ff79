"""Environment utilities for resolving profile configuration files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Optional, Tuple, Union

from src.shared.consts import (
    BASE_CONFIG_FILE,
    CONFIG_DIR_ENV_VAR,
    PROFILE_CONFIG_TEMPLATE,
    PROFILE_ENV_VAR,
)
from src.shared.errors import InvalidProfileError, ProfileNotFoundError

logger = logging.getLogger(__name__)

# Used when neither APP_CONFIG_DIR nor ./config exists (source checkout).
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"
WORKING_CONFIG_DIR = Path("config")

_PROFILE_NAME = re.compile(r"[A-Za-z0-9_-]+")


def get_active_profile(profile: Optional[str] = None) -> Optional[str]:
    """
    Return the profile to activate.

    An explicit value wins over the APP_PROFILE environment variable.
    Blank values mean no profile.
    """
    candidate = profile if profile is not None else os.environ.get(PROFILE_ENV_VAR)
    if candidate is None:
        return None
    candidate = candidate.strip()
    return candidate or None


def get_config_dir(config_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the configuration directory.

    Order: explicit argument, APP_CONFIG_DIR, ./config in the working
    directory, then the config directory of the source tree.
    """
    if config_dir:
        return Path(config_dir)
    env_dir = os.environ.get(CONFIG_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir)
    working_dir = Path.cwd() / WORKING_CONFIG_DIR
    if working_dir.is_dir():
        return working_dir
    return DEFAULT_CONFIG_DIR


def resolve_profile_env_files(
    profile: Optional[str] = None,
    config_dir: Optional[Union[str, Path]] = None,
) -> Tuple[Path, ...]:
    """
    Build the ordered list of env files for a profile.

    The base file comes first so the profile file overrides it. A missing
    base file is only logged; a missing profile file is an error.

    Raises:
        InvalidProfileError: If the profile name contains unsupported characters.
        ProfileNotFoundError: If the profile file does not exist.
    """
    directory = get_config_dir(config_dir)
    base_file = directory / BASE_CONFIG_FILE
    files = [base_file]

    if not base_file.is_file():
        logger.warning(
            "env.base_file.missing",
            extra={"path": str(base_file)},
        )

    if profile:
        if not _PROFILE_NAME.fullmatch(profile):
            raise InvalidProfileError(profile)
        profile_file = directory / PROFILE_CONFIG_TEMPLATE.format(profile=profile)
        if not profile_file.is_file():
            raise ProfileNotFoundError(profile, profile_file)
        files.append(profile_file)

    return tuple(files)
