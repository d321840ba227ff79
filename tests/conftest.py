from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Same as @ActiveProfiles("test"): modules importing the app use the test profile.
os.environ.setdefault("APP_PROFILE", "test")

from src.shared.logging import configure_logging  # noqa: E402

# structlog caches loggers on first use, so configure it before any test runs.
configure_logging(environment="testing")

MANAGED_PREFIXES = ("SERVER__", "APP__", "LOGGING__", "LOG_")
MANAGED_KEYS = ("APP_PROFILE", "APP_CONFIG_DIR", "ENVIRONMENT", "PROFILE")


@pytest.fixture(autouse=True)
def isolated_environ() -> Iterator[None]:
    """Restore the process environment after each test."""
    snapshot = dict(os.environ)
    for key in list(os.environ):
        if key in MANAGED_KEYS or key.startswith(MANAGED_PREFIXES):
            del os.environ[key]
    try:
        yield
    finally:
        os.environ.clear()
        os.environ.update(snapshot)


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "application.env").write_text(
        "SERVER__PORT=9000\nAPP__TITLE=Profiles\n", encoding="utf-8"
    )
    (directory / "application-dev.env").write_text(
        "SERVER__PORT=9001\n", encoding="utf-8"
    )
    (directory / "application-test.env").write_text(
        "ENVIRONMENT=testing\nSERVER__PORT=9002\n", encoding="utf-8"
    )
    return directory


@pytest.fixture()
def structlog_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog attached after structlog replaced the root handlers."""
    configure_logging(level="DEBUG", environment="testing")
    logging.getLogger().addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture()
def log_events(
    structlog_caplog: pytest.LogCaptureFixture,
) -> Callable[[], List[Dict[str, Any]]]:
    """Return a callable listing the captured structlog event dicts."""

    def _events() -> List[Dict[str, Any]]:
        return [
            {**record.msg, "level_name": record.levelname}
            for record in structlog_caplog.records
            if isinstance(record.msg, dict)
        ]

    return _events
