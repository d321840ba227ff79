from __future__ import annotations

import logging
from pathlib import Path

import pytest

from src.shared.env import (
    DEFAULT_CONFIG_DIR,
    get_active_profile,
    get_config_dir,
    resolve_profile_env_files,
)
from src.shared.errors import (
    ConfigurationError,
    InvalidProfileError,
    ProfileNotFoundError,
)
from src.shared.logging import configure_logging


def test_get_active_profile_prefers_explicit_value(monkeypatch):
    monkeypatch.setenv("APP_PROFILE", "test")

    assert get_active_profile("dev") == "dev"


def test_get_active_profile_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_PROFILE", " test ")

    assert get_active_profile() == "test"


def test_get_active_profile_treats_blank_as_none(monkeypatch):
    monkeypatch.setenv("APP_PROFILE", "   ")

    assert get_active_profile() is None
    assert get_active_profile("") is None


def test_get_config_dir_defaults_to_project_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert get_config_dir() == DEFAULT_CONFIG_DIR
    assert (DEFAULT_CONFIG_DIR / "application.env").is_file()


def test_get_config_dir_reads_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_CONFIG_DIR", str(tmp_path))

    assert get_config_dir() == Path(tmp_path)


def test_resolve_without_profile_returns_base_file(config_dir):
    files = resolve_profile_env_files(None, config_dir)

    assert files == (config_dir / "application.env",)


def test_resolve_with_profile_appends_profile_file(config_dir):
    files = resolve_profile_env_files("dev", config_dir)

    assert files == (
        config_dir / "application.env",
        config_dir / "application-dev.env",
    )


def test_resolve_missing_profile_raises(config_dir):
    with pytest.raises(ProfileNotFoundError) as exc_info:
        resolve_profile_env_files("staging", config_dir)

    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.details["profile"] == "staging"
    assert exc_info.value.details["path"].endswith("application-staging.env")


@pytest.mark.parametrize("profile", ["../secrets", "dev test", "prod/eu"])
def test_resolve_invalid_profile_name_raises(config_dir, profile):
    with pytest.raises(InvalidProfileError):
        resolve_profile_env_files(profile, config_dir)


def test_resolve_missing_base_file_logs_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="src.shared.env"):
        files = resolve_profile_env_files(None, tmp_path)

    assert files == (tmp_path / "application.env",)
    assert any(record.message == "env.base_file.missing" for record in caplog.records)


def test_get_config_dir_prefers_working_directory_config(config_dir, monkeypatch):
    monkeypatch.chdir(config_dir.parent)

    assert get_config_dir() == config_dir.parent / "config"
    assert resolve_profile_env_files("dev")[-1] == (
        config_dir.parent / "config" / "application-dev.env"
    )


def test_environment_config_dir_wins_over_working_directory(
    config_dir, tmp_path, monkeypatch
):
    other = tmp_path / "elsewhere"
    other.mkdir()
    monkeypatch.chdir(config_dir.parent)
    monkeypatch.setenv("APP_CONFIG_DIR", str(other))

    assert get_config_dir() == other


def test_missing_base_file_warning_renders(tmp_path, capsys):
    configure_logging(level="INFO", environment="development")

    resolve_profile_env_files(None, tmp_path)

    captured = capsys.readouterr()
    assert "env.base_file.missing" in captured.out
    assert "Logging error" not in captured.err
