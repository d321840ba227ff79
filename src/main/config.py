"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come, from lowest to highest precedence, from field defaults,
config/application.env, config/application-<profile>.env, environment
variables and explicit init arguments.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import get_active_profile, resolve_profile_env_files


class ServerSettings(BaseModel):
    """HTTP server configuration settings."""

    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(
        default=8080, ge=0, le=65535, description="Port to bind the server"
    )
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )


class AppInfoSettings(BaseModel):
    """Application metadata settings."""

    title: str = Field(default="MAK Service", description="Application title")
    description: str = Field(
        default="Application bootstrap service",
        description="Application description",
    )
    version: str = Field(default="0.0.1", description="Application version")


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console only)"
    )
    json_format: Optional[bool] = Field(
        default=None,
        description="Render JSON logs (if None, only in production)",
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )
    profile: Optional[str] = Field(
        default=None,
        validation_alias="APP_PROFILE",
        description="Active configuration profile",
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings(profile: Optional[str] = None) -> AppSettings:
    """
    Get application settings instance Factory.

    Args:
        profile: Profile to activate; falls back to APP_PROFILE.

    Raises:
        InvalidProfileError: If the profile name is malformed.
        ProfileNotFoundError: If the profile has no configuration file.
    """
    active_profile = get_active_profile(profile)
    env_files = resolve_profile_env_files(active_profile)
    return AppSettings(_env_file=env_files, APP_PROFILE=active_profile)
