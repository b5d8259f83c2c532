"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from official_status.shared import (
    DEFAULT_STATUS_URL,
    DEFAULT_TIMEOUT_MS,
    EnumEnvironment,
    EnumLogLevel,
    resolve_secret_files,
)


class StatusProbeSettings(BaseSettings):
    """Status page probe configuration settings."""

    endpoint: str = Field(
        default=DEFAULT_STATUS_URL, description="Status page JSON endpoint"
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Maximum time to wait for the status page, in milliseconds",
    )

    model_config = SettingsConfigDict(
        env_prefix="STATUS_", case_sensitive=False, extra="ignore"
    )


class AppInfoSettings(BaseSettings):
    """HTTP application metadata."""

    title: str = Field(default="Official Status Probe", description="API title")
    description: str = Field(
        default="Normalized health of third-party status pages",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    port: int = Field(default=8000, description="Port to bind the server")

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )
    format: Optional[Literal["json", "console"]] = Field(
        default=None,
        description="Renderer: json or console (if None, chosen by environment)",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    status: StatusProbeSettings = Field(default_factory=StatusProbeSettings)
    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Secret files are resolved first so ``STATUS_ENDPOINT_FILE`` and friends
    are honored.
    """
    resolve_secret_files()
    return AppSettings()
