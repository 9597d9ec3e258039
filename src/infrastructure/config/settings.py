"""Application configuration using Pydantic Settings.

Centralized configuration management following Clean Architecture principles.
All environment variables should be accessed through this module.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API server configuration settings."""

    model_config = SettingsConfigDict(env_prefix="API_", case_sensitive=False)

    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server",
    )
    port: int = Field(
        default=8000,
        description="Port to bind the API server",
    )
    workers: int = Field(
        default=4,
        description="Number of Uvicorn worker processes",
    )


class ObservabilitySettings(BaseSettings):
    """Observability configuration settings (OpenTelemetry, logging, metrics)."""

    model_config = SettingsConfigDict(env_prefix="OTEL_", case_sensitive=False)

    # OpenTelemetry Tracing
    exporter_otlp_endpoint: str = Field(
        default="http://localhost:4317",
        description="OTLP exporter endpoint (gRPC)",
    )
    service_name: str = Field(
        default="uptime-engine",
        description="Service name for traces and metrics",
    )
    trace_sample_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Trace sampling rate (0.0 to 1.0)",
    )
    tracing_enabled: bool = Field(
        default=True,
        description="Export traces over OTLP",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json_format: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )


class HistorySettings(BaseSettings):
    """Outage history reader configuration settings."""

    model_config = SettingsConfigDict(env_prefix="HISTORY_", case_sensitive=False)

    backend: Literal["memory", "http"] = Field(
        default="memory",
        description="Outage history source (in-memory fixture or status API)",
    )
    base_url: str = Field(
        default="http://localhost:8080",
        description="Status API base URL (http backend only)",
    )
    api_token: str | None = Field(
        default=None,
        description="Bearer token for the status API (http backend only)",
    )
    timeout_seconds: int = Field(
        default=30,
        description="Request timeout in seconds",
    )
    page_size: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Outage records requested per page",
    )
    max_pages: int = Field(
        default=200,
        ge=1,
        description="Maximum pages read for one range before aborting",
    )


class TimelineSettings(BaseSettings):
    """Uptime timeline presentation defaults."""

    model_config = SettingsConfigDict(env_prefix="TIMELINE_", case_sensitive=False)

    default_max_bars: int = Field(
        default=30,
        ge=1,
        le=365,
        description="Number of slots in the uptime bar",
    )
    default_range: Literal["24h", "7d", "30d", "90d"] = Field(
        default="30d",
        description="Range used when a request does not name one",
    )


class Settings(BaseSettings):
    """Main application settings.

    Aggregates all configuration modules and provides a single settings object.
    Load from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )

    # Sub-settings
    api: APISettings = Field(default_factory=APISettings)
    observability: ObservabilitySettings = Field(
        default_factory=ObservabilitySettings
    )
    history: HistorySettings = Field(default_factory=HistorySettings)
    timeline: TimelineSettings = Field(default_factory=TimelineSettings)


# Global settings instance (singleton)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get global settings instance (singleton pattern).

    Returns:
        Settings instance loaded from environment
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads the environment."""
    global _settings
    _settings = None
