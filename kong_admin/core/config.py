"""
Configuration Settings.

This module defines the client configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class KongAdminConfig(BaseModel):
    """Kong Admin API connection configuration."""

    url: str = Field(
        default="http://localhost:8001", alias="KONG_ADMIN_URL", description="Kong Admin API base URL"
    )
    timeout: float = Field(default=10.0, alias="KONG_ADMIN_TIMEOUT", description="HTTP timeout in seconds")

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="KONG_ADMIN_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="KONG_ADMIN_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(default="logs", alias="KONG_ADMIN_LOG_FILE_DIR", description="Directory for the log file")
    enable_file: bool = Field(
        default=False, alias="KONG_ADMIN_ENABLE_FILE_LOGGING", description="Write logs to a file as well"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Client settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Kong Admin API
    # =====================================================================
    kong_admin_url: str = Field(
        default="http://localhost:8001",
        description="Kong Admin API base URL",
        alias="KONG_ADMIN_URL",
    )
    kong_admin_timeout: float = Field(
        default=10.0,
        description="HTTP timeout in seconds applied to the internally created transport",
        alias="KONG_ADMIN_TIMEOUT",
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="KONG_ADMIN_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format (simple, detailed, json)",
        alias="KONG_ADMIN_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory the log file is written to",
        alias="KONG_ADMIN_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write logs to <log_file_dir>/kong_admin.log as well as the console",
        alias="KONG_ADMIN_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def kong_admin(self) -> KongAdminConfig:
        """Get Kong Admin API configuration from environment variables."""
        return KongAdminConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance, loading it on first use."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and re-read the environment."""
    get_settings.cache_clear()
    return get_settings()
