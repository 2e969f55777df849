"""
Configuration Settings.

This module defines the framework configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Settings are read once, at application bootstrap. Apply them to the process-wide
controller configuration with ``Controller.configure_from_settings(settings)``
before the application's actions are imported.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Framework settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Action Dispatch Configuration
    # =====================================================================
    handle_exceptions: Optional[bool] = Field(
        default=None,
        description="Translate exceptions raised by actions into HTTP responses; unset keeps the controller value",
        alias="ACTIONWIRE_HANDLE_EXCEPTIONS",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="ACTIONWIRE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log record format (simple, detailed, json)",
        alias="ACTIONWIRE_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="ACTIONWIRE_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write log records to <log_file_dir>/actionwire.log",
        alias="ACTIONWIRE_ENABLE_FILE_LOGGING",
    )

