"""Application settings management using Pydantic Settings.

This module provides centralized configuration management for the application,
with support for environment variables and validation.
"""

from typing import Any, ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DECLARATION_MARKER_LENGTH = 2


class LoggingSettings(BaseSettings):
    """Logging configuration settings.

    All settings can be configured via environment variables.
    """

    instance: ClassVar[Any] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    log_format: Literal["json", "console", "plain"] = Field(
        default="json",
        description="Log output format",
    )

    log_file_path: str | None = Field(
        default=None,
        description="Path to log file for local file logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return v.upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        valid_formats = {"json", "console", "plain"}
        if v.lower() not in valid_formats:
            msg = f"Invalid log format: {v}. Must be one of {valid_formats}"
            raise ValueError(msg)
        return v.lower()


class CalculatorSettings(BaseSettings):
    """Parsing defaults used by the string calculator."""

    instance: ClassVar[Any] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="STRING_CALCULATOR_",
    )

    default_delimiter: str = Field(
        default=";",
        description="Delimiter used by the declaration-aware variants when none is declared.",
    )
    declaration_marker: str = Field(
        default="//",
        description="Two-character prefix that introduces a custom delimiter declaration.",
    )

    @field_validator("default_delimiter")
    @classmethod
    def validate_default_delimiter(cls, v: str) -> str:
        """Reject an empty default delimiter."""
        if not v:
            msg = "Default delimiter must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("declaration_marker")
    @classmethod
    def validate_declaration_marker(cls, v: str) -> str:
        """Ensure the declaration marker is exactly two characters long."""
        if len(v) != DECLARATION_MARKER_LENGTH:
            msg = (
                f"Invalid declaration marker: {v!r}. "
                f"Must be exactly {DECLARATION_MARKER_LENGTH} characters"
            )
            raise ValueError(msg)
        return v


def get_settings() -> LoggingSettings:
    """Get the global settings instance.

    Returns:
        LoggingSettings: The settings instance

    """
    if LoggingSettings.instance is None:
        LoggingSettings.instance = LoggingSettings()
    return LoggingSettings.instance


def reset_settings() -> None:
    """Reset the global settings instance.

    This is mainly useful for testing.
    """
    LoggingSettings.instance = None


def get_calculator_settings() -> CalculatorSettings:
    """Get the global calculator settings instance."""
    if CalculatorSettings.instance is None:
        CalculatorSettings.instance = CalculatorSettings()
    return CalculatorSettings.instance


def reset_calculator_settings() -> None:
    """Reset the global calculator settings instance."""
    CalculatorSettings.instance = None
