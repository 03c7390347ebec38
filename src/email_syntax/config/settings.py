"""Application settings using pydantic-settings.

This module provides environment variable support for configuration
using pydantic-settings. Settings can be overridden via environment
variables with the appropriate prefix.

Environment Variables:
    EMAIL_SYNTAX_LOG_VERBOSE: Enable debug logging
    EMAIL_SYNTAX_LOG_JSON_OUTPUT: Render log records as JSON
    EMAIL_SYNTAX_OUTPUT_JSON_OUTPUT: Print results as JSON
    EMAIL_SYNTAX_OUTPUT_SHOW_REASONS: Include failure reasons in text output

The validation limits are not settings: they live in
email_syntax.config.defaults and are part of the validation contract.
"""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from email_syntax.config.defaults import (
    DEFAULT_JSON_OUTPUT,
    DEFAULT_LOG_JSON,
    DEFAULT_SHOW_REASONS,
    DEFAULT_VERBOSE,
)
from email_syntax.config.exceptions import ConfigurationError

__all__ = [
    "LoggingSettings",
    "OutputSettings",
    "Settings",
    "get_settings",
]


class LoggingSettings(BaseSettings):
    """Settings for structured logging.

    Attributes:
        verbose: Enable debug-level log records.
        json_output: Render log records as JSON instead of console format.

    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_SYNTAX_LOG_",
        extra="ignore",
    )

    verbose: bool = Field(
        default=DEFAULT_VERBOSE,
        description="Enable debug-level log records",
    )
    json_output: bool = Field(
        default=DEFAULT_LOG_JSON,
        description="Render log records as JSON",
    )


class OutputSettings(BaseSettings):
    """Settings for command output.

    Attributes:
        json_output: Print results as a JSON array.
        show_reasons: Include the failure reason next to invalid addresses.

    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_SYNTAX_OUTPUT_",
        extra="ignore",
    )

    json_output: bool = Field(
        default=DEFAULT_JSON_OUTPUT,
        description="Print results as a JSON array",
    )
    show_reasons: bool = Field(
        default=DEFAULT_SHOW_REASONS,
        description="Include failure reasons in text output",
    )


class Settings(BaseSettings):
    """Root settings container.

    Use get_settings() to access the cached singleton instance.

    Attributes:
        logging: Logging settings.
        output: Command output settings.

    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_SYNTAX_",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance with values from environment variables.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.

    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid email-syntax settings: {e}") from e
