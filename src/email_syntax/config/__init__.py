"""Configuration for email-syntax.

Exposes the validation limits and the environment-driven settings.
"""

from email_syntax.config.defaults import (
    DOMAIN_LABEL_MAX_LENGTH,
    DOMAIN_PART_MAX_LENGTH,
    LOCAL_PART_MAX_LENGTH,
)
from email_syntax.config.exceptions import ConfigurationError
from email_syntax.config.settings import (
    LoggingSettings,
    OutputSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigurationError",
    "DOMAIN_LABEL_MAX_LENGTH",
    "DOMAIN_PART_MAX_LENGTH",
    "LOCAL_PART_MAX_LENGTH",
    "LoggingSettings",
    "OutputSettings",
    "Settings",
    "get_settings",
]
