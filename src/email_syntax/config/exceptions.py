"""Exceptions for config module.

This module defines exceptions related to loading settings.
"""

from email_syntax.exceptions import EmailSyntaxError

__all__ = ["ConfigurationError"]


class ConfigurationError(EmailSyntaxError):
    """Raised when settings cannot be loaded or fail validation."""

    pass
