"""Exceptions for the CLI module.

This module defines exceptions specific to CLI operations.
"""

from email_syntax.exceptions import EmailSyntaxError

__all__ = [
    "CLIError",
    "InputError",
]


class CLIError(EmailSyntaxError):
    """Base exception for CLI-related errors."""

    pass


class InputError(CLIError):
    """Raised when addresses cannot be read from the given input."""

    pass
