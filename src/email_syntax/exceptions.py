"""Base exceptions for email-syntax.

This module defines the root exception hierarchy for the package.
All domain-specific exceptions should inherit from EmailSyntaxError.
"""

__all__ = ["EmailSyntaxError"]


class EmailSyntaxError(Exception):
    """Base exception for all email-syntax errors.

    Provides a common exception type for clients to catch package errors.
    The boolean predicates never raise; only opt-in helpers do.
    """

    pass
