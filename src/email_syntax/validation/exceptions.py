"""Exceptions for the validation module.

The predicates in this package never raise. These exceptions are used
by the opt-in helpers and by the IDNA transform, whose errors the domain
resolver converts into a rejection.
"""

from email_syntax.exceptions import EmailSyntaxError
from email_syntax.models.enums import FailureReason

__all__ = [
    "IdnaConversionError",
    "InvalidEmailError",
    "ValidationError",
]


class ValidationError(EmailSyntaxError):
    """Base exception for validation errors."""

    pass


class InvalidEmailError(ValidationError):
    """Raised by ensure_valid_email() when an address is rejected.

    Attributes:
        address: The rejected text, or None if the input was not text.
        reason: The first check the address failed.

    """

    def __init__(self, address: str | None, reason: FailureReason) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid email address {address!r}: {reason.value}")


class IdnaConversionError(ValidationError):
    """Raised when a domain cannot be converted to its ASCII form.

    Attributes:
        domain: The domain that failed to convert.

    """

    def __init__(self, domain: str, detail: str) -> None:
        self.domain = domain
        super().__init__(f"Cannot convert domain {domain!r} to ASCII: {detail}")
