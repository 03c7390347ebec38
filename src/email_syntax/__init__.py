"""email-syntax: HTML5 email address syntax validation.

Example:
    >>> from email_syntax import is_valid_email
    >>> is_valid_email("john_doe@example.com")
    True
    >>> is_valid_email("trailingdot@shouldfail.com.")
    False

"""

from email_syntax.exceptions import EmailSyntaxError
from email_syntax.models import DomainKind, EmailValidation, FailureReason
from email_syntax.validation import (
    EmailText,
    InvalidEmailError,
    ensure_valid_email,
    is_valid_email,
    validate_email,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DomainKind",
    "EmailSyntaxError",
    "EmailText",
    "EmailValidation",
    "FailureReason",
    "InvalidEmailError",
    "ensure_valid_email",
    "is_valid_email",
    "validate_email",
]
