"""Data models for email-syntax."""

from email_syntax.models.base import BaseSchema
from email_syntax.models.enums import DomainKind, FailureReason
from email_syntax.models.validation import EmailValidation

__all__ = [
    "BaseSchema",
    "DomainKind",
    "EmailValidation",
    "FailureReason",
]
