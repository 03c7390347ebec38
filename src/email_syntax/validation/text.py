"""Conversion of supported inputs to a text view.

The validator works on ``str``. Other representations of an address are
accepted as long as they can be viewed as text without guessing.
"""

from collections import UserString
from typing import Protocol, runtime_checkable

__all__ = ["EmailText", "as_email_text"]


@runtime_checkable
class EmailText(Protocol):
    """Anything that can present itself as an email address string."""

    def to_email_string(self) -> str:
        """Return the address text."""
        ...


def as_email_text(value: object) -> str | None:
    """View a value as address text.

    Args:
        value: A ``str``, ``UserString``, UTF-8 encoded bytes-like
            object, or an EmailText implementation.

    Returns:
        The text, or None if the value is unsupported or its bytes are
        not valid UTF-8.

    """
    if isinstance(value, str):
        return value
    if isinstance(value, UserString):
        return value.data
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(value, EmailText):
        text = value.to_email_string()
        return text if isinstance(text, str) else None
    return None
