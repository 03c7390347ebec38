"""Validation result model.

Defines the diagnostic record returned by validate_email().
"""

from typing import Any

from email_syntax.models.base import BaseSchema
from email_syntax.models.enums import DomainKind, FailureReason

__all__ = ["EmailValidation"]


class EmailValidation(BaseSchema):
    """Outcome of validating a single address.

    Attributes:
        address: The text that was validated, or None if the input could
            not be viewed as text.
        valid: Whether every check passed.
        reason: The first failed check, None when valid.
        local_part: Text before the last ``@``, when one was found.
        domain_part: Text after the last ``@``, when one was found.
        domain_kind: How the domain was accepted, None when not accepted.
        ascii_domain: The domain as checked by the grammar: the A-label
            form for internationalized names, the bracket content for IP
            literals, otherwise the domain part itself.

    """

    address: str | None = None
    valid: bool
    reason: FailureReason | None = None
    local_part: str | None = None
    domain_part: str | None = None
    domain_kind: DomainKind | None = None
    ascii_domain: str | None = None

    def __bool__(self) -> bool:
        """Truthiness follows validity."""
        return self.valid

    def get_summary(self) -> dict[str, Any]:
        """Get a JSON-serializable summary of the result.

        Returns:
            Dictionary with the address, validity and, where set, the
            failure reason or how the domain was accepted.

        """
        summary: dict[str, Any] = {"address": self.address, "valid": self.valid}
        if self.reason is not None:
            summary["reason"] = self.reason.value
        if self.domain_kind is not None:
            summary["domain_kind"] = self.domain_kind.value
            summary["ascii_domain"] = self.ascii_domain
        return summary
