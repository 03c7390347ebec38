"""Enumeration types for email-syntax.

This module defines the enum types reported by the validator.
"""

from enum import Enum

__all__ = [
    "DomainKind",
    "FailureReason",
]


class DomainKind(str, Enum):
    """How a domain part was accepted.

    Attributes:
        hostname: Matched the hostname grammar as written.
        ip_literal: Bracketed IPv4 or IPv6 address.
        idn: Internationalized name accepted after IDNA conversion.
    """

    hostname = "hostname"
    ip_literal = "ip_literal"
    idn = "idn"


class FailureReason(str, Enum):
    """The first check an address failed.

    Attributes:
        unsupported_input: The value could not be viewed as text.
        empty: The input was the empty string.
        missing_at_sign: The input contains no ``@``.
        local_part_too_long: Local part exceeds 64 characters.
        domain_part_too_long: Domain part exceeds 255 characters.
        invalid_local_part: Local part contains a disallowed character.
        invalid_domain_part: Domain is neither a hostname, an IP literal
            nor a convertible internationalized name.
    """

    unsupported_input = "unsupported_input"
    empty = "empty"
    missing_at_sign = "missing_at_sign"
    local_part_too_long = "local_part_too_long"
    domain_part_too_long = "domain_part_too_long"
    invalid_local_part = "invalid_local_part"
    invalid_domain_part = "invalid_domain_part"
