"""IP address syntax checks for domain literals.

Thin predicates over the standard library ``ipaddress`` parsers.
"""

import ipaddress

__all__ = [
    "is_valid_ip_literal",
    "is_valid_ipv4",
    "is_valid_ipv6",
]


def is_valid_ipv4(text: str) -> bool:
    """Check for a dotted-quad IPv4 address with octets in 0-255."""
    if not isinstance(text, str):
        return False
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def is_valid_ipv6(text: str) -> bool:
    """Check for a colon-hex IPv6 address.

    Accepts ``::`` compression and an embedded IPv4 tail such as
    ``::ffff:127.0.0.1``. Zone identifiers (``fe80::1%eth0``) are not
    part of an address literal and are rejected.
    """
    if not isinstance(text, str) or "%" in text:
        return False
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def is_valid_ip_literal(text: str) -> bool:
    """Check whether text is a valid IPv4 or IPv6 address.

    Args:
        text: Address text without the surrounding brackets.

    Returns:
        True if text parses as either address family.

    """
    return is_valid_ipv4(text) or is_valid_ipv6(text)
