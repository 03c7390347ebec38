"""Email address syntax validation.

This package provides the validation predicate and its building blocks:
the compiled grammars, the IP literal check and the IDNA transform.
"""

from email_syntax.validation.email import (
    ensure_valid_email,
    exceeds_length_limits,
    is_valid_domain_part,
    is_valid_email,
    is_valid_hostname,
    is_valid_local_part,
    resolve_domain_part,
    split_address,
    validate_email,
)
from email_syntax.validation.exceptions import (
    IdnaConversionError,
    InvalidEmailError,
    ValidationError,
)
from email_syntax.validation.idn import to_ascii
from email_syntax.validation.ip import is_valid_ip_literal, is_valid_ipv4, is_valid_ipv6
from email_syntax.validation.text import EmailText, as_email_text

__all__ = [
    "EmailText",
    "IdnaConversionError",
    "InvalidEmailError",
    "ValidationError",
    "as_email_text",
    "ensure_valid_email",
    "exceeds_length_limits",
    "is_valid_domain_part",
    "is_valid_email",
    "is_valid_hostname",
    "is_valid_ip_literal",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_local_part",
    "resolve_domain_part",
    "split_address",
    "to_ascii",
    "validate_email",
]
