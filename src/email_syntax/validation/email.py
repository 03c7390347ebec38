"""Email address syntax validation.

Implements the HTML5 "valid e-mail address" definition, which is a
practical subset of RFC 5322: quoted strings, comments and escapes are
rejected even though RFC 5322 permits them.

The checks run in a fixed order and stop at the first failure:

1. split on the last ``@``
2. RFC 5321 length limits on both parts
3. local-part grammar
4. domain as hostname, then as bracketed IP literal, then as an
   internationalized name converted to ASCII

Lengths are counted in code points, the same unit the grammars see.
"""

from email_syntax.config.defaults import DOMAIN_PART_MAX_LENGTH, LOCAL_PART_MAX_LENGTH
from email_syntax.models.enums import DomainKind, FailureReason
from email_syntax.models.validation import EmailValidation
from email_syntax.validation.exceptions import IdnaConversionError, InvalidEmailError
from email_syntax.validation.grammar import DOMAIN_RE, LITERAL_RE, USER_RE
from email_syntax.validation.idn import to_ascii
from email_syntax.validation.ip import is_valid_ip_literal
from email_syntax.validation.text import as_email_text

__all__ = [
    "ensure_valid_email",
    "exceeds_length_limits",
    "is_valid_domain_part",
    "is_valid_email",
    "is_valid_hostname",
    "is_valid_local_part",
    "resolve_domain_part",
    "split_address",
    "validate_email",
]


def split_address(address: str) -> tuple[str, str] | None:
    """Split an address on its last ``@``.

    Args:
        address: Address text.

    Returns:
        (local_part, domain_part), or None if the text is empty or has
        no ``@``.

    """
    if not address or "@" not in address:
        return None
    local_part, _, domain_part = address.rpartition("@")
    return local_part, domain_part


def _length_failure(local_part: str, domain_part: str) -> FailureReason | None:
    if len(local_part) > LOCAL_PART_MAX_LENGTH:
        return FailureReason.local_part_too_long
    if len(domain_part) > DOMAIN_PART_MAX_LENGTH:
        return FailureReason.domain_part_too_long
    return None


def exceeds_length_limits(local_part: str, domain_part: str) -> bool:
    """Check the RFC 5321 section 4.5.3.1.1 limits."""
    return _length_failure(local_part, domain_part) is not None


def is_valid_local_part(local_part: str) -> bool:
    return USER_RE.fullmatch(local_part) is not None


def is_valid_hostname(domain: str) -> bool:
    return DOMAIN_RE.fullmatch(domain) is not None


def _ip_literal_content(domain: str) -> str | None:
    # maybe we have an ip as a domain?
    match = LITERAL_RE.fullmatch(domain)
    if match is None or not is_valid_ip_literal(match.group(1)):
        return None
    return match.group(1)


def resolve_domain_part(domain_part: str) -> tuple[DomainKind, str] | None:
    """Work out how a domain part is acceptable, if at all.

    Args:
        domain_part: Text after the last ``@``.

    Returns:
        (kind, ascii_domain) where ascii_domain is the text the grammar
        accepted, or None if the domain is invalid.

    """
    if is_valid_hostname(domain_part):
        return DomainKind.hostname, domain_part

    literal = _ip_literal_content(domain_part)
    if literal is not None:
        return DomainKind.ip_literal, literal

    # Still the possibility of an internationalized domain name
    try:
        ascii_domain = to_ascii(domain_part)
    except IdnaConversionError:
        return None
    if not is_valid_hostname(ascii_domain):
        return None
    return DomainKind.idn, ascii_domain


def is_valid_domain_part(domain_part: str) -> bool:
    return resolve_domain_part(domain_part) is not None


def validate_email(value: object) -> EmailValidation:
    """Validate an address and report which check, if any, failed.

    Args:
        value: The address. See as_email_text() for accepted types.

    Returns:
        An EmailValidation. Never raises for any input.

    """
    address = as_email_text(value)
    if address is None:
        return EmailValidation(valid=False, reason=FailureReason.unsupported_input)
    if not address:
        return EmailValidation(address=address, valid=False, reason=FailureReason.empty)

    parts = split_address(address)
    if parts is None:
        return EmailValidation(
            address=address, valid=False, reason=FailureReason.missing_at_sign
        )
    local_part, domain_part = parts

    def rejected(reason: FailureReason) -> EmailValidation:
        return EmailValidation(
            address=address,
            valid=False,
            reason=reason,
            local_part=local_part,
            domain_part=domain_part,
        )

    # validate the length of each part BEFORE doing the regex
    length_failure = _length_failure(local_part, domain_part)
    if length_failure is not None:
        return rejected(length_failure)

    if not is_valid_local_part(local_part):
        return rejected(FailureReason.invalid_local_part)

    resolved = resolve_domain_part(domain_part)
    if resolved is None:
        return rejected(FailureReason.invalid_domain_part)
    domain_kind, ascii_domain = resolved

    return EmailValidation(
        address=address,
        valid=True,
        local_part=local_part,
        domain_part=domain_part,
        domain_kind=domain_kind,
        ascii_domain=ascii_domain,
    )


def is_valid_email(value: object) -> bool:
    """Check whether a value is a syntactically valid email address.

    Follows the HTML5 definition of a valid e-mail address. RFC 5322 is
    not practical in most circumstances and allows addresses that are
    unfamiliar to most users.

    Args:
        value: The address. See as_email_text() for accepted types.

    Returns:
        True if every check passes. Never raises.

    """
    return validate_email(value).valid


def ensure_valid_email(value: object) -> str:
    """Return the address text, raising if it is not valid.

    Raises:
        InvalidEmailError: With the first failed check as its reason.

    """
    result = validate_email(value)
    if not result.valid:
        raise InvalidEmailError(result.address, result.reason)
    return result.address
