"""Internationalized domain name conversion.

Wraps the ``idna`` package's UTS-46 to-ASCII transform, which maps and
validates each label before encoding it as a Punycode A-label.
"""

import idna

from email_syntax.logging_config import get_logger
from email_syntax.validation.exceptions import IdnaConversionError

__all__ = ["to_ascii"]

logger = get_logger(__name__)


def to_ascii(domain: str) -> str:
    """Convert a domain to its ASCII-compatible encoding.

    Args:
        domain: Domain name, possibly containing non-ASCII labels.

    Returns:
        The domain with every non-ASCII label replaced by its
        ``xn--`` form.

    Raises:
        IdnaConversionError: If a label is malformed or contains a
            disallowed code point.

    Example:
        >>> to_ascii("उदाहरण.परीक्षा")
        'xn--p1b6ci4b4b3a.xn--11b5bs3a9aj6g'

    """
    try:
        encoded = idna.encode(domain, uts46=True)
    except (idna.IDNAError, UnicodeError) as e:
        logger.debug("idna_conversion_failed", domain=domain, error=str(e))
        raise IdnaConversionError(domain, str(e)) from e
    return encoded.decode("ascii")
