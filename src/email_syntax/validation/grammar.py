"""Compiled grammars for the parts of an email address.

The patterns mirror the HTML5 "valid e-mail address" definition:
https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address

Every pattern is applied with ``fullmatch`` so it binds to the whole
string; a trailing newline is never tolerated. ``re.ASCII`` keeps
case-insensitive matching from folding non-ASCII letters such as the
Kelvin sign onto ``k``.
"""

import re

from email_syntax.config.defaults import DOMAIN_LABEL_MAX_LENGTH

__all__ = [
    "DOMAIN_RE",
    "LITERAL_RE",
    "USER_RE",
]

_FLAGS = re.IGNORECASE | re.ASCII

# atext plus dot, no quoting or escapes
USER_RE = re.compile(r"[a-z0-9.!#$%&'*+/=?^_`{|}~-]+", _FLAGS)

_LABEL = r"[a-z0-9](?:[a-z0-9-]{0,%d}[a-z0-9])?" % (DOMAIN_LABEL_MAX_LENGTH - 2)

DOMAIN_RE = re.compile(rf"{_LABEL}(?:\.{_LABEL})*", _FLAGS)

# literal form, ipv4 or ipv6 address (SMTP 4.1.3)
LITERAL_RE = re.compile(r"\[([a-f0-9:.]+)\]", _FLAGS)
