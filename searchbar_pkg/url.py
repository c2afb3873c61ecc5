"""Conservative check of whether input can be opened directly as an address.

Anything ambiguous is left to the search engine. Accepting a search term as
an address is the failure to avoid, in particular for unsafe schemes such as
``javascript:`` or ``data:``.
"""

from __future__ import annotations

import string
from urllib.parse import urlsplit

from . import config
from .logging_config import get_logger

logger = get_logger("url")

ASCII_LETTERS = frozenset(string.ascii_letters)
ASCII_DIGITS = frozenset(string.digits)
SCHEME_CHARS = ASCII_LETTERS | ASCII_DIGITS | frozenset("+.-")
LABEL_CHARS = frozenset(string.ascii_lowercase) | ASCII_DIGITS | frozenset("-")


def scan_scheme(text: str) -> str | None:
    """Return the scheme of a leading ``scheme://``, or None when there is none."""
    if not text or text[0] not in ASCII_LETTERS:
        return None
    end = 1
    while end < len(text) and text[end] in SCHEME_CHARS:
        end += 1
    if text.startswith("://", end):
        return text[:end]
    return None


def is_ipv4_octet(text: str) -> bool:
    """Decimal 0-255 without leading zeros."""
    if not text or len(text) > 3 or not all(char in ASCII_DIGITS for char in text):
        return False
    if len(text) > 1 and text[0] == "0":
        return False
    return int(text) <= 255


def _is_numeric_label(label: str) -> bool:
    return bool(label) and all(char in ASCII_DIGITS for char in label)


def _is_domain_label(label: str) -> bool:
    return bool(label) and all(char in LABEL_CHARS for char in label.lower())


def explain_host(host: str) -> str | None:
    """Return why ``host`` (with optional ``:port``) is rejected, or None if it is accepted.

    Accepted hosts are ``localhost``, a dotted-quad IPv4 address, or a domain of
    at least two dot-separated labels made of letters, digits and ``-``.
    """
    name, sep, port = host.partition(":")
    if sep and not (
        config.PORT_MIN_DIGITS <= len(port) <= config.PORT_MAX_DIGITS
        and all(char in ASCII_DIGITS for char in port)
    ):
        return f"invalid port {port!r}"
    if not name:
        return "empty host"
    if name.lower() == "localhost":
        return None

    labels = name.split(".")
    if all(_is_numeric_label(label) for label in labels):
        if len(labels) == 4 and all(is_ipv4_octet(label) for label in labels):
            return None
        return f"invalid IPv4 address {name!r}"
    if len(labels) >= 2 and all(_is_domain_label(label) for label in labels):
        return None
    return f"invalid host {name!r}"


def explain_address(text: str) -> str | None:
    """Return why ``text`` is not a navigable address, or None if it is one."""
    trimmed = text.strip()
    if not trimmed:
        return "empty input"
    if any(char.isspace() for char in trimmed):
        return "contains whitespace"

    scheme = scan_scheme(trimmed)
    if scheme is not None:
        if scheme.lower() in config.SAFE_PROTOCOLS:
            return None
        return f"unsafe scheme {scheme!r}"

    try:
        parts = urlsplit(trimmed)
    except ValueError:
        parts = None
    if parts is not None and parts.scheme in config.SAFE_PROTOCOLS and (parts.netloc or parts.path):
        return None

    host, _, path = trimmed.partition("/")
    reason = explain_host(host)
    if reason is not None:
        return reason
    if any(char.isspace() for char in path):
        return "whitespace in path"
    return None


def is_navigable_address(text: str) -> bool:
    """Return True if ``text`` can safely be opened as an address. Never raises."""
    reason = explain_address(text)
    if reason is not None:
        logger.debug("Not an address: %r", text, extra={"reason": reason})
        return False
    return True


def has_safe_scheme(address: str) -> bool:
    """Whether ``address`` already names an allowed scheme (``HTTPS://x``, ``ftp://x``, ``http:x``)."""
    scheme = scan_scheme(address)
    if scheme is not None:
        return scheme.lower() in config.SAFE_PROTOCOLS
    try:
        parts = urlsplit(address)
    except ValueError:
        return False
    return parts.scheme in config.SAFE_PROTOCOLS and bool(parts.netloc or parts.path)


def navigation_url(address: str) -> str:
    """URL to open for a navigable address: unchanged when it carries a scheme, else ``https://`` prefixed."""
    if has_safe_scheme(address):
        return address
    return "https://" + address
