"""Parsing of ``rfc:`` URIs and free-form RFC references."""

from __future__ import annotations

import re
from urllib.parse import unquote

from rfcnav.core.models import RfcAddress

RFC_SCHEME = "rfc"

_NUMBER = re.compile(r"\d+")
_REFERENCE = re.compile(r"(?:rfc\s*)?(\d+)(?:\.txt)?(?:#(.*))?", re.IGNORECASE | re.DOTALL)


def _parse_number(value: str) -> int | None:
    value = value.strip()
    if not _NUMBER.fullmatch(value):
        return None
    number = int(value)
    return number if number > 0 else None


def parse_rfc_uri(uri: str) -> RfcAddress | None:
    """Parse ``rfc:<N>[#fragment]`` or ``rfc://<N>[/fragment][#fragment]``.

    Returns:
        The address, or None if the URI is not an ``rfc:`` URI or its number
        is not a positive integer
    """
    if not uri:
        return None
    scheme, colon, rest = uri.strip().partition(":")
    if not colon or scheme.lower() != RFC_SCHEME:
        return None

    rest, _, url_fragment = rest.partition("#")
    if rest.startswith("//"):
        number_text, _, remainder = rest[2:].partition("/")
        remainder = remainder.strip("/")
    else:
        number_text, _, remainder = rest.strip("/").partition("/")

    number = _parse_number(unquote(number_text))
    if number is None:
        return None

    fragment = url_fragment or remainder
    return RfcAddress(number, unquote(fragment))


def parse_rfc_reference(value: str) -> RfcAddress | None:
    """Parse a user-entered reference: ``2223``, ``RFC 2223``, ``rfc2223#page-3``, or a URI."""
    if not value:
        return None
    value = value.strip()
    if value.lower().startswith(f"{RFC_SCHEME}:"):
        return parse_rfc_uri(value)

    match = _REFERENCE.fullmatch(value)
    if match is None:
        return None
    number = _parse_number(match.group(1))
    if number is None:
        return None
    return RfcAddress(number, match.group(2) or "")
