"""Parser for the tag of CAA records."""

from __future__ import annotations

from .errors import invalid_field

_ALLOWED = frozenset(b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


def parse_caa_tag(text: str) -> bytes:
    """Return the CAA tag as a length-prefixed octet string.

    Tags longer than 255 octets are a syntax error; tags holding anything
    other than ASCII letters and digits are a semantic error.
    """
    octets = text.encode("utf-8")
    if len(octets) > 255:
        raise invalid_field("tag", "CAA")
    if not set(octets) <= _ALLOWED:
        raise invalid_field("tag", "CAA", semantic=True)
    return bytes((len(octets),)) + octets