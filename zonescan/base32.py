"""Decoder for base32hex encoded fields (as in NSEC3 next hashed owner names)."""

from __future__ import annotations

from .errors import invalid_field

_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
_VALUES = {
    **{char: value for value, char in enumerate(_ALPHABET)},
    **{char.lower(): value for value, char in enumerate(_ALPHABET)},
}
_MAXIMUM_LENGTH = 255


def decode_base32hex(text: str) -> bytes:
    """Decode unpadded base32hex text (case insensitive).

    Every character is worth five bits; bits that do not fill a whole
    octet at the end are dropped.  Raises ValueError on any character
    outside the alphabet, padding included.
    """
    output = bytearray()
    accumulator = 0
    bits = 0
    for char in text:
        value = _VALUES.get(char)
        if value is None:
            raise ValueError(f"invalid base32hex character {char!r}")
        accumulator = (accumulator << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            output.append((accumulator >> bits) & 0xFF)
            accumulator &= (1 << bits) - 1
    return bytes(output)


def parse_base32(text: str) -> bytes:
    """Decode a base32hex field into a length-prefixed octet string."""
    if len(text) * 5 // 8 > _MAXIMUM_LENGTH:
        raise invalid_field("next hashed owner name", "NSEC3")
    try:
        octets = decode_base32hex(text)
    except ValueError:
        raise invalid_field("next hashed owner name", "NSEC3") from None
    return bytes((len(octets),)) + octets