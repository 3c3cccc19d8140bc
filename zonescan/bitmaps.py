"""Type bitmaps of NSEC (RFC 4034) and NXT (RFC 2535) records."""

from __future__ import annotations

from collections.abc import Iterable

from .bits import leading_zeroes
from .errors import invalid_field
from .types import scan_type

_WINDOW_OCTETS = 32


def _codes(mnemonics: Iterable[str], rrtype: str) -> list[int]:
    codes = []
    for text in mnemonics:
        try:
            codes.append(scan_type(text).code)
        except ValueError:
            raise invalid_field("type", rrtype) from None
    return codes


def parse_nsec(mnemonics: Iterable[str]) -> bytes:
    """Encode type mnemonics as NSEC windowed type bitmaps.

    Each window in use is written as its number, the count of bitmap
    octets up to the last one in use, and those octets, in window order.
    """
    bitmaps: dict[int, bytearray] = {}
    blocks_used: dict[int, int] = {}
    for code in _codes(mnemonics, "NSEC"):
        window, bit = divmod(code, 256)
        block = bit // 8
        bitmap = bitmaps.setdefault(window, bytearray(_WINDOW_OCTETS))
        bitmap[block] |= 1 << (7 - bit % 8)
        blocks_used[window] = blocks_used.get(window, 0) | (1 << block)

    output = bytearray()
    for window in sorted(bitmaps):
        blocks = 64 - leading_zeroes(blocks_used[window])
        output += bytes((window, blocks))
        output += bitmaps[window][:blocks]
    return bytes(output)


def parse_nxt(mnemonics: Iterable[str]) -> bytes:
    """Encode type mnemonics as a flat NXT bitmap up to the highest octet used."""
    codes = _codes(mnemonics, "NXT")
    if not codes:
        return b""
    bitmap = bytearray(max(codes) // 8 + 1)
    for code in codes:
        block, bit = divmod(code, 8)
        bitmap[block] |= 1 << (7 - bit)
    return bytes(bitmap)