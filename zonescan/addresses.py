"""Parsers for IPv4 addresses, address prefix lists and 64-bit locators."""

from __future__ import annotations

import ipaddress

from .errors import invalid_field

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_AF_INET = b"\x00\x01"
_AF_INET6 = b"\x00\x02"


def _digit(text: str, index: int) -> int | None:
    """Return the decimal digit at ``index``, or None if there is none."""
    if 0 <= index < len(text) and "0" <= text[index] <= "9":
        return ord(text[index]) - ord("0")
    return None


def scan_ip4(text: str) -> tuple[bytes, int]:
    """Scan a dotted-quad IPv4 address at the start of ``text``.

    Returns the four address octets and the number of characters consumed.
    Characters after the address are left for the caller to judge.
    Raises ValueError if no valid address starts the text.
    """
    octets = bytearray()
    position = 0
    while True:
        first = _digit(text, position)
        if first is None:
            raise ValueError("expected a decimal octet")
        second = _digit(text, position + 1)
        third = _digit(text, position + 2)
        if second is None:
            count, octet = 1, first
        elif third is None:
            count, octet = 2, first * 10 + second
        else:
            count, octet = 3, first * 100 + second * 10 + third
        if octet > 255 or (count > 1 and first == 0):
            raise ValueError("octet out of range or with leading zero")
        position += count
        octets.append(octet)
        if len(octets) == 4 or position >= len(text) or text[position] != ".":
            break
        position += 1

    if len(octets) != 4:
        raise ValueError("an IPv4 address has four octets")
    return bytes(octets), position


def parse_ip4(text: str) -> bytes:
    """Parse a complete IPv4 address token into its four wire octets."""
    try:
        octets, consumed = scan_ip4(text)
    except ValueError:
        raise invalid_field("address", "A") from None
    if consumed != len(text):
        raise invalid_field("address", "A")
    return octets


def _scan_prefix(text: str, position: int, max_digits: int) -> tuple[int, int]:
    if position >= len(text) or text[position] != "/":
        raise ValueError("expected '/' before the prefix length")
    position += 1
    digits = []
    while len(digits) < max_digits:
        digit = _digit(text, position + len(digits))
        if digit is None:
            break
        digits.append(digit)
    if not digits:
        raise ValueError("missing prefix length")
    prefix = 0
    for digit in digits:
        prefix = prefix * 10 + digit
    return prefix, position + len(digits)


def scan_apl(text: str) -> bytes:
    """Parse one address prefix list item such as ``!1:192.0.2.0/24``.

    Returns the wire form: address family, prefix length, negation flag with
    address length, and the full address.  Raises ValueError when invalid.
    """
    negate = text.startswith("!")
    index = int(negate)
    if len(text) < index + 2 or text[index + 1] != ":":
        raise ValueError("address family must be followed by ':'")
    family = text[index]
    start = index + 2

    if family == "1":
        address, consumed = scan_ip4(text[start:])
        prefix, end = _scan_prefix(text, start + consumed, 2)
        if prefix > 32 or end != len(text):
            raise ValueError("invalid IPv4 prefix")
        header = _AF_INET
    elif family == "2":
        slash = text.find("/", start)
        if slash < 0:
            raise ValueError("expected '/' before the prefix length")
        literal = text[start:slash]
        if "%" in literal:
            raise ValueError("scoped addresses are not allowed")
        try:
            address = ipaddress.IPv6Address(literal).packed
        except ipaddress.AddressValueError as exc:
            raise ValueError(str(exc)) from None
        prefix, end = _scan_prefix(text, slash, 3)
        if prefix > 128 or end != len(text):
            raise ValueError("invalid IPv6 prefix")
        header = _AF_INET6
    else:
        raise ValueError(f"unsupported address family {family!r}")

    flags = (int(negate) << 7) | len(address)
    return header + bytes((prefix, flags)) + address


def parse_ilnp64(text: str) -> bytes:
    """Parse a 64-bit locator (four colon separated hex groups) into 8 octets."""
    groups = text.split(":")
    if len(groups) != 4 or any(
        not 1 <= len(group) <= 4 or not set(group) <= _HEX_DIGITS for group in groups
    ):
        raise invalid_field("locator", "L64")
    return b"".join(int(group, 16).to_bytes(2, "big") for group in groups)