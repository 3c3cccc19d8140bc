"""Scanners for record type and class mnemonics.

Known mnemonics are matched case insensitively.  The generic forms
``TYPEnnn`` and ``CLASSnnn`` from RFC 3597 are accepted as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """Whether a mnemonic names a record type or a record class."""

    TYPE = 1
    CLASS = 2


@dataclass(frozen=True)
class Mnemonic:
    """A record type or class: its presentation name, numeric code and kind."""

    name: str
    code: int
    kind: Kind


_TYPE_NAMES = {
    1: "A",
    2: "NS",
    3: "MD",
    4: "MF",
    5: "CNAME",
    6: "SOA",
    7: "MB",
    8: "MG",
    9: "MR",
    10: "NULL",
    11: "WKS",
    12: "PTR",
    13: "HINFO",
    14: "MINFO",
    15: "MX",
    16: "TXT",
    17: "RP",
    18: "AFSDB",
    19: "X25",
    20: "ISDN",
    21: "RT",
    22: "NSAP",
    23: "NSAP-PTR",
    24: "SIG",
    25: "KEY",
    26: "PX",
    27: "GPOS",
    28: "AAAA",
    29: "LOC",
    30: "NXT",
    33: "SRV",
    35: "NAPTR",
    36: "KX",
    37: "CERT",
    38: "A6",
    39: "DNAME",
    42: "APL",
    43: "DS",
    44: "SSHFP",
    45: "IPSECKEY",
    46: "RRSIG",
    47: "NSEC",
    48: "DNSKEY",
    49: "DHCID",
    50: "NSEC3",
    51: "NSEC3PARAM",
    52: "TLSA",
    53: "SMIMEA",
    55: "HIP",
    59: "CDS",
    60: "CDNSKEY",
    61: "OPENPGPKEY",
    62: "CSYNC",
    63: "ZONEMD",
    64: "SVCB",
    65: "HTTPS",
    99: "SPF",
    104: "NID",
    105: "L32",
    106: "L64",
    107: "LP",
    108: "EUI48",
    109: "EUI64",
    256: "URI",
    257: "CAA",
    258: "AVC",
    32769: "DLV",
}

_CLASS_NAMES = {
    1: "IN",
    2: "CS",
    3: "CH",
    4: "HS",
}

_BY_NAME = {
    **{name: Mnemonic(name, code, Kind.TYPE) for code, name in _TYPE_NAMES.items()},
    **{name: Mnemonic(name, code, Kind.CLASS) for code, name in _CLASS_NAMES.items()},
}

_UINT16_MAX = 0xFFFF


def _ascii_upper(text: str) -> str | None:
    return text.upper() if text.isascii() else None


def _scan_uint16(text: str) -> int:
    if not text or not all("0" <= char <= "9" for char in text):
        raise ValueError(f"invalid number {text!r}")
    value = int(text)
    if value > _UINT16_MAX:
        raise ValueError(f"number out of range {text!r}")
    return value


def _generic_type(digits: str) -> Mnemonic:
    code = _scan_uint16(digits)
    return Mnemonic(_TYPE_NAMES.get(code, f"TYPE{code}"), code, Kind.TYPE)


def _generic_class(digits: str) -> Mnemonic:
    code = _scan_uint16(digits)
    return Mnemonic(_CLASS_NAMES.get(code, f"CLASS{code}"), code, Kind.CLASS)


def scan_type_or_class(text: str) -> Mnemonic:
    """Return the record type or class named by ``text``.

    Raises ValueError for unknown mnemonics and malformed generic forms.
    """
    key = _ascii_upper(text)
    if key is None:
        raise ValueError(f"unknown type or class {text!r}")
    mnemonic = _BY_NAME.get(key)
    if mnemonic is not None:
        return mnemonic
    if key.startswith("TYPE"):
        return _generic_type(text[4:])
    if key.startswith("CLASS"):
        return _generic_class(text[5:])
    raise ValueError(f"unknown type or class {text!r}")


def scan_type(text: str) -> Mnemonic:
    """Return the record type named by ``text``; classes are rejected.

    Raises ValueError for anything that is not a known or generic type.
    """
    key = _ascii_upper(text)
    if key is None:
        raise ValueError(f"unknown type {text!r}")
    mnemonic = _BY_NAME.get(key)
    if mnemonic is not None:
        if mnemonic.kind is not Kind.TYPE:
            raise ValueError(f"{text!r} is a class, not a type")
        return mnemonic
    if key.startswith("TYPE"):
        return _generic_type(text[4:])
    raise ValueError(f"unknown type {text!r}")