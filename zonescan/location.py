"""Scanners for the fields of location (LOC) records."""

from __future__ import annotations

_MILLISECONDS_PER_DEGREE = 3_600_000
_MILLISECONDS_PER_MINUTE = 60_000
_MAXIMUM_DEGREES = 648_000_000
_MAXIMUM_MINUTES = 3_600_000
_ALTITUDE_BASE = 10_000_000
_MAXIMUM_ALTITUDE = 4_284_967_295
_MAXIMUM_DEPTH = 10_000_000


def _digit(text: str, index: int) -> int | None:
    if 0 <= index < len(text) and "0" <= text[index] <= "9":
        return ord(text[index]) - ord("0")
    return None


def _is_digits(text: str) -> bool:
    return bool(text) and all("0" <= char <= "9" for char in text)


def scan_degrees(text: str) -> int:
    """Return degrees (1 to 3 digits, at most 180) in thousandths of a second of arc."""
    if not 1 <= len(text) <= 3 or not _is_digits(text):
        raise ValueError(f"invalid degrees {text!r}")
    degrees = int(text) * _MILLISECONDS_PER_DEGREE
    if degrees > _MAXIMUM_DEGREES:
        raise ValueError(f"degrees out of range {text!r}")
    return degrees


def scan_minutes(text: str) -> int:
    """Return minutes (1 or 2 digits, at most 60) in thousandths of a second of arc."""
    if not 1 <= len(text) <= 2 or not _is_digits(text):
        raise ValueError(f"invalid minutes {text!r}")
    minutes = int(text) * _MILLISECONDS_PER_MINUTE
    if minutes > _MAXIMUM_MINUTES:
        raise ValueError(f"minutes out of range {text!r}")
    return minutes


def scan_seconds(text: str) -> int:
    """Return seconds (below 60, up to three decimals) in thousandths."""
    if len(text) == 1 or text[1:2] == ".":
        count = 1
    elif len(text) == 2 or text[2:3] == ".":
        count = 2
    else:
        raise ValueError(f"invalid seconds {text!r}")

    whole = text[:count]
    if not _is_digits(whole) or (count == 2 and whole[0] > "5"):
        raise ValueError(f"invalid seconds {text!r}")
    milliseconds = int(whole) * 1000

    if len(text) > count:
        fraction = text[count + 1:]
        if not 1 <= len(fraction) <= 3 or not _is_digits(fraction):
            raise ValueError(f"invalid fraction of seconds {text!r}")
        milliseconds += int(fraction.ljust(3, "0"))
    return milliseconds


def _scan_fraction(text: str, index: int, length: int) -> tuple[int, int]:
    """Scan '.' plus up to two digits; return (centimeters, new index)."""
    remaining = length - index
    if remaining == 1:
        return 0, index + 1
    if remaining == 2:
        tenths = _digit(text, index + 1)
        if tenths is None:
            raise ValueError(f"invalid fraction {text!r}")
        return tenths * 10, index + 2
    if remaining == 3:
        tenths = _digit(text, index + 1)
        hundredths = _digit(text, index + 2)
        if tenths is None or hundredths is None:
            raise ValueError(f"invalid fraction {text!r}")
        return tenths * 10 + hundredths, index + 3
    raise ValueError(f"invalid fraction {text!r}")


def scan_altitude(text: str) -> int:
    """Return an altitude in meters as centimeters above 100,000 m below the WGS 84 spheroid."""
    if not text:
        raise ValueError("empty altitude")
    negative = text[0] == "-"
    if negative:
        limit, maximum = 8, _MAXIMUM_DEPTH
    else:
        limit, maximum = 11, _MAXIMUM_ALTITUDE
    length = len(text) - (text[-1] == "m")

    start = int(negative)
    index = start
    meters = 0
    while (digit := _digit(text, index)) is not None:
        meters = meters * 10 + digit
        index += 1

    centimeters = meters * 100
    if index < len(text) and text[index] == ".":
        limit += 1
        extra, index = _scan_fraction(text, index, length)
        centimeters += extra

    if index == start or index > limit or index != length or centimeters > maximum:
        raise ValueError(f"invalid altitude {text!r}")

    if negative:
        return _ALTITUDE_BASE - centimeters
    return _ALTITUDE_BASE + centimeters


def scan_precision(text: str) -> int:
    """Return a size or precision in meters as the one-octet mantissa/exponent form."""
    if not text:
        raise ValueError("empty precision")
    length = len(text) - (text[-1] == "m")

    index = 0
    meters = 0
    while (digit := _digit(text, index)) is not None:
        meters = meters * 10 + digit
        index += 1

    if index == 0 or index > 8:
        raise ValueError(f"invalid precision {text!r}")

    centimeters = meters * 100
    if index < len(text) and text[index] == ".":
        extra, index = _scan_fraction(text, index, length)
        centimeters += extra

    if index != length:
        raise ValueError(f"invalid precision {text!r}")

    exponent = 0
    while exponent < 9 and centimeters >= 10 ** (exponent + 1):
        exponent += 1
    mantissa = min(centimeters // 10**exponent, 9)
    return (mantissa << 4) | exponent