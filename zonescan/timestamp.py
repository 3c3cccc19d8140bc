"""Parser for record timestamps (YYYYmmddHHMMSS or seconds since the epoch)."""

from __future__ import annotations

from .errors import invalid_field

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_TO_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_UINT32_MAX = 0xFFFFFFFF


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leap_days(y1: int, y2: int) -> int:
    """Return the number of leap years in the range [y1, y2)."""
    y1 -= 1
    y2 -= 1
    return (y2 // 4 - y1 // 4) - (y2 // 100 - y1 // 100) + (y2 // 400 - y1 // 400)


def _is_digits(text: str) -> bool:
    return bool(text) and all("0" <= char <= "9" for char in text)


def _parse_int32(text: str) -> bytes:
    if not _is_digits(text):
        raise invalid_field("timestamp", "RRSIG")
    value = int(text)
    if value > _UINT32_MAX:
        raise invalid_field("timestamp", "RRSIG")
    return value.to_bytes(4, "big")


def parse_time(text: str) -> bytes:
    """Parse a timestamp into four big-endian octets of seconds since 1970.

    Fourteen characters are read as YYYYmmddHHMMSS; anything else as a plain
    unsigned 32-bit number.  The result wraps modulo 2**32.
    """
    if len(text) != 14:
        return _parse_int32(text)
    if not _is_digits(text):
        raise invalid_field("timestamp", "RRSIG")

    year = int(text[0:4])
    month = int(text[4:6])
    day = int(text[6:8])
    hour = int(text[8:10])
    minute = int(text[10:12])
    second = int(text[12:14])

    if year < 1970:
        raise invalid_field("timestamp", "RRSIG")
    leap = is_leap_year(year)
    if not 1 <= month <= 12:
        raise invalid_field("timestamp", "RRSIG")
    if not 1 <= day <= _DAYS_IN_MONTH[month] + (leap and month == 2):
        raise invalid_field("timestamp", "RRSIG")
    if hour > 23 or minute > 59 or second > 59:
        raise invalid_field("timestamp", "RRSIG")

    days = 365 * (year - 1970) + leap_days(1970, year)
    days += _DAYS_TO_MONTH[month]
    days += int(month > 2 and leap)
    days += day - 1

    seconds = ((days * 24 + hour) * 60 + minute) * 60 + second
    return (seconds & _UINT32_MAX).to_bytes(4, "big")