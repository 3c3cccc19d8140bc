"""Exceptions raised while reading zone data."""

from __future__ import annotations


class ZoneError(Exception):
    """Base class for errors in zone data."""


class ZoneSyntaxError(ZoneError):
    """The zone data is not well formed."""


class ZoneSemanticError(ZoneError):
    """The zone data is well formed but its meaning is invalid."""


def invalid_field(field: str, rrtype: str, semantic: bool = False) -> ZoneError:
    """Build the error for an invalid field of a record type."""
    cls = ZoneSemanticError if semantic else ZoneSyntaxError
    return cls(f"Invalid {field} in {rrtype}")