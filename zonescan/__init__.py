"""Tokenizer and RDATA field parsers for DNS zone files in presentation format."""

__version__ = "0.1.0"

__all__ = [
    "addresses",
    "base32",
    "bitmaps",
    "bits",
    "caa",
    "errors",
    "location",
    "scanner",
    "timestamp",
    "types",
    "wks",
]