import base64

import pytest

from zonescan.base32 import decode_base32hex, parse_base32
from zonescan.errors import ZoneSyntaxError


def _encode(data: bytes) -> str:
    return base64.b32hexencode(data).decode("ascii").rstrip("=")


@pytest.mark.parametrize(
    "data",
    [b"", b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar", bytes(range(40))],
)
def test_decode_round_trip(data):
    assert decode_base32hex(_encode(data)) == data


@pytest.mark.parametrize("data", [b"foobar", bytes(range(20))])
def test_decode_is_case_insensitive(data):
    assert decode_base32hex(_encode(data).lower()) == data


def test_decode_length_follows_characters():
    text = _encode(bytes(range(33)))
    assert len(decode_base32hex(text)) == len(text) * 5 // 8


@pytest.mark.parametrize("text", ["W", "CPNMU=", "+", "/", "CP NM", "z"])
def test_decode_rejects_invalid_characters(text):
    with pytest.raises(ValueError):
        decode_base32hex(text)


def test_parse_empty_is_zero_length():
    assert parse_base32("") == b"\x00"


@pytest.mark.parametrize("data", [b"a", bytes(range(20)), bytes(255)])
def test_parse_prefixes_length(data):
    result = parse_base32(_encode(data))
    assert result[0] == len(data)
    assert result[1:] == data


def test_parse_too_long():
    with pytest.raises(ZoneSyntaxError):
        parse_base32(_encode(bytes(256)))


@pytest.mark.parametrize("text", ["CPNMU=", "XYZ", "CPN!"])
def test_parse_invalid_is_syntax_error(text):
    with pytest.raises(ZoneSyntaxError):
        parse_base32(text)