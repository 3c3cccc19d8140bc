import pytest

from zonescan.bitmaps import parse_nsec, parse_nxt
from zonescan.errors import ZoneSyntaxError
from zonescan.types import scan_type


def test_nsec_single_type():
    assert parse_nsec(["A"]) == b"\x00\x01\x40"


def test_nsec_rfc4034_example():
    expected = b"\x00\x06\x40\x01\x00\x00\x00\x03" + b"\x04\x1b" + bytes(26) + b"\x20"
    assert parse_nsec(["A", "MX", "RRSIG", "NSEC", "TYPE1234"]) == expected


def test_nsec_empty():
    assert parse_nsec([]) == b""


def test_nsec_order_and_duplicates_do_not_matter():
    forward = parse_nsec(["A", "MX", "CAA", "TYPE1234"])
    assert parse_nsec(["TYPE1234", "caa", "mx", "a", "A"]) == forward


def test_nsec_windows_are_ascending_and_well_formed():
    names = ["TYPE40000", "A", "CAA", "TYPE1234", "DLV"]
    data = parse_nsec(names)
    windows = []
    position = 0
    while position < len(data):
        window, blocks = data[position], data[position + 1]
        assert 1 <= blocks <= 32
        octets = data[position + 2:position + 2 + blocks]
        assert len(octets) == blocks
        assert octets[-1] != 0
        windows.append(window)
        position += 2 + blocks
    assert position == len(data)
    assert windows == sorted(windows)
    assert set(windows) == {scan_type(name).code // 256 for name in names}


def test_nsec_invalid_type():
    with pytest.raises(ZoneSyntaxError):
        parse_nsec(["A", "BOGUS"])


def test_nsec_rejects_class():
    with pytest.raises(ZoneSyntaxError):
        parse_nsec(["IN"])


def test_nxt_single_type():
    assert parse_nxt(["A"]) == b"\x40"


def test_nxt_empty():
    assert parse_nxt([]) == b""


def test_nxt_sets_exactly_the_given_bits():
    names = ["A", "NS", "SOA", "MX", "NXT", "SIG", "KEY"]
    data = parse_nxt(names)
    codes = {scan_type(name).code for name in names}
    assert len(data) == max(codes) // 8 + 1
    set_bits = {
        block * 8 + bit
        for block, octet in enumerate(data)
        for bit in range(8)
        if octet & (0x80 >> bit)
    }
    assert set_bits == codes


def test_nxt_order_independent():
    assert parse_nxt(["MX", "A", "NS"]) == parse_nxt(["NS", "MX", "A", "a"])


def test_nxt_invalid_type():
    with pytest.raises(ZoneSyntaxError):
        parse_nxt(["TYPE65536"])