import pytest

from zonescan.location import (
    scan_altitude,
    scan_degrees,
    scan_minutes,
    scan_precision,
    scan_seconds,
)


def test_degrees_one_digit():
    assert scan_degrees("1") == 3600000


def test_degrees_maximum():
    assert scan_degrees("180") == 648000000


def test_degrees_scale_with_value():
    assert scan_degrees("42") == 42 * scan_degrees("1")


@pytest.mark.parametrize("text", ["181", "1234", "1a", "", "-1", "9x"])
def test_degrees_invalid(text):
    with pytest.raises(ValueError):
        scan_degrees(text)


def test_minutes_maximum():
    assert scan_minutes("60") == 3600000


def test_minutes_zero():
    assert scan_minutes("0") == 0


def test_minutes_ordered():
    assert scan_minutes("1") < scan_minutes("10") < scan_minutes("59")


@pytest.mark.parametrize("text", ["61", "100", "", "a", "1."])
def test_minutes_invalid(text):
    with pytest.raises(ValueError):
        scan_minutes(text)


def test_seconds_zero():
    assert scan_seconds("0") == 0


def test_seconds_with_fraction():
    assert scan_seconds("59.999") == 59999


def test_seconds_fraction_padding_is_equivalent():
    assert scan_seconds("1.5") == scan_seconds("1.50") == scan_seconds("1.500")


def test_seconds_fraction_adds_to_whole():
    assert scan_seconds("12.25") - scan_seconds("12") == scan_seconds("0.25")


@pytest.mark.parametrize("text", ["60", "1.", "1.2345", "123", "", "1.2x", "6.x", "a"])
def test_seconds_invalid(text):
    with pytest.raises(ValueError):
        scan_seconds(text)


def test_altitude_zero_is_base():
    assert scan_altitude("0") == 10000000


def test_altitude_meter_suffix_is_optional():
    assert scan_altitude("0m") == scan_altitude("0")
    assert scan_altitude("12.5m") == scan_altitude("12.5")


def test_altitude_symmetry():
    base = scan_altitude("0")
    assert scan_altitude("123.45") - base == base - scan_altitude("-123.45")


def test_altitude_deepest():
    assert scan_altitude("-100000") == 0


def test_altitude_highest():
    assert scan_altitude("42849672.95") == 4294967295


@pytest.mark.parametrize(
    "text", ["", "-", "m", "-100000.01", "42849672.96", "1.234", "1x", "1.x", "12345678901"]
)
def test_altitude_invalid(text):
    with pytest.raises(ValueError):
        scan_altitude(text)


def test_precision_one_meter():
    assert scan_precision("1m") == 0x12


def test_precision_zero():
    assert scan_precision("0") == 0x00


def test_precision_largest():
    assert scan_precision("90000000") == 0x99


def test_precision_fraction_forms_agree():
    assert scan_precision("1.5") == scan_precision("1.50m")


def test_precision_mantissa_and_exponent_ranges():
    for text in ("1", "2.5", "10", "999", "12345678", "0.01"):
        value = scan_precision(text)
        assert value >> 4 <= 9
        assert value & 0x0F <= 9


@pytest.mark.parametrize("text", ["123456789", "1.234", "", "m", ".5", "1x"])
def test_precision_invalid(text):
    with pytest.raises(ValueError):
        scan_precision(text)