import pytest

from polysecret.errors import DigitOutOfRange, EmptyInput, InvalidCharacter, InvalidRadix
from polysecret.radix import decode, digit_value


def test_decode_known_values():
    assert decode("111", 2) == 7
    assert decode("213", 4) == 39
    assert decode("377", 8) == 255
    assert decode("FF", 16) == decode("ff", 16) == 255
    assert decode("0", 2) == 0


def test_decode_large_values_stay_exact():
    digits = "20120221122211000100210021102001201112121"
    value = decode(digits, 3)
    assert value == int(digits, 3)
    assert value > 2**64
    assert isinstance(value, int)


def test_decode_float_mode_rounds_above_53_bits():
    digits = "e1b5e05623d881f"
    exact = decode(digits, 16)
    approx = decode(digits, 16, precision="float")
    assert isinstance(approx, float)
    assert approx == pytest.approx(exact, rel=1e-15)
    assert decode("377", 8, precision="float") == 255.0


@pytest.mark.parametrize("radix", [0, 1, 17, -2])
def test_decode_rejects_radix(radix):
    with pytest.raises(InvalidRadix):
        decode("1", radix)


def test_decode_errors():
    with pytest.raises(InvalidCharacter):
        decode("Z", 10)
    with pytest.raises(DigitOutOfRange):
        decode("9", 8)
    with pytest.raises(EmptyInput):
        decode("", 10)
    with pytest.raises(InvalidCharacter):
        decode("1 2", 10)


def test_radix_checked_before_empty_input():
    with pytest.raises(InvalidRadix):
        decode("", 20)


def test_decode_unknown_precision():
    with pytest.raises(ValueError):
        decode("1", 10, precision="decimal")


def test_digit_value():
    assert digit_value("7") == 7
    assert digit_value("a") == digit_value("A") == 10
    assert digit_value("F") == 15
    with pytest.raises(InvalidCharacter):
        digit_value("g")
