from decimal import Decimal

import pytest

from bign.domain.values import FixedPointNumber


def N(text: str) -> FixedPointNumber:
    return FixedPointNumber.from_decimal_string(text)


@pytest.fixture
def x():
    return FixedPointNumber.from_scaled_integer(123456789098765, 5)


def test_value_of_returns_rounded_integer_part():
    assert N("100.00").value_of() == 100
    assert N("123.450").value_of() == 123


def test_to_decimal_defaults_to_original_decimals():
    assert N("123.450").to_decimal() == 123450
    assert N("100.00").to_decimal() == 10000


def test_to_decimal_widens_past_precision():
    assert N("100.00").to_decimal(90) == 100 * 10**90


def test_to_decimal_narrows_below_precision():
    assert N("100.00").to_decimal(70) == 100 * 10**70


def test_to_precise_returns_internal_value():
    assert N("100.00").to_precise() == 100 * 10**80


def test_to_string_defaults_to_original_decimals(x):
    assert x.to_string() == "1234567890.98765"
    assert str(x) == "1234567890.98765"


def test_to_string_with_same_decimals(x):
    assert x.to_string(5) == "1234567890.98765"


def test_to_string_pads_extra_decimals(x):
    assert x.to_string(8) == "1234567890.98765000"


def test_to_string_rounds_fewer_decimals(x):
    assert x.to_string(3) == "1234567890.988"


def test_to_string_without_fraction(x):
    assert x.to_string(0) == "1234567891"


def test_to_string_with_negative_digits_rounds_to_powers_of_ten(x):
    assert x.to_string(-3) == "1234568000"


@pytest.mark.parametrize(
    "text, digits, expected",
    [
        ("0.05", 2, "0.05"),
        ("-0.05", 2, "-0.05"),
        ("-0.004", 2, "0.00"),
        ("0.4", -2, "0"),
        ("7", 3, "7.000"),
        ("-12.5", 0, "-13"),
    ],
)
def test_to_string_zero_pads_and_keeps_sign(text, digits, expected):
    assert N(text).to_string(digits) == expected


@pytest.mark.parametrize(
    "text",
    [
        "0",
        "1",
        "-1",
        "100.00",
        "0.001",
        "-0.5",
        "-42.4200",
        "123456789.123456789",
        "0." + "0" * 79 + "1",
    ],
)
def test_decimal_string_round_trip(text):
    assert N(text).to_string() == text


def test_as_decimal_is_exact():
    assert N("1.5").as_decimal() == Decimal("1.5")
    assert N("-0.000000000000000000000000000001").as_decimal() == Decimal("-1E-30")


def test_repr_shows_original_representation():
    assert repr(N("100.00")) == "FixedPointNumber('100.00', decimals=2, precision=80)"


def test_int_truncates_toward_zero():
    assert int(N("1.9")) == 1
    assert int(N("-1.9")) == -1


def test_float_and_bool():
    assert float(N("0.25")) == 0.25
    assert float(N("-2.5")) == -2.5
    assert not N("0.00")
    assert N("0.01")
