import pytest

from errors import InvalidAmount
from money import Money


def test_parse_and_format():
    assert Money.parse("12.50").minor == 1250
    assert str(Money.parse("12.5")) == "12.50"
    assert str(Money.parse("7")) == "7.00"
    assert str(Money.parse(7)) == "7.00"
    assert str(Money(-5)) == "-0.05"
    assert str(Money(-1234)) == "-12.34"


def test_parse_respects_configured_digits():
    assert Money.parse("1.234", digits=3).minor == 1234
    assert str(Money(5, digits=0)) == "5"


@pytest.mark.parametrize("bad", ["abc", "", "1.001", "NaN", "Infinity", 1.5, None, True])
def test_parse_rejects_bad_input(bad):
    with pytest.raises(InvalidAmount):
        Money.parse(bad)


def test_float_minor_units_are_refused():
    with pytest.raises(TypeError):
        Money(1.0)


def test_add_subtract_and_sum():
    a, b = Money.parse("10.10"), Money.parse("0.20")
    assert a + b == Money.parse("10.30")
    assert a.subtract(b) == Money.parse("9.90")
    assert -a == Money.parse("-10.10")
    assert abs(Money.parse("-3.00")) == Money.parse("3.00")
    assert sum([Money.parse("0.10")] * 10) == Money.parse("1.00")


def test_mixing_precisions_is_an_error():
    with pytest.raises(ValueError):
        Money(1, digits=2) + Money(1, digits=3)


def test_comparisons():
    assert Money.parse("1.00") < Money.parse("1.01")
    assert Money.parse("2.00") >= Money.parse("2.00")
    assert Money.parse("0.00").is_zero()
    assert Money.parse("-0.01").is_negative()
    assert Money.parse("0.01").is_positive()


def test_multiply_by_ratio_rounds_half_up():
    assert Money.parse("10.00").multiply_by_ratio(1, 3) == Money.parse("3.33")
    assert Money.parse("0.05").multiply_by_ratio(1, 2) == Money.parse("0.03")
    assert Money.parse("-0.05").multiply_by_ratio(1, 2) == Money.parse("-0.03")
    assert Money.parse("20.00").multiply_by_ratio(15, 100) == Money.parse("3.00")


def test_divide_evenly_gives_remainder_to_first_parts():
    parts = Money.parse("100.00").divide_evenly(3)
    assert [str(p) for p in parts] == ["33.34", "33.33", "33.33"]

    parts = Money.parse("0.05").divide_evenly(3)
    assert [str(p) for p in parts] == ["0.02", "0.02", "0.01"]


def test_divide_evenly_needs_positive_count():
    with pytest.raises(ValueError):
        Money.parse("1.00").divide_evenly(0)


@pytest.mark.parametrize("huge", ["1e5000", "1e999999", "1E+16", "10000000000000000"])
def test_parse_rejects_amounts_beyond_the_size_limit(huge):
    with pytest.raises(InvalidAmount):
        Money.parse(huge)


def test_parse_rejects_overlong_strings():
    with pytest.raises(InvalidAmount):
        Money.parse("1" + "0" * 200)


def test_parse_largest_amount_is_exact():
    big = Money.parse("999999999999999.99")
    assert big.minor == 99999999999999999
    assert str(big) == "999999999999999.99"


@pytest.mark.parametrize("text", [
    "1.0000000000000000000000000001",
    "12345678901234.0000000000000000000000000001",
    "1e-999999",
])
def test_parse_never_rounds_long_fractions(text):
    with pytest.raises(InvalidAmount):
        Money.parse(text)


def test_parse_accepts_trailing_zeros_and_exponents():
    assert Money.parse("1.000000000000000000000000000000") == Money.parse("1.00")
    assert Money.parse("1.5e2") == Money.parse("150.00")
    assert Money.parse("0e99999").is_zero()
