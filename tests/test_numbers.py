import pytest

from ftkit.numbers import abs_value, atoi, baselen, hexlen, itoa, nbrlen, power


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 10**12, -(10**12)])
def test_abs_value_matches_builtin(n):
    assert abs_value(n) == abs(n)
    assert abs_value(n) >= 0


@pytest.mark.parametrize("n", [0, 5, -5, 10, -10, 999, -1000, 2147483647, -2147483648])
def test_nbrlen_matches_decimal_text(n):
    assert nbrlen(n) == len(str(n))


@pytest.mark.parametrize("n", [1, 15, 16, 255, 256, 4096, -255, -17])
def test_baselen_hex_matches_format(n):
    assert baselen(n, 16) == len(format(n, "x"))


@pytest.mark.parametrize("n", [1, 2, 7, 8, -9, 1023])
def test_baselen_binary_matches_format(n):
    assert baselen(n, 2) == len(format(n, "b"))


def test_baselen_zero_is_one_digit():
    assert baselen(0, 10) == 1
    assert baselen(0, 2) == 1


@pytest.mark.parametrize("base", [1, 0, -3])
def test_baselen_invalid_base_is_zero(base):
    assert baselen(123, base) == 0


@pytest.mark.parametrize("num", [1, 15, 16, 255, 0xABCDEF, 0xFFFFFFFF])
def test_hexlen_matches_format(num):
    assert hexlen(num) == len(format(num, "x"))


def test_hexlen_zero_has_no_digits():
    assert hexlen(0) == 0


def test_hexlen_negative_wraps_to_unsigned():
    assert hexlen(-1) == len(format(0xFFFFFFFF, "x"))


@pytest.mark.parametrize("nbr,exponent", [(2, 10), (3, 4), (-2, 3), (7, 1), (0, 5)])
def test_power_matches_builtin(nbr, exponent):
    assert power(nbr, exponent) == nbr**exponent


def test_power_zero_exponent_is_one():
    assert power(9, 0) == 1
    assert power(0, 0) == 1


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -123456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    text = itoa(n)
    assert text == str(n)
    assert atoi(text) == n


def test_atoi_skips_leading_space_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoi_overflow_of_64_bits():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0