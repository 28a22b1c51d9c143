import pytest

from webserv.convert import (
    atoi,
    atoi_base,
    atoi_secure,
    exceeds_int_limits,
    itoa,
    min_int_array,
    number_to_base,
    to_dec,
    to_hex,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17 rest") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_atoi_base_hex_matches_int():
    assert atoi_base("ff", 16) == int("ff", 16)
    assert atoi_base("  -1A2b", 16) == -int("1A2b", 16)


def test_atoi_base_accepts_hex_letters_in_any_base():
    assert atoi_base("1A", 10) == 20


def test_atoi_base_stops_at_non_hex():
    assert atoi_base("7g9", 16) == 7


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", False),
        ("2147483648", True),
        ("-2147483648", False),
        ("-2147483649", True),
        ("00002147483647", False),
        ("12345678901", True),
        ("0", False),
    ],
)
def test_exceeds_int_limits(text, expected):
    assert exceeds_int_limits(text) is expected


def test_exceeds_int_limits_compares_after_sign_only():
    # the ten-digit comparison starts right after '-', leading zeros included
    assert exceeds_int_limits("-02147483649") is False


def test_atoi_secure_accepts_limits():
    assert atoi_secure("2147483647") == 2147483647
    assert atoi_secure("-2147483648") == -2147483648
    assert atoi_secure("-007") == -7


@pytest.mark.parametrize(
    "bad", [None, "", "-", "+5", " 5", "5a", "2147483648", "-2147483649"]
)
def test_atoi_secure_rejects(bad):
    with pytest.raises(ValueError):
        atoi_secure(bad)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**64 - 1])
def test_hex_round_trip(n):
    assert int(to_hex(n), 16) == n
    assert int(to_hex(n, upper=True), 16) == n


def test_hex_case():
    assert to_hex(48879) == "beef"
    assert to_hex(48879, upper=True) == "BEEF"


@pytest.mark.parametrize("n", [0, 9, 10, 12345, 2**63])
def test_dec_round_trip(n):
    assert int(to_dec(n)) == n


def test_number_to_base_binary_round_trip():
    for n in range(64):
        assert int(number_to_base(n, "01"), 2) == n


def test_number_to_base_errors():
    with pytest.raises(ValueError):
        number_to_base(5, "0")
    with pytest.raises(ValueError):
        to_dec(-1)


def test_min_int_array():
    values = [5, -3, 8, -3, 0]
    assert min_int_array(values) == -3
    assert min_int_array([7]) == 7
    assert min_int_array([]) == -999
    assert min_int_array(iter(values)) <= min(values)