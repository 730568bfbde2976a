import pytest

from pipex.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42", -42),
        ("\t\n\v\f\r 17abc", 17),
        ("+7", 7),
        ("", 0),
        ("abc", 0),
        ("--5", 0),
        ("+-5", 0),
        ("-+5", 0),
        ("12 34", 12),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, -10, 123456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(-1) == "-1"


def test_itoa_wraps_out_of_range():
    assert itoa(2147483648) == "-2147483648"


@pytest.mark.parametrize("code", range(128))
def test_classifiers_agree_with_ascii(code):
    ch = chr(code)
    assert is_alpha(code) == ch.isalpha()
    assert is_digit(code) == ch.isdigit()
    assert is_alnum(code) == ch.isalnum()
    assert is_print(code) == ch.isprintable()
    assert is_ascii(code) is True


def test_classifiers_outside_ascii():
    assert is_alpha(200) is False
    assert is_alpha(-1) is False
    assert is_alpha(1000) is False
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_alnum("é") is False
    assert is_print(127) is False


def test_classifiers_accept_characters():
    assert is_alpha("q") is True
    assert is_digit("3") is True
    assert is_alnum("?") is False
    assert is_print(" ") is True


def test_case_conversion_strings():
    assert to_lower("D") == "d"
    assert to_upper("d") == "D"
    assert to_lower("d") == "d"
    assert to_upper("?") == "?"
    assert to_lower("É") == "É"


def test_case_conversion_codes():
    assert to_lower(ord("D")) == ord("d")
    assert to_upper(ord("d")) == ord("D")
    assert to_upper(ord("1")) == ord("1")


@pytest.mark.parametrize("code", range(128))
def test_case_round_trip(code):
    if chr(code).isupper():
        assert to_upper(to_lower(code)) == code
    else:
        assert to_upper(code) == ord(chr(code).upper())


def test_bad_character_argument():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        is_digit(1.5)