"""Character classification and integer/text conversion for C-style ints."""

from __future__ import annotations

import re

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_UINT_RANGE = 1 << _INT_BITS

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]*)([0-9]*)")


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range, as C int arithmetic does."""
    return (value - _INT_MIN) % _UINT_RANGE + _INT_MIN


def _code(c: int | str) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, with 32-bit signed wrap-around.

    Leading whitespace is skipped and a single sign is accepted; more than
    one sign character yields 0.  Parsing stops at the first non-digit.
    """
    match = _NUMBER.match(text)
    signs, digits = match.group(1), match.group(2)
    if len(signs) > 1:
        return 0
    sign = -1 if signs == "-" else 1
    value = 0
    for digit in digits:
        value = _wrap32(value * 10 + int(digit))
    return _wrap32(value * sign)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    if not 0 <= code <= 255:
        return False
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def itoa(n: int) -> str:
    """Render a C int (wrapped to 32 bits) in decimal."""
    return str(_wrap32(n))


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other input is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other input is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code