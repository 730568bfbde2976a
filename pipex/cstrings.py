"""String routines with C library semantics, expressed over Python strings.

Functions that locate a character or substring return its index, or None
when it is absent, rather than a pointer into the text.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

_NUL = "\0"


def _require_text(value: object, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _as_char(c: int | str) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _require_count(n: int, name: str) -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def strlen(text: str) -> int:
    """Return the number of characters in text."""
    return len(_require_text(text))


def strdup(text: str) -> str:
    """Return a copy of text."""
    return "".join(_require_text(text))


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _require_text(s1, "s1") + _require_text(s2, "s2")


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping the empty pieces between repeated separators."""
    _require_text(text)
    separator = _as_char(sep)
    return [word for word in text.split(separator) if word]


def strchr(text: str, c: int | str) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    _require_text(text)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    _require_text(text)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def striteri(chars: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Replace each element of chars, in place, by func(index, element)."""
    if not callable(func):
        raise TypeError("func must be callable")
    for index, value in enumerate(list(chars)):
        chars[index] = func(index, value)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from func(index, char) for each character."""
    _require_text(text)
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(func(index, char) for index, char in enumerate(text))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the (possibly truncated) copy and the full length of src, so a
    returned length of size or more means the copy was cut short.
    """
    _require_text(src, "src")
    _require_count(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length it would have had without
    truncation.  When dst already fills the buffer it is left unchanged and
    the length reported is size plus the length of src.
    """
    _require_text(dst, "dst")
    _require_text(src, "src")
    _require_count(size, "size")
    dest_len = min(len(dst), size)
    if size <= dest_len:
        return dst, size + len(src)
    room = size - 1 - dest_len
    return dst + src[:room], dest_len + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    _require_text(s1, "s1")
    _require_text(s2, "s2")
    _require_count(n, "n")
    for index in range(n):
        left = ord(s1[index]) if index < len(s1) else 0
        right = ord(s2[index]) if index < len(s2) else 0
        if left == 0 and right == 0:
            break
        if left != right:
            return left - right
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly within big's first n characters.

    An empty little matches at index 0.
    """
    _require_text(big, "big")
    _require_text(little, "little")
    _require_count(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove the characters in charset from both ends of text."""
    _require_text(text)
    _require_text(charset, "charset")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of the text yields an empty string.
    """
    _require_text(text)
    _require_count(start, "start")
    _require_count(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]