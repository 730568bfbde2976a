"""Write characters, strings and numbers to a text stream or a file descriptor."""

from __future__ import annotations

import os
from typing import TextIO, Union

from pipex.chars import itoa

Stream = Union[TextIO, int]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def putchar_fd(c: Union[str, int], stream: Stream) -> None:
    """Write a single character (or character code) to stream."""
    if isinstance(c, int):
        c = chr(c)
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(stream, c)


def putstr_fd(s: str, stream: Stream) -> None:
    """Write s to stream."""
    _write(stream, s)


def putendl_fd(s: str, stream: Stream) -> None:
    """Write s followed by a newline to stream."""
    _write(stream, s + "\n")


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write the decimal form of n, taken as a 32-bit signed int, to stream."""
    _write(stream, itoa(n))