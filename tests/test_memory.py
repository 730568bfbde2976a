import pytest

from pipex.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"abcdefgh")
    result = memset(buf, ord("x"), 4)
    assert result is buf
    assert buf == b"xxxxefgh"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_bzero_clears_prefix_only():
    buf = bytearray(b"maximo")
    bzero(buf, 2)
    assert buf[:2] == b"\x00\x00"
    assert buf[2:] == b"ximo"


def test_calloc_is_zero_filled():
    buf = calloc(5, 4)
    assert len(buf) == 20
    assert all(byte == 0 for byte in buf)
    buf[0] = 1
    assert buf[0] == 1


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"teckno"
    index = memchr(data, ord("k"), len(data))
    assert data[index] == ord("k")
    assert ord("k") not in data[:index]


def test_memchr_respects_limit():
    data = b"teckno"
    assert memchr(data, ord("k"), 3) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_zero_byte():
    data = b"ab\x00cd"
    index = memchr(data, 0, len(data))
    assert data[index] == 0


def test_memcmp_ordering():
    assert memcmp(b"bb\x00", b"bbb", 3) == -1
    assert memcmp(b"bbb", b"bb\x00", 3) == 1
    assert memcmp(b"carpa", b"carpa", 5) == 0
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) == 1


def test_memcpy_copies_prefix():
    dest = bytearray(10)
    result = memcpy(dest, b"maximo", 6)
    assert result is dest
    assert dest[:6] == b"maximo"
    assert dest[6:] == bytes(4)


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 4)
    assert bytes(result[:4]) == b"abcd"
    assert buf[:2] == b"ab"
    assert buf[2:6] == b"abcd"


def test_memmove_overlapping_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result[:4]) == b"cdef"
    assert buf[:4] == b"cdef"
    assert buf[4:] == b"ef"


def test_bounds_are_checked():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)
    with pytest.raises(ValueError):
        memcmp(b"a", b"abc", 2)