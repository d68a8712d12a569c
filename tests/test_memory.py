from array import array

import pytest

from cbytes.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_full():
    buf = bytearray(10)
    result = memset(buf, ord("A"), len(buf))
    assert result is buf
    assert buf == b"A" * 10


def test_memset_partial():
    buf = bytearray(10)
    memset(buf, ord("B"), 5)
    assert buf == b"BBBBB" + bytes(5)


def test_memset_truncates_value():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == b"AAA"


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zero_length():
    buf = bytearray(b"123456789\0")
    bzero(buf, 0)
    assert buf == b"123456789\0"


def test_bzero_partial():
    buf = bytearray(b"abcdefghi\0")
    bzero(buf, 5)
    assert buf == bytes(5) + b"fghi\0"


def test_bzero_full():
    buf = bytearray(b"abcdefgh\0\0")
    bzero(buf, 10)
    assert buf == bytes(10)


def test_memcpy_basic():
    src = b"Hello, World!"
    dest = bytearray(20)
    result = memcpy(dest, src, 13)
    assert result is dest
    assert bytes(dest[:13]) == src
    assert dest[13:] == bytes(7)


def test_memcpy_zero_bytes():
    dest = bytearray(20)
    memcpy(dest, b"Hello, World!", 0)
    assert dest == bytes(20)


def test_memcpy_int_array():
    src = array("i", [1, 2, 3, 4, 5])
    dest = array("i", [0] * 5)
    view = memoryview(dest).cast("B")
    memcpy(view, memoryview(src).cast("B"), 5 * src.itemsize)
    view.release()
    assert dest == src


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_no_overlap():
    src = b"Hello, World!"
    dest = bytearray(20)
    result = memmove(dest, src, 13)
    assert result is dest
    assert bytes(dest[:13]) == src


def test_memmove_overlap_forward():
    buf = bytearray(b"12345")
    with memoryview(buf) as view:
        target = view[1:]
        result = memmove(target, view, 4)
        assert result is target
        assert bytes(result) == b"1234"
        target.release()
    assert buf == b"11234"


def test_memmove_overlap_backward():
    buf = bytearray(b"12345")
    with memoryview(buf) as view:
        source = view[1:]
        result = memmove(view, source, 4)
        assert result is view
        assert bytes(result) == b"23455"
        source.release()
    assert buf == b"23455"


def test_memmove_zero_bytes():
    buf = bytearray(b"Test")
    result = memmove(buf, buf, 0)
    assert result is buf
    assert buf == b"Test"


DATA = b"42Network\0"


def test_memchr_present():
    assert memchr(DATA, ord("N"), 9) == 2


def test_memchr_absent():
    assert memchr(DATA, ord("X"), 9) is None


def test_memchr_nul():
    assert memchr(DATA, 0, 10) == 9


def test_memchr_zero_length():
    assert memchr(DATA, ord("4"), 0) is None


def test_memchr_outside_range_not_found():
    assert memchr(DATA, ord("k"), 5) is None


def test_memcmp_identical():
    assert memcmp(b"Hello", b"Hello", 5) == 0


def test_memcmp_first_byte_differs():
    assert memcmp(b"Hello", b"Jello", 5) < 0
    assert memcmp(b"Hello", b"Jello", 5) == ord("H") - ord("J")


def test_memcmp_partial():
    assert memcmp(b"Hello", b"Hello", 1) == 0


def test_memcmp_same_prefix():
    assert memcmp(b"HelloWorld", b"Hello", 5) == 0


def test_memcmp_empty():
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) == 254


def test_calloc_zeroed():
    buf = calloc(5, 4)
    assert buf == bytearray(20)


def test_calloc_zero_elements():
    buf = calloc(0, 1)
    assert buf == bytearray()
    assert isinstance(buf, bytearray)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)