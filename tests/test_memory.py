import pytest

from pushswap.memory import (
    bzero,
    calloc,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 3)
    assert buffer == bytearray(b"\0\0\0def")


def test_bzero_rejects_too_long():
    with pytest.raises(ValueError):
        bzero(bytearray(b"ab"), 3)


def test_calloc_is_zeroed_with_product_length():
    buffer = calloc(4, 3)
    assert len(buffer) == 12
    assert all(byte == 0 for byte in buffer)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), 5) == data.index(b"l")


def test_memchr_limited_to_n():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_masks_byte():
    data = b"\x01\xff"
    assert memchr(data, -1, 2) == data.index(b"\xff")


def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_sign_and_unsigned():
    assert memcmp(b"abcx", b"abcy", 4) < 0
    assert memcmp(b"\xff", b"\x00", 1) > 0
    assert memcmp(b"b", b"a", 1) == -memcmp(b"a", b"b", 1)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"zzzzz")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abczz")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlapping_forward():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    result = memmove(view[1:], view, 5)
    assert bytes(result) == b"abcde"
    assert buffer == bytearray(b"aabcde")


def test_memmove_overlapping_backward():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert buffer == bytearray(b"cdefef")


def test_memmove_zero_length_leaves_dest():
    dest = bytearray(b"xy")
    assert memmove(dest, b"ab", 0) == bytearray(b"xy")


def test_memset_fills_prefix():
    buffer = bytearray(6)
    result = memset(buffer, ord("*"), 4)
    assert result is buffer
    assert buffer == bytearray(b"****\0\0")


def test_memset_masks_value():
    buffer = memset(bytearray(2), 0x141, 2)
    assert buffer == bytearray(b"AA")


@pytest.mark.parametrize("char", "azAZ")
def test_isalpha_letters(char):
    assert isalpha(ord(char)) == 1024


@pytest.mark.parametrize("char", "09@[`{ ")
def test_isalpha_others(char):
    assert isalpha(ord(char)) == 0


def test_isdigit():
    assert isdigit(ord("0")) == 2048
    assert isdigit(ord("9")) == 2048
    assert isdigit(ord("a")) == 0
    assert isdigit(ord("/")) == 0


def test_isalnum():
    assert isalnum(ord("q")) == 8
    assert isalnum(ord("5")) == 8
    assert isalnum(ord("-")) == 0


def test_isascii_bounds():
    assert isascii(0) == 1
    assert isascii(127) == 1
    assert isascii(128) == 0
    assert isascii(-1) == 0


def test_isprint_bounds():
    assert isprint(32) == 16384
    assert isprint(126) == 16384
    assert isprint(31) == 0
    assert isprint(127) == 0