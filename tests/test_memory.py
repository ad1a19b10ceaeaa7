import pytest

from catsworld.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_zero_count_is_noop():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_calloc_size_and_zeroed():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


def test_calloc_zero_sizes():
    assert len(calloc(0, 8)) == 0
    assert len(calloc(8, 0)) == 0


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memchr_finds_first():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_uses_low_byte():
    data = bytes([1, 2, 255])
    assert memchr(data, -1, 3) == 2


def test_memcmp_equal():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"a\x00", b"a\xff", 2) == -255


def test_memcmp_antisymmetric():
    a, b = b"kitten", b"kitchen"
    assert memcmp(a, b, 6) == -memcmp(b, a, 6)


def test_memcmp_count_too_large():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == b"abcd.."


def test_memcpy_negative_count():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"abcd", -1)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 2, 0, 5)
    assert buf == b"121234589"


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 0, 2, 5)
    assert buf == b"345676789"


def test_memmove_matches_slice_copy():
    original = bytes(range(20))
    buf = bytearray(original)
    memmove(buf, 5, 3, 10)
    assert buf[5:15] == original[3:13]
    assert buf[:5] == original[:5]
    assert buf[15:] == original[15:]


def test_memmove_out_of_bounds():
    with pytest.raises(IndexError):
        memmove(bytearray(5), 3, 0, 4)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 4)
    assert result is buf
    assert buf == b"zzzzef"


def test_memset_truncates_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_memset_count_too_large():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)