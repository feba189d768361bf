import pytest

from ftkit.memory import (
    allocate_zeroed,
    compare,
    copy,
    fill,
    find_byte,
    move,
    zero,
)


def test_fill_sets_prefix_only():
    buf = bytearray(b"hello world")
    result = fill(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"xxxxx"
    assert buf[5:] == b" world"


def test_fill_value_wraps_modulo_256():
    buf = bytearray(4)
    fill(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_fill_too_long_raises():
    with pytest.raises(ValueError):
        fill(bytearray(3), 1, 4)


def test_zero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert zero(buf, 3) is None
    assert buf == b"\x00\x00\x00def"


def test_zero_with_zero_length_keeps_buffer():
    buf = bytearray(b"abc")
    zero(buf, 0)
    assert buf == b"abc"


def test_copy_copies_prefix():
    dest = bytearray(b"........")
    src = b"abcdef"
    assert copy(dest, src, 4) is dest
    assert dest == b"abcd...."


def test_copy_both_none():
    assert copy(None, None, 5) is None


def test_copy_one_none_raises():
    with pytest.raises(TypeError):
        copy(bytearray(3), None, 1)


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    move(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    move(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_move_out_of_range_raises():
    with pytest.raises(ValueError):
        move(bytearray(b"abc"), 1, 0, 3)


def test_find_byte_first_occurrence():
    data = b"Hello, world!"
    assert find_byte(data, ord("o"), len(data)) == data.index(b"o")


def test_find_byte_last_position():
    data = b"Hello, world!"
    assert find_byte(data, ord("!"), len(data)) == len(data) - 1


def test_find_byte_outside_range_not_found():
    data = b"Hello, world!"
    assert find_byte(data, ord("!"), len(data) - 1) is None


def test_find_byte_missing_and_empty():
    data = b"Hello, world!"
    assert find_byte(data, ord("z"), len(data)) is None
    assert find_byte(data, ord("H"), 0) is None


def test_find_byte_non_text_block():
    block = bytes([0x01, 0x02, 0x03, 0x04, 0x05])
    assert find_byte(block, 0x03, 5) == block.index(0x03)


@pytest.mark.parametrize(
    "a, b",
    [(b"abc", b"abd"), (b"\x00", b"\xff"), (b"same", b"samf")],
)
def test_compare_sign_and_antisymmetry(a, b):
    n = len(a)
    assert compare(a, b, n) < 0
    assert compare(b, a, n) == -compare(a, b, n)
    assert compare(a, a, n) == 0


def test_compare_stops_at_n():
    assert compare(b"abc", b"abd", 2) == 0
    assert compare(b"abc", b"xyz", 0) == 0


def test_compare_difference_of_first_mismatch():
    assert compare(b"ab", b"ac", 2) == ord("b") - ord("c")


def test_allocate_zeroed_size_and_content():
    buf = allocate_zeroed(5, 4)
    assert len(buf) == 20
    assert not any(buf)


def test_allocate_zeroed_empty():
    assert allocate_zeroed(0, 100) == bytearray()


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(2, 2147483648)


def test_allocate_zeroed_negative():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 4)