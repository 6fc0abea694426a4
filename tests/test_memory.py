import pytest

from pipex.memory import (
    calloc,
    mem_compare,
    mem_copy,
    mem_find,
    mem_move,
    mem_set,
    zero,
)


def test_zero_clears_prefix_only():
    buf = bytearray(b"Brouno")
    zero(buf, 2)
    assert buf == b"\x00\x00ouno"


def test_zero_whole_buffer():
    buf = bytearray(b"abc")
    zero(buf, 3)
    assert buf == bytearray(3)


def test_zero_past_end_raises():
    with pytest.raises(ValueError):
        zero(bytearray(b"ab"), 3)


def test_calloc_is_zero_filled_with_right_size():
    buf = calloc(6, 4)
    assert len(buf) == 24
    assert all(b == 0 for b in buf)


def test_calloc_zero_count():
    assert calloc(0, 8) == bytearray()


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_mem_find_first_occurrence():
    data = b"hello world"
    index = mem_find(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_mem_find_respects_limit():
    assert mem_find(b"abcdef", ord("e"), 3) is None
    assert mem_find(b"abcdef", ord("e"), 6) == 4


def test_mem_find_masks_byte():
    assert mem_find(b"\x00\x01\xff", 0x1FF, 3) == 2


def test_mem_find_none_data():
    assert mem_find(None, 1, 0) is None


def test_mem_compare_equal():
    assert mem_compare(b"abcdef", b"abcxyz", 3) == 0


def test_mem_compare_sign():
    assert mem_compare(b"bbla", b"blabl", 4) < 0
    assert mem_compare(b"blabl", b"bbla", 4) > 0


def test_mem_compare_is_unsigned():
    assert mem_compare(b"\x80", b"\x01", 1) > 0


def test_mem_compare_zero_length():
    assert mem_compare(b"a", b"b", 0) == 0


def test_mem_compare_too_long_raises():
    with pytest.raises(ValueError):
        mem_compare(b"ab", b"abc", 3)


def test_mem_copy_copies_and_returns_dst():
    dst = bytearray(8)
    result = mem_copy(dst, b"sniper", 6)
    assert result is dst
    assert dst[:6] == b"sniper"
    assert dst[6:] == bytearray(2)


def test_mem_copy_both_none():
    assert mem_copy(None, None, 3) is None


def test_mem_copy_one_none_raises():
    with pytest.raises(TypeError):
        mem_copy(bytearray(3), None, 1)


def test_mem_copy_past_end_raises():
    with pytest.raises(ValueError):
        mem_copy(bytearray(2), b"abc", 3)


def test_mem_move_forward_overlap():
    buf = bytearray(b"abcdefgh")
    mem_move(buf, 2, 0, 5)
    assert buf == b"ababcdeh"


def test_mem_move_backward_overlap():
    buf = bytearray(b"abcdefgh")
    result = mem_move(buf, 0, 2, 5)
    assert result is buf
    assert buf == b"cdefgfgh"


def test_mem_move_none_buffer():
    assert mem_move(None, 0, 0, 0) is None


def test_mem_move_out_of_range_raises():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)


def test_mem_set_fills_prefix():
    buf = bytearray(b"Brouno")
    result = mem_set(buf, ord("8"), 5)
    assert result is buf
    assert buf[:5] == b"8" * 5
    assert buf[5:] == b"o"


def test_mem_set_masks_value():
    buf = bytearray(2)
    mem_set(buf, 0x141, 2)
    assert buf == b"AA"


def test_mem_set_none():
    assert mem_set(None, 0, 4) is None


def test_mem_set_negative_length_raises():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 0, -1)