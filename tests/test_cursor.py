"""Tests for Cursor: all synthetic bytes, no plugin file needed."""

import struct

import pytest

from plugin_decoder.errors import Incomplete
from plugin_decoder.parser.cursor import Cursor


def test_uint8():
    c = Cursor(bytes([0x00, 0x7F, 0xFF]))
    a, c = c.uint8()
    b, c = c.uint8()
    d, c = c.uint8()
    assert (a, b, d) == (0, 127, 255)


def test_int8():
    value, _ = Cursor(bytes([0xFF])).int8()
    assert value == -1


def test_uint16_and_int16():
    c = Cursor(struct.pack("<Hh", 0xFFFF, -2))
    u, c = c.uint16()
    s, c = c.int16()
    assert u == 65535
    assert s == -2


def test_uint32_and_int32():
    c = Cursor(struct.pack("<Ii", 0xDEADBEEF, -1))
    u, c = c.uint32()
    s, c = c.int32()
    assert u == 0xDEADBEEF
    assert s == -1


def test_uint64_and_int64():
    c = Cursor(struct.pack("<Qq", 2**64 - 1, -5))
    u, c = c.uint64()
    s, c = c.int64()
    assert u == 2**64 - 1
    assert s == -5


def test_float32():
    value, _ = Cursor(struct.pack("<f", 3.14)).float32()
    assert value == pytest.approx(3.14, abs=0.001)


def test_reads_are_little_endian():
    value, _ = Cursor(b"\x01\x00\x00\x00").uint32()
    assert value == 1


def test_read_returns_new_cursor_and_leaves_original():
    original = Cursor(struct.pack("<II", 1, 2))
    value, advanced = original.uint32()
    assert value == 1
    assert original.offset == 0
    assert advanced.offset == 4
    assert advanced.uint32()[0] == 2


def test_take_and_skip():
    c = Cursor(b"\x01\x02\x03\x04")
    head, c = c.take(2)
    assert head == b"\x01\x02"
    c = c.skip(1)
    assert c.uint8()[0] == 4


def test_peek_does_not_consume():
    c = Cursor(b"TES4")
    assert c.peek(4) == b"TES4"
    assert c.offset == 0


def test_remaining_and_at_end():
    c = Cursor(b"abcdef")
    assert c.remaining == 6
    assert not c.at_end
    c = c.skip(6)
    assert c.remaining == 0
    assert c.at_end


def test_slice_creates_bounded_cursor():
    c = Cursor(struct.pack("<III", 10, 20, 30))
    view, rest = c.slice(8)

    a, view = view.uint32()
    b, view = view.uint32()
    assert (a, b) == (10, 20)
    assert view.remaining == 0

    # Parent cursor advanced past the slice
    assert rest.uint32()[0] == 30


def test_slice_prevents_overread():
    view, _ = Cursor(struct.pack("<II", 1, 2)).slice(4)
    _, view = view.uint32()
    with pytest.raises(Incomplete):
        view.uint32()


def test_read_past_end_names_byte_count():
    _, c = Cursor(b"\x01\x02\x03").uint16()
    with pytest.raises(Incomplete, match="Need 2 bytes but only 1 remain") as info:
        c.uint16()
    assert info.value.needed == 2
    assert info.value.remaining == 1
    assert info.value.offset == 2


@pytest.mark.parametrize(
    "method, width",
    [
        ("uint8", 1), ("int8", 1), ("uint16", 2), ("int16", 2),
        ("uint32", 4), ("int32", 4), ("float32", 4),
        ("uint64", 8), ("int64", 8),
    ],
)
def test_every_primitive_fails_on_short_input(method, width):
    c = Cursor(bytes(width - 1))
    with pytest.raises(Incomplete) as info:
        getattr(c, method)()
    assert info.value.needed == width


def test_incomplete_is_a_value_error():
    with pytest.raises(ValueError, match="at offset 0"):
        Cursor(b"").uint8()


def test_skip_and_slice_past_end():
    c = Cursor(b"\x01\x02")
    with pytest.raises(Incomplete):
        c.skip(10)
    with pytest.raises(Incomplete):
        c.slice(10)


def test_offset_outside_buffer_rejected():
    with pytest.raises(ValueError, match="outside buffer"):
        Cursor(b"abc", 4)
    with pytest.raises(ValueError, match="outside buffer"):
        Cursor(b"abc", 0, 5)


def test_bytearray_input_is_copied():
    buf = bytearray(b"\x07")
    c = Cursor(buf)
    buf[0] = 0
    assert c.uint8()[0] == 7


def test_cursors_compare_by_position():
    data = b"abcd"
    assert Cursor(data, 1) == Cursor(data, 1)
    assert Cursor(data, 1) != Cursor(data, 2)
