"""Immutable byte cursor with typed little-endian reads."""

import struct
from dataclasses import dataclass, field
from typing import TypeVar

from plugin_decoder.errors import Incomplete


_INT8 = struct.Struct("<b")
_UINT16 = struct.Struct("<H")
_INT16 = struct.Struct("<h")
_UINT32 = struct.Struct("<I")
_INT32 = struct.Struct("<i")
_UINT64 = struct.Struct("<Q")
_INT64 = struct.Struct("<q")
_FLOAT32 = struct.Struct("<f")

F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Cursor:
    """A read position over a bytes buffer.

    Every read returns the decoded value together with a *new* Cursor; the
    cursor it was called on is never changed. A failed read therefore leaves
    the caller holding the exact position it started from.

    ``end`` bounds the readable region. slice(size) returns a Cursor bounded
    to the next ``size`` bytes, so a chunk payload decoder cannot overrun
    into the next chunk. Offsets are always absolute into ``data``.
    """

    data: bytes = field(repr=False)
    offset: int = 0
    end: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if self.end is None:
            object.__setattr__(self, "end", len(self.data))
        if not 0 <= self.offset <= self.end <= len(self.data):
            raise ValueError(
                f"Cursor offset {self.offset} / end {self.end} outside "
                f"buffer of {len(self.data)} bytes"
            )

    @property
    def remaining(self) -> int:
        return self.end - self.offset

    @property
    def at_end(self) -> bool:
        return self.offset == self.end

    def _require(self, size: int) -> None:
        if size > self.remaining:
            raise Incomplete(size, self.remaining, self.offset)

    def _moved(self, size: int) -> "Cursor":
        return Cursor(self.data, self.offset + size, self.end)

    def _unpack(self, fmt: struct.Struct) -> tuple:
        self._require(fmt.size)
        return fmt.unpack_from(self.data, self.offset)[0], self._moved(fmt.size)

    def peek(self, size: int) -> bytes:
        """Return the next ``size`` bytes without consuming them."""
        self._require(size)
        return self.data[self.offset : self.offset + size]

    def take(self, size: int) -> tuple[bytes, "Cursor"]:
        return self.peek(size), self._moved(size)

    def skip(self, size: int) -> "Cursor":
        self._require(size)
        return self._moved(size)

    def slice(self, size: int) -> tuple["Cursor", "Cursor"]:
        """Split off a Cursor bounded to the next ``size`` bytes.

        Returns (bounded view, cursor advanced past the view).
        """
        self._require(size)
        view = Cursor(self.data, self.offset, self.offset + size)
        return view, self._moved(size)

    def uint8(self) -> tuple[int, "Cursor"]:
        self._require(1)
        return self.data[self.offset], self._moved(1)

    def int8(self) -> tuple[int, "Cursor"]:
        return self._unpack(_INT8)

    def uint16(self) -> tuple[int, "Cursor"]:
        return self._unpack(_UINT16)

    def int16(self) -> tuple[int, "Cursor"]:
        return self._unpack(_INT16)

    def uint32(self) -> tuple[int, "Cursor"]:
        return self._unpack(_UINT32)

    def int32(self) -> tuple[int, "Cursor"]:
        return self._unpack(_INT32)

    def uint64(self) -> tuple[int, "Cursor"]:
        return self._unpack(_UINT64)

    def int64(self) -> tuple[int, "Cursor"]:
        return self._unpack(_INT64)

    def float32(self) -> tuple[float, "Cursor"]:
        return self._unpack(_FLOAT32)

    def flags(self, flag_type: type[F]) -> tuple[F, "Cursor"]:
        """Read a 32-bit flag field, rejecting bits unknown to *flag_type*.

        *flag_type* must provide ``from_bits(raw, offset)`` (see
        models.flags.StrictFlag); InvalidFlags propagates from there.
        """
        raw, rest = self.uint32()
        return flag_type.from_bits(raw, self.offset), rest
