"""Decode errors raised while reading plugin records.

Every error subclasses ValueError (malformed plugin data has always been a
ValueError here) and carries the absolute buffer offset where it happened.
"""


class DecodeError(ValueError):
    """Base class for all structural decode failures."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class Incomplete(DecodeError):
    """Fewer bytes remain than a decode step requires."""

    def __init__(self, needed: int, remaining: int, offset: int) -> None:
        super().__init__(
            f"Need {needed} bytes but only {remaining} remain", offset
        )
        self.needed = needed
        self.remaining = remaining


class TagMismatch(DecodeError):
    """The next four bytes are not the expected chunk or record tag."""

    def __init__(self, expected: str, found: bytes, offset: int) -> None:
        super().__init__(f"Expected {expected!r}, got {found!r}", offset)
        self.expected = expected
        self.found = found


class InvalidFlags(DecodeError):
    """A flag field has bits set outside its recognized mask."""

    def __init__(self, value: int, unknown_bits: int, offset: int) -> None:
        super().__init__(
            f"Unknown flag bits 0x{unknown_bits:08X} in 0x{value:08X}", offset
        )
        self.value = value
        self.unknown_bits = unknown_bits


class InvalidEncoding(DecodeError):
    """Text is not valid UTF-8 or has no NUL terminator."""

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(reason, offset)
        self.reason = reason


class ArrayLengthMismatch(DecodeError):
    """A counted array's byte size is not a multiple of its element width."""

    def __init__(self, size: int, width: int, offset: int) -> None:
        super().__init__(
            f"Array of {size} bytes is not a multiple of element width {width}",
            offset,
        )
        self.size = size
        self.width = width
