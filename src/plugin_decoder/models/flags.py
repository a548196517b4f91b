"""Closed flag sets: any bit outside the named members is an error."""

from enum import IntFlag

from plugin_decoder.errors import InvalidFlags


class StrictFlag(IntFlag):
    """IntFlag base whose from_bits() rejects unrecognized bits."""

    @classmethod
    def known_mask(cls) -> int:
        mask = 0
        for member in cls.__members__.values():
            mask |= member.value
        return mask

    @classmethod
    def from_bits(cls, raw: int, offset: int = 0):
        unknown = raw & ~cls.known_mask()
        if unknown:
            raise InvalidFlags(raw, unknown, offset)
        return cls(raw)


class HeaderFlags(StrictFlag):
    """TES4 record flags."""
    MASTER = 0x0000_0001      # .esm
    LOCALIZED = 0x0000_0080   # strings live in external string tables
    LIGHT = 0x0000_0200       # .esl / small plugin
