"""KYWD (keyword) record data classes."""

from dataclasses import dataclass

from plugin_decoder.models.records import RecordHeader


@dataclass(frozen=True, slots=True)
class Color:
    r: int
    g: int
    b: int
    a: int

    def as_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


@dataclass(frozen=True, slots=True)
class KeywordRecord:
    header: RecordHeader
    editor_id: str     # EDID
    color: Color       # CNAM
