"""Generic plugin record data classes."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Chunk:
    """A single tagged subrecord (e.g. HEDR, CNAM, MAST)."""
    tag: str         # 4-char ASCII signature
    size: int        # declared payload size; always len(payload)
    offset: int      # absolute offset of the payload's first byte
    payload: bytes


@dataclass(frozen=True, slots=True)
class VersionStamp:
    """Version-control info packed into 4 bytes of every record header."""
    day: int
    month: int
    last_user: int       # id of the last user to edit the record
    current_user: int    # id of the user currently holding it


@dataclass(frozen=True, slots=True)
class RecordHeader:
    """24-byte record header preceding the record data."""
    type: str        # 4-char signature (e.g. "KYWD")
    data_size: int   # size of the record data (after header)
    flags: int       # record flags, kept raw for non-header records
    form_id: int
    version_stamp: VersionStamp
    version: int
    unknown: int
