"""TES4 file header record data classes."""

from dataclasses import dataclass

from plugin_decoder.models.flags import HeaderFlags
from plugin_decoder.models.records import VersionStamp


@dataclass(frozen=True, slots=True)
class HeaderStats:
    """HEDR subrecord: always the first subrecord of TES4."""
    version: float         # format version, e.g. 1.7 for Skyrim SE
    num_records: int       # records + groups in the file
    next_object_id: int


@dataclass(frozen=True, slots=True)
class MasterReference:
    """One MAST entry: a plugin this file depends on."""
    name: str


@dataclass(frozen=True, slots=True)
class HeaderRecord:
    """Decoded TES4 header.

    Optional fields are None when their subrecord is absent. ``masters`` is
    an empty tuple when the file has no MAST entries. Under the lenient
    policy a broken MAST entry ends the list, keeping the ones before it.
    """
    size: int
    flags: HeaderFlags
    form_id: int                 # always 0 in practice
    version_stamp: VersionStamp
    version: int
    unknown: int
    hedr: HeaderStats

    author: str | None = None                              # CNAM
    description: str | None = None                         # SNAM
    masters: tuple[MasterReference, ...] = ()              # MAST + DATA
    overrides: tuple[int, ...] | None = None               # ONAM
    internal_version: int | None = None                    # INTV
    content_changes: int | None = None                     # INCC

    @property
    def is_master(self) -> bool:
        return HeaderFlags.MASTER in self.flags

    @property
    def is_localized(self) -> bool:
        return HeaderFlags.LOCALIZED in self.flags

    @property
    def is_light(self) -> bool:
        return HeaderFlags.LIGHT in self.flags

    @property
    def master_names(self) -> list[str]:
        return [m.name for m in self.masters]
