"""Pieces shared by every record: the 24-byte header and EDID."""

from plugin_decoder.models.constants import TAG_EDID
from plugin_decoder.models.flags import StrictFlag
from plugin_decoder.models.records import RecordHeader, VersionStamp
from plugin_decoder.parser.cursor import Cursor
from plugin_decoder.parser.fields import text_field
from plugin_decoder.parser.framer import expect_tag


def read_version_stamp(cursor: Cursor) -> tuple[VersionStamp, Cursor]:
    day, cursor = cursor.uint8()
    month, cursor = cursor.uint8()
    last_user, cursor = cursor.uint8()
    current_user, cursor = cursor.uint8()
    return VersionStamp(day, month, last_user, current_user), cursor


def read_record_header(
    cursor: Cursor,
    tag: str,
    flag_type: type[StrictFlag] | None = None,
) -> tuple[RecordHeader, Cursor]:
    """Read the 24-byte header of a record tagged *tag*.

    Flags stay a raw u32 unless *flag_type* is given, in which case unknown
    bits raise InvalidFlags.
    """
    cursor = expect_tag(cursor, tag)
    data_size, cursor = cursor.uint32()
    if flag_type is None:
        flags, cursor = cursor.uint32()
    else:
        flags, cursor = cursor.flags(flag_type)
    form_id, cursor = cursor.uint32()
    stamp, cursor = read_version_stamp(cursor)
    version, cursor = cursor.uint16()
    unknown, cursor = cursor.uint16()
    header = RecordHeader(
        type=tag,
        data_size=data_size,
        flags=flags,
        form_id=form_id,
        version_stamp=stamp,
        version=version,
        unknown=unknown,
    )
    return header, cursor


def read_editor_id(cursor: Cursor) -> tuple[str, Cursor]:
    return text_field(cursor, TAG_EDID)
