"""Decode the TES4 file header record.

Every plugin starts with exactly one TES4 record:

  TES4 header (24 bytes): size, flags, form id, version stamp, version, unknown
  HEDR  version (f32), record count (i32), next object id (u32)   mandatory
  CNAM  author                                                     optional
  SNAM  description                                                optional
  MAST + DATA, repeated, one pair per master file                  optional
  ONAM  overridden form ids (u32 array)                            optional
  INTV  internal version (u32)                                     optional
  INCC  content change counter (u32)                               optional

Optional subrecords are only looked for in this order. The declared record
size is kept but not used to bound decoding.
"""

import logging
from functools import partial

from plugin_decoder.models.constants import (
    FORM_ID_SIZE,
    TAG_CNAM,
    TAG_HEDR,
    TAG_INCC,
    TAG_INTV,
    TAG_MAST,
    TAG_ONAM,
    TAG_SNAM,
    TAG_TES4,
)
from plugin_decoder.models.flags import HeaderFlags
from plugin_decoder.models.header import HeaderRecord, HeaderStats, MasterReference
from plugin_decoder.parser.common import read_record_header
from plugin_decoder.parser.cursor import Cursor
from plugin_decoder.parser.fields import (
    counted_array,
    master_reference,
    repeating_group,
    struct_field,
    text_field,
)
from plugin_decoder.parser.resolver import OptionalPolicy, resolve_optional


logger = logging.getLogger(__name__)


def _hedr_payload(payload: Cursor) -> tuple[HeaderStats, Cursor]:
    version, payload = payload.float32()
    num_records, payload = payload.int32()
    next_object_id, payload = payload.uint32()
    return HeaderStats(version, num_records, next_object_id), payload


def read_hedr(cursor: Cursor) -> tuple[HeaderStats, Cursor]:
    return struct_field(cursor, TAG_HEDR, _hedr_payload)


def read_author(cursor: Cursor) -> tuple[str, Cursor]:
    return text_field(cursor, TAG_CNAM)


def read_description(cursor: Cursor) -> tuple[str, Cursor]:
    return text_field(cursor, TAG_SNAM)


def read_masters(
    cursor: Cursor,
    policy: OptionalPolicy = OptionalPolicy.LENIENT,
) -> tuple[tuple[MasterReference, ...], Cursor]:
    return repeating_group(
        cursor, TAG_MAST, master_reference,
        lenient=policy is OptionalPolicy.LENIENT,
    )


def read_overrides(cursor: Cursor) -> tuple[tuple[int, ...], Cursor]:
    return counted_array(cursor, TAG_ONAM, Cursor.uint32, FORM_ID_SIZE)


def read_internal_version(cursor: Cursor) -> tuple[int, Cursor]:
    return struct_field(cursor, TAG_INTV, Cursor.uint32)


def read_content_changes(cursor: Cursor) -> tuple[int, Cursor]:
    return struct_field(cursor, TAG_INCC, Cursor.uint32)


# (field name, leading tag, decoder), in the order they must appear.
_OPTIONAL_FIELDS = (
    ("author", TAG_CNAM, read_author),
    ("description", TAG_SNAM, read_description),
    ("masters", None, read_masters),       # the group peeks for MAST itself
    ("overrides", TAG_ONAM, read_overrides),
    ("internal_version", TAG_INTV, read_internal_version),
    ("content_changes", TAG_INCC, read_content_changes),
)


def decode_header(
    data: bytes | Cursor,
    *,
    policy: OptionalPolicy = OptionalPolicy.LENIENT,
) -> tuple[HeaderRecord, Cursor]:
    """Decode a TES4 record starting at the first byte of *data*.

    Returns the record and a cursor just past the last subrecord consumed.
    Any failure in the fixed header or HEDR propagates and no record is
    returned. How optional subrecord failures are handled depends on
    *policy* (see parser.resolver).
    """
    cursor = data if isinstance(data, Cursor) else Cursor(data)
    start = cursor.offset

    header, cursor = read_record_header(cursor, TAG_TES4, HeaderFlags)
    hedr, cursor = read_hedr(cursor)

    optional: dict[str, object] = {}
    for name, tag, decoder in _OPTIONAL_FIELDS:
        if tag is None:
            # Untagged decoders are groups; they apply the policy per element.
            decoder = partial(decoder, policy=policy)
        optional[name], cursor = resolve_optional(
            cursor, tag, decoder, policy=policy
        )

    record = HeaderRecord(
        size=header.data_size,
        flags=header.flags,
        form_id=header.form_id,
        version_stamp=header.version_stamp,
        version=header.version,
        unknown=header.unknown,
        hedr=hedr,
        **optional,
    )
    logger.debug(
        "TES4 at offset %d: %d record(s), %d master(s), ends at offset %d",
        start, hedr.num_records, len(record.master_names), cursor.offset,
    )
    return record, cursor
