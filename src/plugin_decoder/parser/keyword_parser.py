"""Decode KYWD (keyword) records.

A keyword is a record header followed by EDID (editor id) and CNAM (an
RGBA color, one byte per channel). Both subrecords are mandatory.
"""

import logging

from plugin_decoder.models.constants import TAG_CNAM, TAG_KYWD
from plugin_decoder.models.keyword import Color, KeywordRecord
from plugin_decoder.parser.common import read_editor_id, read_record_header
from plugin_decoder.parser.cursor import Cursor
from plugin_decoder.parser.fields import struct_field


logger = logging.getLogger(__name__)


def _color_payload(payload: Cursor) -> tuple[Color, Cursor]:
    r, payload = payload.uint8()
    g, payload = payload.uint8()
    b, payload = payload.uint8()
    a, payload = payload.uint8()
    return Color(r, g, b, a), payload


def read_color(cursor: Cursor) -> tuple[Color, Cursor]:
    return struct_field(cursor, TAG_CNAM, _color_payload)


def decode_keyword(data: bytes | Cursor) -> tuple[KeywordRecord, Cursor]:
    """Decode a KYWD record starting at the first byte of *data*."""
    cursor = data if isinstance(data, Cursor) else Cursor(data)
    header, cursor = read_record_header(cursor, TAG_KYWD)
    editor_id, cursor = read_editor_id(cursor)
    color, cursor = read_color(cursor)
    logger.debug("KYWD %s (0x%08X) color %s", editor_id, header.form_id,
                 color.as_hex())
    return KeywordRecord(header=header, editor_id=editor_id, color=color), cursor
