"""Field decoders built on the chunk framer.

All decoders share one shape: ``decoder(cursor, ...) -> (value, cursor)``.
That shape is what the optional-field resolver and the repeating-group
loop accept, so any of these can be made optional or repeated.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from plugin_decoder.errors import (
    ArrayLengthMismatch,
    DecodeError,
    InvalidEncoding,
    InvalidFlags,
)
from plugin_decoder.models.constants import MASTER_DATA_SIZE, TAG_DATA, TAG_MAST
from plugin_decoder.models.header import MasterReference
from plugin_decoder.parser.cursor import Cursor
from plugin_decoder.parser.framer import frame, frame_unsized, peek_tag


logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[Cursor], tuple[T, Cursor]]


def struct_field(
    cursor: Cursor,
    tag: str,
    decode: Decoder[T],
) -> tuple[T, Cursor]:
    """Frame a fixed-layout chunk and decode its payload with *decode*.

    *decode* sees only the payload. Bytes it leaves unread are skipped:
    the returned cursor always sits just past the declared payload.
    """
    payload, rest = frame(cursor, tag)
    value, _ = decode(payload)
    return value, rest


def text_field(cursor: Cursor, tag: str) -> tuple[str, Cursor]:
    """Decode a NUL-terminated UTF-8 string chunk.

    The NUL must fall inside the declared payload. Anything after it is
    consumed along with the rest of the payload but not decoded.
    """
    payload, rest = frame(cursor, tag)
    raw, _ = payload.take(payload.remaining)
    null = raw.find(b"\x00")
    if null < 0:
        raise InvalidEncoding(
            f"No null terminator in {tag} payload of {len(raw)} bytes",
            payload.offset,
        )
    try:
        text = raw[:null].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(
            f"{tag} text is not valid UTF-8 ({exc.reason})",
            payload.offset + exc.start,
        ) from exc
    return text, rest


def counted_array(
    cursor: Cursor,
    tag: str,
    element: Decoder[T],
    width: int,
) -> tuple[tuple[T, ...], Cursor]:
    """Decode a chunk holding ``size // width`` fixed-width elements.

    Example: ``counted_array(c, "ONAM", Cursor.uint32, 4)``.
    """
    payload, rest = frame(cursor, tag)
    if payload.remaining % width:
        raise ArrayLengthMismatch(payload.remaining, width, payload.offset)
    items: list[T] = []
    for _ in range(payload.remaining // width):
        item, payload = element(payload)
        items.append(item)
    return tuple(items), rest


def repeating_group(
    cursor: Cursor,
    marker: str,
    element: Decoder[T],
    *,
    lenient: bool = False,
) -> tuple[tuple[T, ...], Cursor]:
    """Decode consecutive elements that each start with a *marker* chunk.

    Stops at the first chunk with a different tag (or end of input) and
    returns the cursor positioned on it. Zero elements is a valid, empty
    result. Once the marker has matched, errors from *element* propagate,
    unless *lenient* is set: then the elements decoded so far are kept and
    the cursor is left on the element that failed. InvalidFlags always
    propagates.
    """
    items: list[T] = []
    while peek_tag(cursor) == marker:
        try:
            item, cursor = element(cursor)
        except InvalidFlags:
            raise
        except DecodeError as exc:
            if not lenient:
                raise
            logger.debug("%s group stopped early: %s", marker, exc)
            break
        items.append(item)
    logger.debug("%s group: %d element(s), ends at offset %d",
                 marker, len(items), cursor.offset)
    return tuple(items), cursor


def master_reference(cursor: Cursor) -> tuple[MasterReference, Cursor]:
    """MAST file name followed by its fixed 8-byte DATA companion."""
    name, rest = text_field(cursor, TAG_MAST)
    # DATA's declared size is not trusted; its payload is always 8 bytes.
    _, rest = frame_unsized(rest, TAG_DATA)
    rest = rest.skip(MASTER_DATA_SIZE)
    return MasterReference(name=name), rest
