"""Tagged-chunk framing: tag(4) + size(u16) + payload(size).

Every subrecord in a plugin is framed this way. The functions here never
interpret the payload; they only check the tag and cut the payload out
with exactly the declared length.
"""

from plugin_decoder.errors import TagMismatch
from plugin_decoder.models.constants import TAG_SIZE
from plugin_decoder.models.records import Chunk
from plugin_decoder.parser.cursor import Cursor


def peek_tag(cursor: Cursor) -> str | None:
    """Return the next tag without consuming it, or None near end of input.

    Tags that are not ASCII come back with replacement characters, so they
    never compare equal to a real tag.
    """
    if cursor.remaining < TAG_SIZE:
        return None
    return cursor.peek(TAG_SIZE).decode("ascii", errors="replace")


def expect_tag(cursor: Cursor, tag: str) -> Cursor:
    """Consume *tag*, raising TagMismatch if the next 4 bytes differ."""
    found, rest = cursor.take(TAG_SIZE)
    if found != tag.encode("ascii"):
        raise TagMismatch(tag, found, cursor.offset)
    return rest


def frame(cursor: Cursor, tag: str) -> tuple[Cursor, Cursor]:
    """Frame one chunk.

    Returns (payload view bounded to the declared size, cursor past the
    payload). Raises Incomplete if the declared size overruns the input.
    """
    rest = expect_tag(cursor, tag)
    size, rest = rest.uint16()
    return rest.slice(size)


def frame_unsized(cursor: Cursor, tag: str) -> tuple[int, Cursor]:
    """Consume tag and size header without checking the payload length.

    For payloads whose own structure decides how much to read. Returns
    (declared size, cursor at the first payload byte).
    """
    rest = expect_tag(cursor, tag)
    return rest.uint16()


def read_chunk(cursor: Cursor, tag: str) -> tuple[Chunk, Cursor]:
    payload, rest = frame(cursor, tag)
    data, _ = payload.take(payload.remaining)
    chunk = Chunk(tag=tag, size=len(data), offset=payload.offset, payload=data)
    return chunk, rest
