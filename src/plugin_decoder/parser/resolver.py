"""Optional-field resolution with rollback.

Optional subrecords appear in a fixed order but any of them may be missing.
resolve_optional() tries a field decoder at the current position and, when
the field is not there, hands back the untouched cursor so the next field
can be tried from the same spot.

Two policies decide what "not there" means:

  LENIENT  any decode failure counts as absence. A subrecord with the right
           tag but a broken payload is reported missing, the same as one
           that never existed.
  STRICT   only a different next tag counts as absence. Once the tag
           matches, payload errors propagate to the caller.

InvalidFlags always propagates: it means a format revision this decoder
does not understand, not a missing field.
"""

import logging
from enum import Enum
from typing import TypeVar

from plugin_decoder.errors import DecodeError, InvalidFlags
from plugin_decoder.parser.cursor import Cursor
from plugin_decoder.parser.fields import Decoder
from plugin_decoder.parser.framer import peek_tag


logger = logging.getLogger(__name__)

T = TypeVar("T")


class OptionalPolicy(Enum):
    LENIENT = "lenient"
    STRICT = "strict"


def resolve_optional(
    cursor: Cursor,
    tag: str | None,
    decoder: Decoder[T],
    policy: OptionalPolicy = OptionalPolicy.LENIENT,
) -> tuple[T | None, Cursor]:
    """Decode an optional field starting with *tag*.

    Returns (value, advanced cursor) when present, (None, *cursor*)
    otherwise. Pass tag=None for decoders that check presence themselves,
    such as repeating groups, which return an empty result rather than fail.
    """
    if policy is OptionalPolicy.STRICT:
        if tag is not None and peek_tag(cursor) != tag:
            logger.debug("%s absent at offset %d", tag, cursor.offset)
            return None, cursor
        return decoder(cursor)

    try:
        return decoder(cursor)
    except InvalidFlags:
        raise
    except DecodeError as exc:
        logger.debug("%s treated as absent: %s", tag or "group", exc)
        return None, cursor
