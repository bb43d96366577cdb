"""UTF-8 byte sequence to scalar value decoding."""

from typing import Iterator, List, Optional, Sequence, Tuple

from .classify import PAYLOAD_MASKS, is_trail_byte, sequence_length
from .cursor import ByteCursor
from .errors import InvalidLeadByte, InvalidTrailByte, TruncatedSequence
from .validate import check_scalar


def _decode(data: Sequence[int], pos: int, end: int, strict: bool) -> Tuple[int, int]:
    if pos >= end:
        raise TruncatedSequence(pos, None, 1, 0)

    lead = data[pos]
    length = sequence_length(lead)
    if length == 0:
        raise InvalidLeadByte(pos, lead)

    available = end - pos
    if available < length:
        raise TruncatedSequence(pos, lead, length, available)

    value = lead & PAYLOAD_MASKS[length]
    for index in range(pos + 1, pos + length):
        trail = data[index]
        if not is_trail_byte(trail):
            raise InvalidTrailByte(pos, index, trail)
        value = (value << 6) | (trail & 0x3F)

    if strict:
        check_scalar(value, length, pos)
    return value, pos + length


def decode_one(cursor: ByteCursor, end: Optional[int] = None, strict: bool = False) -> int:
    """Decode the sequence at ``cursor`` and advance past it.

    ``end`` is the exclusive boundary of the input and defaults to the
    length of ``cursor.data``. On success the cursor moves forward by exactly
    the length announced by the lead byte. On failure it is left on the lead
    byte, so a caller wanting lenient behaviour can skip one byte and retry.

    Raises InvalidLeadByte, TruncatedSequence or InvalidTrailByte, and with
    ``strict`` also OverlongSequence or InvalidScalarValue.
    """
    value, cursor.pos = _decode(cursor.data, cursor.pos, cursor.resolve_end(end), strict)
    return value


def decode_at(
    data: Sequence[int],
    pos: int = 0,
    end: Optional[int] = None,
    strict: bool = False,
) -> Tuple[int, int]:
    """Decode one sequence at ``pos``; return the value and the next position."""
    cursor = ByteCursor(data, pos)
    value = decode_one(cursor, end, strict=strict)
    return value, cursor.pos


def iter_scalars(data: Sequence[int], strict: bool = False) -> Iterator[int]:
    """Yield every scalar value in ``data``, stopping at the first error."""
    pos = 0
    end = len(data)
    while pos < end:
        value, pos = _decode(data, pos, end, strict)
        yield value


def decode_utf8_to_scalars(data: Sequence[int], strict: bool = False) -> List[int]:
    return list(iter_scalars(data, strict=strict))
