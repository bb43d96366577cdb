"""Exceptions raised while decoding UTF-8 byte sequences."""

from typing import Optional


class Utf8Error(ValueError):
    """Base class for malformed UTF-8 input.

    ``offset`` is the index of the lead byte of the offending sequence and
    ``byte`` the value of the byte that failed the check, when there is one.
    """

    def __init__(self, message: str, offset: int, byte: Optional[int] = None) -> None:
        super().__init__(message)
        self.offset = offset
        self.byte = byte


class InvalidLeadByte(Utf8Error):
    """The byte at the cursor cannot start a UTF-8 sequence."""

    def __init__(self, offset: int, byte: int) -> None:
        super().__init__(
            f"invalid leading byte 0x{byte:02x} for utf8 sequence at offset {offset}",
            offset,
            byte,
        )


class TruncatedSequence(Utf8Error):
    """Fewer bytes remain than the lead byte announced."""

    def __init__(
        self, offset: int, byte: Optional[int], expected: int, available: int
    ) -> None:
        super().__init__(
            f"utf8 sequence too short at offset {offset}: "
            f"expected {expected} bytes, {available} available",
            offset,
            byte,
        )
        self.expected = expected
        self.available = available


class InvalidTrailByte(Utf8Error):
    """A continuation byte does not match ``10xxxxxx``."""

    def __init__(self, offset: int, trail_offset: int, byte: int) -> None:
        super().__init__(
            f"invalid trailing byte 0x{byte:02x} at offset {trail_offset} "
            f"in utf8 sequence starting at offset {offset}",
            offset,
            byte,
        )
        self.trail_offset = trail_offset


class IllFormedScalar(Utf8Error):
    """Structurally valid sequence rejected by strict decoding."""

    def __init__(self, message: str, offset: int, value: int) -> None:
        super().__init__(message, offset)
        self.value = value


class OverlongSequence(IllFormedScalar):
    def __init__(self, offset: int, value: int, length: int, shortest: int) -> None:
        super().__init__(
            f"overlong utf8 sequence at offset {offset}: U+{value:04X} "
            f"encoded in {length} bytes, shortest form is {shortest}",
            offset,
            value,
        )
        self.length = length
        self.shortest = shortest


class InvalidScalarValue(IllFormedScalar):
    def __init__(self, offset: int, value: int) -> None:
        super().__init__(
            f"decoded value U+{value:04X} at offset {offset} is not a unicode scalar value",
            offset,
            value,
        )
