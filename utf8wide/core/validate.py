"""Optional checks applied on top of structural UTF-8 decoding.

Plain decoding accepts anything the encoder can produce, including
overlong forms, surrogate code points and the legacy five and six byte
sequences. Strict decoding runs :func:`check_scalar` on every value.
"""

from .encoder import encoded_length
from .errors import InvalidScalarValue, OverlongSequence

MAX_SCALAR = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def is_surrogate(value: int) -> bool:
    return SURROGATE_MIN <= value <= SURROGATE_MAX


def is_scalar_value(value: int) -> bool:
    """True for code points in the Unicode range that are not surrogates."""
    return 0 <= value <= MAX_SCALAR and not is_surrogate(value)


def check_scalar(value: int, length: int, offset: int) -> None:
    """Reject overlong sequences and values that are not scalar values.

    ``length`` is the number of bytes the value was decoded from and
    ``offset`` the position of its lead byte, used for error reporting.
    """
    shortest = encoded_length(value)
    if length > shortest:
        raise OverlongSequence(offset, value, length, shortest)
    if not is_scalar_value(value):
        raise InvalidScalarValue(offset, value)
