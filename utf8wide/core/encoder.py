"""Scalar value to UTF-8 byte encoding."""

from typing import Iterable, MutableSequence

from .classify import PAYLOAD_MASKS

# (exclusive upper bound, lead byte prefix, sequence length)
_RANGES = (
    (0x80, 0x00, 1),
    (0x800, 0xC0, 2),
    (0x10000, 0xE0, 3),
    (0x200000, 0xF0, 4),
    (0x4000000, 0xF8, 5),
)
_SIX_BYTE_PREFIX = 0xFC


def encoded_length(value: int) -> int:
    """Number of bytes :func:`encode_one` emits for ``value``."""
    value &= 0xFFFFFFFF
    for limit, _prefix, length in _RANGES:
        if value < limit:
            return length
    return 6


def encode_one(value: int, output: MutableSequence[int]) -> int:
    """Append the UTF-8 form of ``value`` to ``output``.

    ``output`` only needs an ``extend`` method (``bytearray``, ``list``).
    The value is read as an unsigned 32-bit integer. Values of 2**31 and
    above lose their top bit, since the six byte form only has room for 31.
    Returns the number of bytes appended.
    """
    value &= 0xFFFFFFFF
    prefix = _SIX_BYTE_PREFIX
    length = 6
    for limit, range_prefix, range_length in _RANGES:
        if value < limit:
            prefix, length = range_prefix, range_length
            break

    shift = 6 * (length - 1)
    encoded = [prefix | ((value >> shift) & PAYLOAD_MASKS[length])]
    while shift:
        shift -= 6
        encoded.append(0x80 | ((value >> shift) & 0x3F))
    output.extend(encoded)
    return length


def append_utf8(container: MutableSequence[int], codepoint: int) -> int:
    """Append ``codepoint`` to a byte container; same as :func:`encode_one`."""
    return encode_one(codepoint, container)


def encode_scalars_to_utf8(scalars: Iterable[int]) -> bytes:
    """Encode every scalar value in order and concatenate the results."""
    output = bytearray()
    for value in scalars:
        encode_one(value, output)
    return bytes(output)
