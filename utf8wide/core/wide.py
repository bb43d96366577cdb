"""Conversion between UTF-8 bytes and fixed-width wide code units."""

from __future__ import annotations

import ctypes
import logging
from array import array
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple, Union

from .decoder import iter_scalars
from .encoder import encode_one
from .errors import Utf8Error
from .validate import MAX_SCALAR

logger = logging.getLogger(__name__)

WIDTHS = (16, 32)

HIGH_SURROGATE_MIN = 0xD800
LOW_SURROGATE_MIN = 0xDC00
_SURROGATE_PAYLOAD = 0x3FF


def platform_wide_width() -> int:
    """Bit width of the host ``wchar_t``: 32 on Unix-like hosts, 16 on Windows."""
    return ctypes.sizeof(ctypes.c_wchar) * 8


def _typecode(width: int) -> str:
    if width == 16:
        return "H"
    for code in ("I", "L"):
        if array(code).itemsize == 4:
            return code
    raise RuntimeError("no 4-byte unsigned array typecode on this platform")


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit < LOW_SURROGATE_MIN


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= 0xDFFF


def split_surrogates(value: int) -> Tuple[int, int]:
    """Split a supplementary-plane value into its high and low surrogates."""
    if not 0x10000 <= value <= MAX_SCALAR:
        raise ValueError(f"U+{value:04X} has no surrogate pair form")
    value -= 0x10000
    return (
        HIGH_SURROGATE_MIN | (value >> 10),
        LOW_SURROGATE_MIN | (value & _SURROGATE_PAYLOAD),
    )


def join_surrogates(high: int, low: int) -> int:
    if not (is_high_surrogate(high) and is_low_surrogate(low)):
        raise ValueError(f"0x{high:04x} 0x{low:04x} is not a surrogate pair")
    return 0x10000 + (((high & _SURROGATE_PAYLOAD) << 10) | (low & _SURROGATE_PAYLOAD))


@dataclass
class WideCodec:
    """Converter settings for the wide form.

    ``width`` is the size of one code unit in bits. By default every scalar
    value maps to exactly one unit and values that do not fit are truncated
    to the unit width. ``surrogates`` opts in to pairing for 16-bit units:
    values in the supplementary planes become two units on decode and pairs
    are joined again on encode. ``strict`` rejects overlong sequences and
    non-scalar values while decoding.
    """

    width: int = field(default_factory=platform_wide_width)
    surrogates: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        if self.width not in WIDTHS:
            raise ValueError(f"wide width must be one of {WIDTHS}, got {self.width}")

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def pairs(self) -> bool:
        return self.surrogates and self.width == 16

    def new_buffer(self) -> array:
        return array(_typecode(self.width))

    def decode(self, data: Sequence[int]) -> array:
        """Decode UTF-8 ``data`` into a buffer of wide code units."""
        units = self.new_buffer()
        try:
            for value in iter_scalars(data, strict=self.strict):
                if self.pairs and 0x10000 <= value <= MAX_SCALAR:
                    units.extend(split_surrogates(value))
                else:
                    units.append(value & self.mask)
        except Utf8Error as exc:
            logger.debug(f"wide decode aborted at offset {exc.offset} after {len(units)} units")
            raise
        logger.debug(f"decoded {len(data)} bytes into {len(units)} {self.width}-bit units")
        return units

    def encode(self, units: Union[str, Iterable[int]]) -> bytes:
        """Encode wide code units (or the characters of a ``str``) as UTF-8."""
        if isinstance(units, str):
            units = [ord(char) for char in units]

        output = bytearray()
        pending = None  # high surrogate waiting for its low half
        for unit in units:
            unit &= self.mask
            if self.pairs:
                if pending is not None:
                    if is_low_surrogate(unit):
                        encode_one(join_surrogates(pending, unit), output)
                        pending = None
                        continue
                    encode_one(pending, output)
                    pending = None
                if is_high_surrogate(unit):
                    pending = unit
                    continue
            encode_one(unit, output)
        if pending is not None:
            encode_one(pending, output)

        logger.debug(f"encoded {self.width}-bit units into {len(output)} bytes")
        return bytes(output)


def _codec(width: Optional[int], surrogates: bool, strict: bool = False) -> WideCodec:
    if width is None:
        return WideCodec(surrogates=surrogates, strict=strict)
    return WideCodec(width=width, surrogates=surrogates, strict=strict)


def decode_utf8_to_wide(
    data: Sequence[int],
    width: Optional[int] = None,
    surrogates: bool = False,
    strict: bool = False,
) -> array:
    """Decode a whole UTF-8 buffer into wide code units.

    Aborts with the first decoding error; nothing is returned in that case.
    """
    return _codec(width, surrogates, strict).decode(data)


def wide_to_utf8(
    units: Union[str, Iterable[int]],
    width: Optional[int] = None,
    surrogates: bool = False,
) -> bytes:
    """Encode wide code units as UTF-8. Never fails."""
    return _codec(width, surrogates).encode(units)
