"""Explicit read position over a caller-owned byte sequence."""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class ByteCursor:
    """Position within ``data``; advanced in place by :func:`decode_one`.

    ``data`` can be any indexable sequence of byte values (``bytes``,
    ``bytearray``, ``memoryview`` or a list of ints). The cursor never copies
    or retains anything beyond the reference it was given.
    """

    data: Sequence[int]
    pos: int = 0

    def resolve_end(self, end: Optional[int] = None) -> int:
        """Return a usable end boundary, defaulting to ``len(data)``."""
        size = len(self.data)
        if end is None:
            return size
        if not 0 <= end <= size:
            raise ValueError(f"end {end} outside of data of length {size}")
        return end

    def remaining(self, end: Optional[int] = None) -> int:
        return max(0, self.resolve_end(end) - self.pos)

    def at_end(self, end: Optional[int] = None) -> bool:
        return self.pos >= self.resolve_end(end)
