"""Lead and trail byte classification."""

# (mask, pattern, sequence length), checked in order
_LEAD_PATTERNS = (
    (0x80, 0x00, 1),
    (0xE0, 0xC0, 2),
    (0xF0, 0xE0, 3),
    (0xF8, 0xF0, 4),
    (0xFC, 0xF8, 5),
    (0xFE, 0xFC, 6),
)

# payload bits carried by the lead byte, keyed by sequence length
PAYLOAD_MASKS = {
    1: 0x7F,
    2: 0x1F,
    3: 0x0F,
    4: 0x07,
    5: 0x03,
    6: 0x01,
}


def sequence_length(byte: int) -> int:
    """Return how many bytes the sequence started by ``byte`` occupies.

    Returns 0 for continuation bytes (``10xxxxxx``) and for ``0xfe``/``0xff``,
    neither of which may start a sequence. ASCII bytes have length 1.
    """
    byte &= 0xFF
    for mask, pattern, length in _LEAD_PATTERNS:
        if (byte & mask) == pattern:
            return length
    return 0


def is_lead_byte(byte: int) -> bool:
    return sequence_length(byte) != 0


def is_trail_byte(byte: int) -> bool:
    return (byte & 0xC0) == 0x80
