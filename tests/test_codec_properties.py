"""Property checks over the whole encodable value range."""

import pytest

from utf8wide import (
    ByteCursor,
    InvalidTrailByte,
    TruncatedSequence,
    decode_one,
    decode_utf8_to_wide,
    encode_one,
    sequence_length,
    wide_to_utf8,
)

BOUNDARIES = [
    0x0, 0x7F, 0x80, 0x7FF, 0x800, 0xD7FF, 0xD800, 0xDFFF, 0xE000, 0xFFFF,
    0x10000, 0x10FFFF, 0x110000, 0x1FFFFF, 0x200000, 0x3FFFFFF, 0x4000000, 0x7FFFFFFF,
]
SAMPLE = BOUNDARIES + list(range(0, 0x80000000, 0x10001))


def test_round_trip():
    for value in SAMPLE:
        output = bytearray()
        count = encode_one(value, output)
        cursor = ByteCursor(output)
        assert decode_one(cursor) == value
        assert cursor.pos == count == len(output)


def test_length_agreement():
    for value in SAMPLE:
        output = bytearray()
        encode_one(value, output)
        assert sequence_length(output[0]) == len(output)


def test_classifier_totality():
    for byte in range(256):
        length = sequence_length(byte)
        assert length in {0, 1, 2, 3, 4, 5, 6}
        invalid = (byte & 0xC0) == 0x80 or byte >= 0xFE
        assert (length == 0) == invalid


def test_truncation_detection():
    leads = {2: 0xC3, 3: 0xE2, 4: 0xF0, 5: 0xF8, 6: 0xFC}
    for length, lead in leads.items():
        for trailing in range(length - 1):
            data = bytes([lead] + [0x80] * trailing)
            with pytest.raises(TruncatedSequence):
                decode_one(ByteCursor(data))


def test_trail_byte_validation():
    with pytest.raises(InvalidTrailByte):
        decode_one(ByteCursor(b"\xe2\xff\x80"))


def test_bulk_idempotence():
    text = "Hello, wörld € \U0001F600 中文"
    data = text.encode("utf-8")
    assert wide_to_utf8(decode_utf8_to_wide(data, width=32), width=32) == data

    bmp = "naïve €".encode("utf-8")
    assert wide_to_utf8(decode_utf8_to_wide(bmp, width=16), width=16) == bmp
