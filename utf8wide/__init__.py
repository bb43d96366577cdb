"""UTF-8 codec with conversion to and from wide character code units."""

from .core import (  # noqa: F401
    ByteCursor,
    InvalidLeadByte,
    InvalidTrailByte,
    TruncatedSequence,
    Utf8Error,
    WideCodec,
    decode_one,
    decode_utf8_to_wide,
    encode_one,
    encode_scalars_to_utf8,
    sequence_length,
    wide_to_utf8,
)
