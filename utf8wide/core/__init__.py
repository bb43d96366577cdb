"""Core UTF-8 and wide character codec."""

from .classify import is_lead_byte, is_trail_byte, sequence_length  # noqa: F401
from .cursor import ByteCursor  # noqa: F401
from .decoder import decode_at, decode_one, decode_utf8_to_scalars, iter_scalars  # noqa: F401
from .encoder import append_utf8, encode_one, encode_scalars_to_utf8, encoded_length  # noqa: F401
from .errors import (  # noqa: F401
    IllFormedScalar,
    InvalidLeadByte,
    InvalidScalarValue,
    InvalidTrailByte,
    OverlongSequence,
    TruncatedSequence,
    Utf8Error,
)
from .trace import TraceLog  # noqa: F401
from .validate import check_scalar, is_scalar_value  # noqa: F401
from .wide import (  # noqa: F401
    WideCodec,
    decode_utf8_to_wide,
    join_surrogates,
    platform_wide_width,
    split_surrogates,
    wide_to_utf8,
)
