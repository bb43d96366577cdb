"""utf8wide CLI entrypoint."""

import argparse
from pathlib import Path
from typing import List, Optional

from utf8wide.core import (
    TraceLog,
    Utf8Error,
    WideCodec,
    decode_utf8_to_scalars,
    encode_one,
    platform_wide_width,
    sequence_length,
)


def parse_value(text: str) -> int:
    """Parse ``U+20AC``, ``0x20ac`` or a decimal integer."""
    try:
        if text[:2].upper() == "U+":
            return int(text[2:], 16)
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a code point or integer: {text!r}") from None


def parse_byte(text: str) -> int:
    value = parse_value(text)
    if not 0 <= value <= 0xFF:
        raise argparse.ArgumentTypeError(f"byte out of range: {text!r}")
    return value


def parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex byte string: {text!r}") from None


def _trace(args: argparse.Namespace, message: str) -> None:
    if args.trace is not None:
        args.trace.log(message)


def _codec(args: argparse.Namespace) -> WideCodec:
    return WideCodec(width=args.width, surrogates=args.surrogates, strict=args.strict)


def classify(args: argparse.Namespace) -> None:
    for byte in args.bytes:
        length = sequence_length(byte)
        note = "" if length else " (invalid lead byte)"
        print(f"0x{byte:02X} {length}{note}")
    _trace(args, f"classify {len(args.bytes)} bytes")


def encode(args: argparse.Namespace) -> None:
    for value in args.values:
        output = bytearray()
        encode_one(value, output)
        print(f"U+{value:04X}\t{output.hex(' ')}")
    _trace(args, f"encode {len(args.values)} values")


def decode(args: argparse.Namespace) -> None:
    data = b"".join(args.hex)
    scalars = decode_utf8_to_scalars(data, strict=args.strict)
    print(" ".join(f"U+{value:04X}" for value in scalars))
    _trace(args, f"decode {len(data)} bytes -> {len(scalars)} values")


def to_wide(args: argparse.Namespace) -> None:
    data = b"".join(args.hex)
    units = _codec(args).decode(data)
    digits = args.width // 4
    print(" ".join(f"0x{unit:0{digits}x}" for unit in units))
    _trace(args, f"to-wide {len(data)} bytes -> {len(units)} units ({args.width}-bit)")


def from_wide(args: argparse.Namespace) -> None:
    data = _codec(args).encode(args.units)
    print(data.hex(" "))
    _trace(args, f"from-wide {len(args.units)} units -> {len(data)} bytes ({args.width}-bit)")


def _add_wide_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--width",
        type=int,
        choices=(16, 32),
        default=platform_wide_width(),
        help="Wide code unit width in bits (default: host wchar_t width)",
    )
    parser.add_argument(
        "--surrogates",
        action="store_true",
        help="Use surrogate pairs for supplementary-plane values with 16-bit units",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UTF-8 / wide character codec inspector")
    parser.add_argument("--trace-log", default=None, help="Append conversion events to this file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject overlong sequences and values that are not unicode scalar values",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Show the sequence length of lead bytes")
    classify_parser.add_argument("bytes", nargs="+", type=parse_byte, help="Byte values, e.g. 0xe2")
    classify_parser.set_defaults(func=classify)

    encode_parser = subparsers.add_parser("encode", help="Encode code points as UTF-8")
    encode_parser.add_argument("values", nargs="+", type=parse_value, help="U+20AC, 0x20ac or decimal")
    encode_parser.set_defaults(func=encode)

    decode_parser = subparsers.add_parser("decode", help="Decode UTF-8 hex bytes to code points")
    decode_parser.add_argument("hex", nargs="+", type=parse_hex, help="Hex bytes, e.g. e282ac")
    decode_parser.set_defaults(func=decode)

    to_wide_parser = subparsers.add_parser("to-wide", help="Decode UTF-8 hex bytes to wide code units")
    to_wide_parser.add_argument("hex", nargs="+", type=parse_hex, help="Hex bytes, e.g. e282ac")
    _add_wide_options(to_wide_parser)
    to_wide_parser.set_defaults(func=to_wide)

    from_wide_parser = subparsers.add_parser("from-wide", help="Encode wide code units as UTF-8")
    from_wide_parser.add_argument("units", nargs="+", type=parse_value, help="Code unit values")
    _add_wide_options(from_wide_parser)
    from_wide_parser.set_defaults(func=from_wide)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.trace = TraceLog(Path(args.trace_log)) if args.trace_log else None
    try:
        args.func(args)
    except Utf8Error as exc:
        _trace(args, f"{args.command} failed: {exc}")
        parser.exit(1, f"utf8wide: {exc}\n")


if __name__ == "__main__":
    main()
