"""Main CLI entry point for varcoder."""

from __future__ import annotations

import argparse
import io
import logging
import sys

from .. import __version__
from ..codec.stream import CoderOutputStream
from ..codec.varint import decode_varint, encode_varint
from ..exceptions import VarcoderError


def _parse_int(text: str) -> int:
    # Accepts decimal, 0x.., 0o.. and 0b.. literals
    return int(text, 0)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="varcoder",
        description="varcoder: VarInt codec and framing tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  varcoder encode-int 128               Print the VarInt bytes as hex
  varcoder decode-int 0081              Decode a hex VarInt
  varcoder encode-text --ascii test     Print the framed ASCII field
  varcoder --version                    Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"varcoder {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_int = subparsers.add_parser("encode-int", help="Encode an unsigned 32-bit integer")
    encode_int.add_argument("value", type=_parse_int, help="Integer (decimal or 0x-prefixed)")

    decode_int = subparsers.add_parser("decode-int", help="Decode a hex VarInt")
    decode_int.add_argument("hex", help="Hex bytes, e.g. 0081 or '00 81'")

    encode_text = subparsers.add_parser("encode-text", help="Encode a length-prefixed text field")
    mode = encode_text.add_mutually_exclusive_group()
    mode.add_argument("--ascii", action="store_true", help="One byte per character")
    mode.add_argument("--utf16", action="store_true", help="Two bytes per character (default)")
    encode_text.add_argument("text", help="Text to encode")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the varcoder CLI.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "encode-int":
            print(encode_varint(args.value).hex())
            return 0

        if args.command == "decode-int":
            data = bytes.fromhex(args.hex)
            value, consumed = decode_varint(data)
            print(f"value={value} ({value:#x}) consumed={consumed}")
            return 0

        if args.command == "encode-text":
            sink = io.BytesIO()
            out = CoderOutputStream(sink)
            if args.ascii:
                out.write_ascii(args.text)
            else:
                out.write_string(args.text)
            print(sink.getvalue().hex())
            return 0
    except (VarcoderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
