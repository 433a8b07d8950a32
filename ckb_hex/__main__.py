import argparse
import logging
import sys
from typing import Optional

from ckb_hex.code_hashes import CODE_HASHES, decode_code_hashes
from ckb_hex.errors import HexDecodeError
from ckb_hex.utils import bytes_to_hex, hex_to_bytes

logger = logging.getLogger("ckb_hex")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ckb-hex",
        description="Decode hex strings (optionally 0x-prefixed) into bytes and print them.",
    )
    parser.add_argument(
        "hex",
        nargs="*",
        help="hex strings to decode; without any, the known code hashes are decoded",
    )
    parser.add_argument(
        "-n",
        "--name",
        action="append",
        default=[],
        metavar="NAME",
        help=f"decode a known code hash by name ({', '.join(CODE_HASHES)})",
    )
    parser.add_argument(
        "-l", "--label", action="store_true", help="prefix each line with its name"
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["list", "hex"],
        default="list",
        help="print bytes as a list of integers (default) or as 0x-prefixed hex",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail on invalid hex digits instead of decoding them as 0",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _render(data: bytes, format_: str) -> str:
    if format_ == "hex":
        return bytes_to_hex(data)
    return str(list(data))


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    names = args.name
    if not names and not args.hex:
        names = list(CODE_HASHES)

    try:
        results = list(decode_code_hashes(names, strict=args.strict).items())
        for hex_str in args.hex:
            results.append((hex_str, hex_to_bytes(hex_str, strict=args.strict)))
    except HexDecodeError as e:
        logger.error(f"Unable to decode: {e}")
        print(f"ckb-hex: {e}", file=sys.stderr)
        return 1

    for label, data in results:
        line = _render(data, args.format)
        print(f"{label}: {line}" if args.label else line)
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
