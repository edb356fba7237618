"""Command line entry point: apply a filter to a bitmap file."""

from __future__ import annotations

import argparse
import sys

from .bitmap import Bitmap

_MAGIC = b"BM"
_BLUR_SIZE = 7


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmpfilter", description="Apply a colour filter or blur to a 24-bit bitmap."
    )
    parser.add_argument("input", help="Name of input file")
    parser.add_argument("output", help="Name of output file")
    parser.add_argument(
        "operation", choices=("red", "green", "blue", "blur"), help="Operation to apply"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        with open(args.input, "rb") as src:
            if src.read(2) != _MAGIC:
                print("Not a bitmap", file=sys.stderr)
                return 1
            print("Valid bitmap")
            bitmap = Bitmap.read(src)

        if args.operation == "blur":
            result = bitmap.blur(_BLUR_SIZE, _BLUR_SIZE)
        else:
            result = getattr(bitmap, args.operation)()

        with open(args.output, "wb") as dst:
            result.write(dst)
    except (OSError, EOFError, ValueError) as exc:
        print(f"bmpfilter: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())