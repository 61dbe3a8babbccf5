"""Command-line interface for JSON to CSV conversion."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, TextIO

from .columns import resolve_columns
from .converter import Options, convert
from .csv_io import RowWriter
from .decoder import JSONSource
from .errors import DecodeError, OpenError


def _open_input(path: Optional[Path], stack: ExitStack) -> BinaryIO:
    if path is None:
        if sys.stdin.isatty():
            print("Reading from stdin", file=sys.stderr)
        return sys.stdin.buffer
    try:
        return stack.enter_context(path.open("rb"))
    except OSError as exc:
        raise OpenError(f"Could not open input file: {exc}") from exc


def _open_output(path: Optional[Path], stack: ExitStack) -> TextIO:
    if path is None:
        return sys.stdout
    try:
        return stack.enter_context(path.open("w", newline="", encoding="utf-8"))
    except OSError as exc:
        raise OpenError(f"Error creating output file: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2csv",
        description="Convert a stream of JSON objects into CSV rows.",
        epilog=(
            "Optional column names can be given to limit the output columns; "
            "otherwise columns are discovered from the input records."
        ),
    )
    parser.add_argument("columns", nargs="*", help="Output column names, e.g. user.name")
    parser.add_argument("--in", dest="in_file", type=Path, default=None, help="Input file (default: stdin)")
    parser.add_argument("--out", dest="out_file", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument("--cols", action="store_true", help="Print the resolved columns and exit")
    parser.add_argument(
        "--scan-all",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Scan all records for column names (default: on)",
    )
    parser.add_argument(
        "--to-lower",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Lowercase column names (default: on)",
    )
    parser.add_argument("--delimiter", default=",", help="Output field delimiter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report progress on stderr")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse *argv*, treating a lone positional argument as the input path."""
    args = build_parser().parse_args(argv)
    if args.in_file is None and len(args.columns) == 1:
        args.in_file = Path(args.columns.pop())
    return args


def options_from_args(args: argparse.Namespace) -> Options:
    return Options(
        columns=tuple(args.columns),
        scan_all=args.scan_all,
        lowercase_keys=args.to_lower,
        columns_only=args.cols,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    options = options_from_args(args)

    try:
        with ExitStack() as stack:
            source = JSONSource(_open_input(args.in_file, stack))
            sink = RowWriter(_open_output(args.out_file, stack), delimiter=args.delimiter)

            resolution = resolve_columns(source, options)
            if resolution is None:
                if args.verbose:
                    print("No records in input", file=sys.stderr)
                return 0
            if args.verbose:
                print(
                    f"Resolved {len(resolution.columns)} column(s) ({resolution.strategy})",
                    file=sys.stderr,
                )

            rows = convert(source, sink, options, aux=sys.stdout, resolution=resolution)
    except OpenError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc
    except DecodeError as exc:
        raise SystemExit(f"ERROR: Error reading input: {exc}") from exc

    if args.verbose and not options.columns_only:
        print(f"Wrote {rows} row(s)", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
