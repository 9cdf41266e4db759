"""Command-line entry point for the NDN packet dissector."""

from __future__ import annotations

import argparse
import sys

from ndndissect.dissector import Dissector, Options

PROG = "ndn-dissect"
VERSION = "0.1.0"

_OPTIONS_HELP = (
    "Options:\n"
    "  -h [ --help ]         print this help message and exit\n"
    "  -c [ --content ]      dissect the value of Content elements\n"
    "  -V [ --version ]      print program version and exit\n"
)


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _build_parser() -> _Parser:
    parser = _Parser(prog=PROG, add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-c", "--content", action="store_true")
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument("input_file", nargs="?")
    return parser


def _usage() -> str:
    return f"Usage: {PROG} [options] [input-file]\n\n{_OPTIONS_HELP}"


def main(argv: list[str] | None = None) -> int:
    """Run the dissector; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = _build_parser().parse_args(argv)
    except _UsageError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.help:
        sys.stdout.write(_usage())
        return 0
    if args.version:
        print(f"{PROG} {VERSION}")
        return 0

    options = Options(dissect_content=args.content)
    if args.input_file is None or args.input_file == "-":
        Dissector(sys.stdin.buffer, sys.stdout, options).dissect()
        return 0

    try:
        stream = open(args.input_file, "rb")
    except OSError:
        print(
            f"{PROG}: {args.input_file}: File does not exist or is unreadable",
            file=sys.stderr,
        )
        return 3
    with stream:
        Dissector(stream, sys.stdout, options).dissect()
    return 0


if __name__ == "__main__":
    sys.exit(main())