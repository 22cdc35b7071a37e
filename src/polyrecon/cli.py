"""Command-line entry point: read a share document, print the reconstruction."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from polyrecon import __version__
from polyrecon.errors import ReconstructionError
from polyrecon.reconstruction import (
    Method,
    Reconstructor,
    format_report,
    load_input,
    result_to_dict,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "{asctime} | {name} | [{levelname}] {message}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyrecon",
        description="Reconstruct a polynomial and its secret f(0) from mixed-base shares.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON share document, or - for stdin (default: stdin)",
    )
    parser.add_argument(
        "--method",
        choices=[m.name.lower() for m in Method],
        default=Method.BOTH.name.lower(),
        help="algorithm(s) to run (default: both)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format (default: text)",
    )
    parser.add_argument(
        "--no-verify",
        dest="verify",
        action="store_false",
        help="skip re-substitution and cross-algorithm checks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # shares and secrets may exceed the default int <-> str digit limit
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)
    logging.basicConfig(
        format=LOG_FORMAT,
        style="{",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        if args.input == "-":
            raw = sys.stdin.buffer.read()
        else:
            raw = Path(args.input).read_bytes()
        text = raw.decode("utf-8")
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc.strerror}")
    except UnicodeDecodeError as exc:
        parser.error(f"{args.input} is not valid UTF-8: {exc.reason} at byte {exc.start}")

    reconstructor = Reconstructor(method=Method[args.method.upper()], verify=args.verify)
    try:
        result = reconstructor.reconstruct_input(load_input(text))
    except ReconstructionError as exc:
        logger.debug("Reconstruction failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
