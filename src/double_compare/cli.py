"""Command-line interface for inspecting double comparisons."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import cast

from double_compare.bits import double_to_int64_bits, to_ordered_int
from double_compare.comparer import approx_equal_absolute, compare_relative
from double_compare.config import ComparisonConfig, load_config
from double_compare.logging import configure_logging

LOGGER = logging.getLogger(__name__)

_Handler = Callable[[argparse.Namespace, ComparisonConfig], int]


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser."""

    parser = argparse.ArgumentParser(prog="double-compare")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file providing default tolerances and log level.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override (DEBUG, INFO, WARNING, ...).",
    )
    subparsers = parser.add_subparsers(dest="command")

    relative_parser = subparsers.add_parser(
        "relative", help="Compare two doubles within a tolerance measured in ULPs"
    )
    relative_parser.add_argument("left", type=float)
    relative_parser.add_argument("right", type=float)
    relative_parser.add_argument(
        "--tolerance",
        type=int,
        default=None,
        help="Maximum number of representable doubles between equal operands.",
    )
    relative_parser.set_defaults(handler=_relative_command)

    absolute_parser = subparsers.add_parser(
        "absolute", help="Compare two doubles within a fixed numeric tolerance"
    )
    absolute_parser.add_argument("left", type=float)
    absolute_parser.add_argument("right", type=float)
    absolute_parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Operands are equal when their difference is strictly below this value.",
    )
    absolute_parser.set_defaults(handler=_absolute_command)

    bits_parser = subparsers.add_parser(
        "bits", help="Show the raw and ordered integer bit patterns of a double"
    )
    bits_parser.add_argument("value", type=float)
    bits_parser.set_defaults(handler=_bits_command)
    return parser


def _relative_command(args: argparse.Namespace, config: ComparisonConfig) -> int:
    tolerance = args.tolerance if args.tolerance is not None else config.relative_tolerance
    outcome = compare_relative(args.left, args.right, tolerance)
    LOGGER.info(
        "relative_compare",
        extra={
            "context": {
                "left": args.left,
                "right": args.right,
                "tolerance": tolerance,
                "result": outcome.result,
                "difference": outcome.difference,
            }
        },
    )
    print(f"result={outcome.result:+d} difference={outcome.difference}")
    return 0


def _absolute_command(args: argparse.Namespace, config: ComparisonConfig) -> int:
    tolerance = args.tolerance if args.tolerance is not None else config.absolute_tolerance
    if tolerance is None:
        raise ValueError("absolute comparison needs --tolerance or absolute_tolerance in --config")
    if not tolerance >= 0:
        raise ValueError(f"absolute tolerance must be non-negative, got {tolerance}")
    equal = approx_equal_absolute(args.left, args.right, tolerance)
    LOGGER.info(
        "absolute_compare",
        extra={
            "context": {
                "left": args.left,
                "right": args.right,
                "tolerance": tolerance,
                "equal": equal,
            }
        },
    )
    print("equal" if equal else "not-equal")
    return 0


def _bits_command(args: argparse.Namespace, config: ComparisonConfig) -> int:
    bits = double_to_int64_bits(args.value)
    unsigned = bits & 0xFFFF_FFFF_FFFF_FFFF
    print(f"bits={bits} hex={unsigned:#018x} ordered={to_ordered_int(bits)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config) if args.config is not None else ComparisonConfig()
        configure_logging(log_level=args.log_level or config.log_level)
        command_handler = cast(_Handler, handler)
        return command_handler(args, config)
    except ValueError as exc:
        LOGGER.exception("command_failed command=%s", args.command)
        print(f"double-compare: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
