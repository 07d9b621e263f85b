"""Command line interface for the infix to postfix converter."""

from __future__ import annotations

import argparse
import json
import sys

import yaml

from .core.config import get_settings
from .core.errors import ShuntingError, format_error
from .core.logging import get_logger, setup_logging
from .parser import ConversionResult, convert

logger = get_logger(__name__)

PROMPT = "Enter expression with +, -, *, /, ^, sin, cos, (, ), 0, 1, 2, 3, 4, 5, 6, 7, 8, 9"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shunting",
        description="Convert an infix arithmetic expression to Reverse Polish Notation.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to convert (read from standard input when omitted).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "json", "yaml"),
        default=None,
        help="Output format (default: text, or SHUNTING_OUTPUT_FORMAT).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on standard error.",
    )
    return parser


def _read_expression() -> str:
    print(PROMPT)
    sys.stdout.write(">")
    sys.stdout.flush()
    line = sys.stdin.readline()
    return line.rstrip("\r\n")


def render(result: ConversionResult, output_format: str) -> str:
    """Render a conversion result in the requested format."""
    if output_format == "json":
        return json.dumps(result.model_dump(), indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(result.model_dump(), sort_keys=False).rstrip("\n")
    return result.render()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)
    output_format = args.output_format or get_settings().OUTPUT_FORMAT

    expression = args.expression if args.expression is not None else _read_expression()

    try:
        result = convert(expression)
    except ShuntingError as exc:
        logger.debug("Conversion aborted: %s", exc.to_dict())
        print(format_error(exc), file=sys.stderr)
        return 0

    print(render(result, output_format))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution entry point
    sys.exit(main())
