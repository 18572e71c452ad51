"""CLI entry point for gitscribe.

Reads the captured output of a git command from a file or stdin and prints
the parsed result. gitscribe never runs git itself.
"""

import argparse
import json
import sys
from typing import Any, TextIO

import structlog
from pydantic import BaseModel

from gitscribe.app import configure_logging
from gitscribe.core.config import load_config
from gitscribe.exceptions import ConfigError, ParseError, UnknownCommandError
from gitscribe.git.dispatch import parse, resolve
from gitscribe.git.formatter import format_result
from gitscribe.git.parsers import ALIASES, PARSERS

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitscribe",
        description="Parse captured git output into structured data.",
    )
    parser.add_argument(
        "transform",
        help=f"transform to apply ({', '.join(sorted([*PARSERS, *ALIASES]))})",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="file holding the captured output; '-' or omitted reads stdin",
    )
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default=None,
        dest="output_format",
        help="output format (default from GITSCRIBE_OUTPUT_FORMAT)",
    )
    return parser


def to_jsonable(result: Any) -> Any:
    """Convert a transform result into plain JSON-serializable data."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    return result


def _read_input(path: str, stdin: TextIO) -> str:
    """Read a capture, replacing bytes that are not valid UTF-8."""
    if path == "-":
        buffer = getattr(stdin, "buffer", None)
        if buffer is not None:
            return buffer.read().decode("utf-8", errors="replace")
        return stdin.read()
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    configure_logging(config)

    try:
        transform = resolve(args.transform)
    except UnknownCommandError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        text = _read_input(args.file, stdin or sys.stdin)
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        result = parse(transform, text)
    except ParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    output_format = args.output_format or config.output_format
    if output_format == "text":
        print(format_result(transform, result))
    else:
        print(json.dumps(to_jsonable(result), indent=config.json_indent))

    logger.debug("parse_completed", transform=transform, format=output_format)
    return EXIT_OK


def run() -> None:
    sys.exit(main())
