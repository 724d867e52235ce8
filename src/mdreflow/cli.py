"""Command-line interface for the mdreflow Markdown formatter.

This module provides a small CLI that reads a Markdown document, parses it and
writes it back as canonical CommonMark.

Examples
--------
Reformat a file to stdout:
    $ mdreflow README.md

Rewrite a file with a narrower wrap width:
    $ mdreflow notes.md --width 50 --out notes.md

Read from stdin:
    $ cat notes.md | mdreflow -

Fail if a file is not already formatted (for CI):
    $ mdreflow README.md --check

Use environment variables for defaults:
    $ export MDREFLOW_WIDTH=72
    $ mdreflow README.md  # Will wrap at 72 columns
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdreflow/cli.py

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from mdreflow.constants import DEFAULT_ORDERED_LIST_MARKER, DEFAULT_WIDTH, DEPS_MARKDOWN, ENV_PREFIX
from mdreflow.exceptions import MdreflowError
from mdreflow.logging_utils import LOG_LEVELS, configure_logging
from mdreflow.options.markdown import CommonMarkRendererOptions, MarkdownParserOptions
from mdreflow.parsers.markdown import MarkdownParser
from mdreflow.renderers.commonmark import CommonMarkRenderer
from mdreflow.utils.io_utils import write_content
from mdreflow.utils.packages import describe_packages

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INPUT_ERROR = 2


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with MDREFLOW_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'width', 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set
    """
    env_key = f"{ENV_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    CLI arguments still take precedence over environment variables.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        env_name = f"{ENV_PREFIX}{action.dest.upper()}"
        if action.type is non_negative_int:
            try:
                action.default = non_negative_int(env_value)
            except argparse.ArgumentTypeError:
                logging.warning(f"Invalid integer value for {env_name}: {env_value}")
        elif action.choices:
            candidate = action.type(env_value) if action.type is not None else env_value
            if candidate in action.choices:
                action.default = candidate
            else:
                logging.warning(f"Invalid choice for {env_name}: {env_value}. Choices: {list(action.choices)}")
        elif isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            # dest names the positive setting for both flag kinds
            action.default = env_value.lower() in ("true", "1", "yes", "on")
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of the mdreflow package."""
    from mdreflow import __version__

    return f"{__version__} ({describe_packages(DEPS_MARKDOWN)})"


def non_negative_int(value: str) -> int:
    """Validate a non-negative integer for argparse."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{value} is not a valid integer") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdreflow",
        description="Reformat Markdown as canonical, width-wrapped CommonMark.",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to reformat ('-' or omitted reads stdin)",
    )

    parser.add_argument("--out", "-o", type=str, help="Write output to this file instead of stdout")

    parser.add_argument(
        "--width",
        type=non_negative_int,
        default=DEFAULT_WIDTH,
        help=f"{CommonMarkRendererOptions.field_help('width')} (default: {DEFAULT_WIDTH})",
    )

    parser.add_argument(
        "--ordered-markers",
        choices=["fixed", "sequential"],
        default=DEFAULT_ORDERED_LIST_MARKER,
        help=CommonMarkRendererOptions.field_help("ordered_list_marker"),
    )

    parser.add_argument(
        "--no-escape-fenced-code",
        dest="escape_fenced_code",
        action="store_false",
        help=f"Disable: {CommonMarkRendererOptions.field_help('escape_fenced_code')}",
    )

    parser.add_argument(
        "--no-preserve-html",
        dest="preserve_html",
        action="store_false",
        help=f"Disable: {MarkdownParserOptions.field_help('preserve_html')}",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the input is not already formatted; print nothing",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Verbose log format with timestamps and logger names",
    )

    parser.add_argument("--version", action="version", version=f"mdreflow {_get_version()}")

    # Apply environment variables as defaults
    apply_env_vars_to_parser(parser)

    return parser


def _read_input(input_arg: str) -> str:
    if input_arg == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    return Path(input_arg).read_text(encoding="utf-8")


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    if parsed_args.input != "-" and not Path(parsed_args.input).is_file():
        print(f"Error: Input file does not exist: {parsed_args.input}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        source = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    renderer_options = CommonMarkRendererOptions(
        width=parsed_args.width,
        ordered_list_marker=parsed_args.ordered_markers,
        escape_fenced_code=parsed_args.escape_fenced_code,
    )
    parser_options = MarkdownParserOptions(preserve_html=parsed_args.preserve_html)

    try:
        # bytes so a one-line document is never mistaken for a path
        doc = MarkdownParser(parser_options).parse(source.encode("utf-8"))
        rendered = CommonMarkRenderer(renderer_options).render_to_string(doc)

        if parsed_args.check:
            if rendered != source:
                logger.info(f"{parsed_args.input} would be reformatted")
                return EXIT_ERROR
            return EXIT_SUCCESS

        if parsed_args.out:
            write_content(rendered, parsed_args.out)
            logger.info(f"Reformatted {parsed_args.input} -> {parsed_args.out}")
        else:
            sys.stdout.write(rendered)
            sys.stdout.flush()

    except MdreflowError as e:
        logger.error(f"Error: {e}")
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
