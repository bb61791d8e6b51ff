#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/cli/__init__.py
"""Command-line interface for md2docx.

Subcommands
-----------
convert
    Render a markdown file (or stdin) to .docx.
styles
    List the styles a template defines, to choose style references from.
ast
    Print the parsed AST as an indented outline.

"""

from __future__ import annotations

import argparse
import logging
import sys

from md2docx.cli.commands import add_ast_parser, add_convert_parser, add_styles_parser
from md2docx.constants import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
)
from md2docx.exceptions import (
    DependencyError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2docx.logging_utils import configure_logging, resolve_log_level

logger = logging.getLogger(__name__)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    group.add_argument("--log-file", help="Also write log messages to this file")
    group.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging for md2docx")
    group.add_argument("--trace", action="store_true", help="DEBUG logging for every library, with timestamps and logger names")


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser with all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    _add_logging_arguments(common)

    parser = argparse.ArgumentParser(
        prog="md2docx",
        description="Render Markdown into Word (.docx) documents with configurable styles.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    add_convert_parser(subparsers, parents=[common])
    add_styles_parser(subparsers, parents=[common])
    add_ast_parser(subparsers, parents=[common])
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from the --log-level, --verbose, --trace and --log-file flags."""
    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the md2docx command line.

    Parameters
    ----------
    args : list of str or None, default = None
        Arguments to parse; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        return parsed_args.handler(parsed_args)
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return exit_code


if __name__ == "__main__":
    sys.exit(main())
