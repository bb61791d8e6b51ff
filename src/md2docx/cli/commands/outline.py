#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/cli/commands/outline.py
"""The ``ast`` command: print the parsed markdown as an indented outline."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence, Union

from md2docx.ast import OutlineVisitor
from md2docx.cli.commands.convert import STDIN_MARKER
from md2docx.constants import EXIT_SUCCESS
from md2docx.options.markdown import MarkdownParserOptions
from md2docx.parsers.markdown import MarkdownToAstConverter


def add_ast_parser(subparsers: Any, parents: Sequence[argparse.ArgumentParser]) -> argparse.ArgumentParser:
    """Register the ``ast`` subcommand."""
    parser = subparsers.add_parser(
        "ast",
        parents=list(parents),
        help="Print the parsed AST as an outline",
        description="Parse markdown and print one line per AST node, indented by depth.",
    )
    parser.add_argument("input", help="Markdown file to parse, or '-' to read stdin")
    parser.add_argument("--indent", type=int, default=2, help="Spaces per nesting level (default: 2)")
    parser.add_argument(
        "--no-parse-tables", dest="parse_tables", action="store_false", help="Treat pipe tables as plain text"
    )
    parser.add_argument(
        "--no-parse-strikethrough",
        dest="parse_strikethrough",
        action="store_false",
        help="Treat ~~text~~ as plain text",
    )
    parser.set_defaults(handler=run_ast)
    return parser


def run_ast(parsed_args: argparse.Namespace) -> int:
    """Execute the ``ast`` command."""
    if parsed_args.input == STDIN_MARKER:
        source: Union[Path, bytes] = sys.stdin.buffer.read()
    else:
        source = Path(parsed_args.input)
        if not source.is_file():
            raise FileNotFoundError(f"Input file not found: {source}")

    options = MarkdownParserOptions(
        parse_tables=parsed_args.parse_tables, parse_strikethrough=parsed_args.parse_strikethrough
    )
    doc = MarkdownToAstConverter(options).parse(source)

    visitor = OutlineVisitor(indent=" " * max(parsed_args.indent, 0))
    visitor.run(doc)
    print(visitor.render())
    return EXIT_SUCCESS
