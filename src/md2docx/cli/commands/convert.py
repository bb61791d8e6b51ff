#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/cli/commands/convert.py
"""The ``convert`` command: render markdown to .docx.

Style references can come from a JSON file (``--styles-json``) and from
individual ``--style-<role>`` flags; flags win over the file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Sequence, Union

from md2docx.api import markdown_to_docx
from md2docx.constants import EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from md2docx.options.docx import DocxRendererOptions, DocxStyles
from md2docx.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def add_convert_parser(subparsers: Any, parents: Sequence[argparse.ArgumentParser]) -> argparse.ArgumentParser:
    """Register the ``convert`` subcommand."""
    parser = subparsers.add_parser(
        "convert",
        parents=list(parents),
        help="Render a markdown file to .docx",
        description="Render a markdown file (or '-' for stdin) to a Word document.",
    )
    parser.add_argument("input", help="Markdown file to convert, or '-' to read stdin")
    parser.add_argument(
        "-o",
        "--output",
        help="Output .docx path ('-' for stdout). Defaults to the input path with a .docx suffix",
    )
    parser.add_argument("--template", help="Template .docx providing styles and numbering definitions")
    parser.add_argument("--styles-json", help="JSON object mapping style roles to style references")

    style_group = parser.add_argument_group("style references")
    for style_field in fields(DocxStyles):
        style_group.add_argument(
            f"--style-{style_field.name.replace('_', '-')}",
            dest=f"style_{style_field.name}",
            metavar="STYLE",
            help=f"{style_field.metadata.get('help', style_field.name)} (default: {style_field.default!r})",
        )

    render_group = parser.add_argument_group("rendering")
    for option_field in fields(DocxRendererOptions):
        if "choices" not in option_field.metadata:
            continue
        flag = "--" + option_field.metadata.get("cli_name", option_field.name.replace("_", "-"))
        render_group.add_argument(
            flag,
            dest=option_field.name,
            choices=option_field.metadata["choices"],
            default=option_field.default,
            help=f"{option_field.metadata['help']} (default: {option_field.default})",
        )
    render_group.add_argument(
        "--no-full-width-tables",
        dest="table_full_width",
        action="store_false",
        help="Let Word size tables to their content instead of the full text width",
    )
    render_group.add_argument("--creator", help="Creator name recorded in document metadata")

    parse_group = parser.add_argument_group("parsing")
    parse_group.add_argument(
        "--no-parse-tables", dest="parse_tables", action="store_false", help="Treat pipe tables as plain text"
    )
    parse_group.add_argument(
        "--no-parse-strikethrough",
        dest="parse_strikethrough",
        action="store_false",
        help="Treat ~~text~~ as plain text",
    )

    parser.set_defaults(handler=run_convert)
    return parser


def build_styles(parsed_args: argparse.Namespace) -> DocxStyles:
    """Combine the JSON style file and ``--style-<role>`` flags into DocxStyles."""
    styles = DocxStyles()
    if parsed_args.styles_json:
        styles = DocxStyles.from_json_file(parsed_args.styles_json)

    overrides = {
        role: getattr(parsed_args, f"style_{role}")
        for role in DocxStyles.role_names()
        if getattr(parsed_args, f"style_{role}", None) is not None
    }
    return styles.create_updated(**overrides) if overrides else styles


def build_renderer_options(parsed_args: argparse.Namespace) -> DocxRendererOptions:
    """Build DocxRendererOptions from parsed arguments."""
    kwargs: dict[str, Any] = {
        "styles": build_styles(parsed_args),
        "on_unsupported_node": parsed_args.on_unsupported_node,
        "emphasis_mode": parsed_args.emphasis_mode,
        "soft_break_mode": parsed_args.soft_break_mode,
        "template_path": parsed_args.template,
        "table_full_width": parsed_args.table_full_width,
    }
    if parsed_args.creator is not None:
        kwargs["creator"] = parsed_args.creator
    return DocxRendererOptions(**kwargs)


def build_parser_options(parsed_args: argparse.Namespace) -> MarkdownParserOptions:
    """Build MarkdownParserOptions from parsed arguments."""
    return MarkdownParserOptions(
        parse_tables=parsed_args.parse_tables,
        parse_strikethrough=parsed_args.parse_strikethrough,
    )


def resolve_output(input_arg: str, output_arg: str | None) -> Union[Path, IO[bytes], None]:
    """Work out where the document goes.

    Returns None when no destination can be derived (stdin input without
    ``--output``).
    """
    if output_arg == STDIN_MARKER:
        return sys.stdout.buffer
    if output_arg:
        return Path(output_arg)
    if input_arg == STDIN_MARKER:
        return None
    return Path(input_arg).with_suffix(".docx")


def run_convert(parsed_args: argparse.Namespace) -> int:
    """Execute the ``convert`` command."""
    output = resolve_output(parsed_args.input, parsed_args.output)
    if output is None:
        print("Error: --output is required when reading from stdin", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if parsed_args.input == STDIN_MARKER:
        source: Union[Path, bytes] = sys.stdin.buffer.read()
    else:
        source = Path(parsed_args.input)
        if not source.is_file():
            raise FileNotFoundError(f"Input file not found: {source}")

    renderer_options = build_renderer_options(parsed_args)
    parser_options = build_parser_options(parsed_args)

    logger.info(f"Converting {parsed_args.input} -> {output if isinstance(output, Path) else '<stdout>'}")
    markdown_to_docx(source, output, parser_options=parser_options, renderer_options=renderer_options)

    if isinstance(output, Path):
        print(f"Wrote {output}", file=sys.stderr)
    return EXIT_SUCCESS
