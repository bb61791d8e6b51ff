#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for CLI argument handling."""

import json
import sys
from pathlib import Path

import pytest

from md2docx.cli import create_parser, get_exit_code_for_exception
from md2docx.cli.commands.convert import (
    build_parser_options,
    build_renderer_options,
    build_styles,
    resolve_output,
)
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
    InvalidOptionsError,
    InvariantViolationError,
    OutputWriteError,
    ParsingError,
    UnsupportedNodeError,
    ValidationError,
)


def parse(*argv):
    return create_parser().parse_args(list(argv))


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for exception to exit code mapping."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (DependencyError("docx_render", [("python-docx", ">=1.2.0")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (InvalidOptionsError("docx", int, str), EXIT_VALIDATION_ERROR),
            (ValueError("bad"), EXIT_VALIDATION_ERROR),
            (OutputWriteError("out.docx"), EXIT_FILE_ERROR),
            (FileNotFoundError("in.md"), EXIT_FILE_ERROR),
            (ParsingError("bad markdown"), EXIT_PARSING_ERROR),
            (UnsupportedNodeError("image"), EXIT_RENDERING_ERROR),
            (InvariantViolationError("broken"), EXIT_RENDERING_ERROR),
            (RuntimeError("?"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, error, code):
        assert get_exit_code_for_exception(error) == code


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse()

    def test_convert_defaults(self):
        args = parse("convert", "in.md")

        assert args.command == "convert"
        assert args.input == "in.md"
        assert args.output is None
        assert args.on_unsupported_node == "ignore"
        assert args.emphasis_mode == "flag"
        assert args.soft_break_mode == "break"
        assert args.table_full_width is True
        assert args.parse_tables is True
        assert args.log_level == "WARNING"

    def test_convert_choice_flags(self):
        args = parse("convert", "in.md", "--on-unsupported", "fail", "--emphasis-mode", "counter", "--soft-break", "space")

        assert args.on_unsupported_node == "fail"
        assert args.emphasis_mode == "counter"
        assert args.soft_break_mode == "space"

    def test_invalid_choice(self):
        with pytest.raises(SystemExit):
            parse("convert", "in.md", "--emphasis-mode", "toggle")

    def test_style_flags(self):
        args = parse("convert", "in.md", "--style-code-block", "IntenseQuote", "--style-heading1", "Title")

        assert args.style_code_block == "IntenseQuote"
        assert args.style_heading1 == "Title"
        assert args.style_table is None

    def test_logging_flags_after_subcommand(self):
        args = parse("styles", "--verbose", "--log-level", "INFO")

        assert args.verbose is True
        assert args.log_level == "INFO"

    def test_ast_command(self):
        args = parse("ast", "-", "--indent", "4")

        assert args.input == "-"
        assert args.indent == 4


@pytest.mark.unit
@pytest.mark.cli
class TestOptionBuilders:
    """Tests for building options from parsed arguments."""

    def test_build_styles_flags_only(self):
        styles = build_styles(parse("convert", "in.md", "--style-block-quote", "Intense Quote"))

        assert styles.block_quote == "Intense Quote"
        assert styles.heading1 == "Heading 1"

    def test_build_styles_flags_override_json(self, temp_dir):
        path = temp_dir / "styles.json"
        path.write_text(json.dumps({"table": "Table Grid", "heading1": "Title"}), encoding="utf-8")

        styles = build_styles(
            parse("convert", "in.md", "--styles-json", str(path), "--style-heading1", "Subtitle")
        )

        assert styles.table == "Table Grid"
        assert styles.heading1 == "Subtitle"

    def test_build_renderer_options(self):
        args = parse(
            "convert", "in.md", "--template", "t.docx", "--no-full-width-tables", "--creator", "me", "--soft-break", "space"
        )
        options = build_renderer_options(args)

        assert options.template_path == "t.docx"
        assert options.table_full_width is False
        assert options.creator == "me"
        assert options.soft_break_mode == "space"

    def test_creator_default_kept(self):
        assert build_renderer_options(parse("convert", "in.md")).creator == "md2docx"

    def test_build_parser_options(self):
        options = build_parser_options(parse("convert", "in.md", "--no-parse-tables"))

        assert options.parse_tables is False
        assert options.parse_strikethrough is True


@pytest.mark.unit
@pytest.mark.cli
class TestResolveOutput:
    """Tests for output destination resolution."""

    def test_explicit_path(self):
        assert resolve_output("in.md", "out.docx") == Path("out.docx")

    def test_derived_from_input(self):
        assert resolve_output("notes/in.md", None) == Path("notes/in.docx")

    def test_stdout(self):
        assert resolve_output("in.md", "-") is sys.stdout.buffer

    def test_stdin_without_output(self):
        assert resolve_output("-", None) is None
