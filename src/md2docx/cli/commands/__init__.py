#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Subcommand implementations for the md2docx CLI."""

from md2docx.cli.commands.convert import add_convert_parser
from md2docx.cli.commands.outline import add_ast_parser
from md2docx.cli.commands.styles import add_styles_parser

__all__ = ["add_ast_parser", "add_convert_parser", "add_styles_parser"]
