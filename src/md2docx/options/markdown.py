#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for markdown parsing."""

from dataclasses import dataclass, field

from md2docx.constants import DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES
from md2docx.options.base import BaseParserOptions


# src/md2docx/options/markdown.py
@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Parse GFM pipe tables into Table nodes.
    parse_strikethrough : bool, default True
        Parse ``~~text~~`` into Strikethrough nodes.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM pipe tables", "cli_name": "no-parse-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse ~~strikethrough~~ syntax",
            "cli_name": "no-parse-strikethrough",
            "importance": "advanced",
        },
    )
