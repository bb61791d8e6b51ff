#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for the md2docx parser and renderer."""

from md2docx.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2docx.options.docx import DocxRendererOptions, DocxStyles
from md2docx.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DocxRendererOptions",
    "DocxStyles",
    "MarkdownParserOptions",
]
