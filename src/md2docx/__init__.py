"""md2docx - render Markdown into Word (.docx) documents.

Markdown is parsed with mistune into a small AST, and a single-pass
enter/leave visitor writes that AST into a python-docx document. Every
construct is rendered with a configurable Word style, so output can follow
a corporate template by pointing the renderer at its styles.

Examples
--------
Basic usage:

    >>> from md2docx import markdown_to_docx
    >>> markdown_to_docx("notes.md", "notes.docx")

Building the AST by hand:

    >>> from md2docx import DocxRenderer
    >>> from md2docx.ast import Document, Paragraph, Strong, Text
    >>> doc = Document(children=[
    ...     Paragraph(children=[Text("hello "), Strong(children=[Text("world")])])
    ... ])
    >>> DocxRenderer().render(doc, "hello.docx")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from md2docx.api import markdown_to_docx, render_ast
from md2docx.exceptions import (
    DependencyError,
    InvalidOptionsError,
    InvariantViolationError,
    Md2DocxError,
    NumberingDefinitionNotFoundError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnsupportedNodeError,
    ValidationError,
)
from md2docx.options import DocxRendererOptions, DocxStyles, MarkdownParserOptions
from md2docx.parsers.markdown import MarkdownToAstConverter, markdown_to_ast
from md2docx.renderers.docx import DocxRenderer

__version__ = "0.1.0"

__all__ = [
    "DependencyError",
    "DocxRenderer",
    "DocxRendererOptions",
    "DocxStyles",
    "InvalidOptionsError",
    "InvariantViolationError",
    "MarkdownParserOptions",
    "MarkdownToAstConverter",
    "Md2DocxError",
    "NumberingDefinitionNotFoundError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeError",
    "ValidationError",
    "__version__",
    "markdown_to_ast",
    "markdown_to_docx",
    "render_ast",
]
