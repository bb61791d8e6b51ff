#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/api.py
"""Convenience functions for the common conversions.

Examples
--------
    >>> from md2docx import markdown_to_docx
    >>> markdown_to_docx("README.md", "README.docx")

    >>> from md2docx.options import DocxRendererOptions, DocxStyles
    >>> options = DocxRendererOptions(styles=DocxStyles(code_block="IntenseQuote"))
    >>> markdown_to_docx("# Title\\n\\n```\\ncode\\n```", "out.docx", renderer_options=options)

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from md2docx.ast import Document
from md2docx.options.docx import DocxRendererOptions
from md2docx.options.markdown import MarkdownParserOptions
from md2docx.parsers.markdown import MarkdownToAstConverter
from md2docx.renderers.docx import DocxRenderer

logger = logging.getLogger(__name__)


def render_ast(
    doc: Document, output: Union[str, Path, IO[bytes]], options: DocxRendererOptions | None = None
) -> None:
    """Render an AST Document to a DOCX file or binary stream.

    Parameters
    ----------
    doc : Document
        AST Document node to render
    output : str, Path, or IO[bytes]
        Output destination
    options : DocxRendererOptions or None, default = None
        Rendering options

    """
    DocxRenderer(options).render(doc, output)


def markdown_to_docx(
    source: Union[str, Path, IO[bytes], bytes],
    output: Union[str, Path, IO[bytes]],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: DocxRendererOptions | None = None,
) -> Document:
    """Convert Markdown to DOCX in one step.

    Parameters
    ----------
    source : str, Path, IO[bytes], or bytes
        Markdown input. A string naming an existing file is read from disk;
        any other string is the markdown itself.
    output : str, Path, or IO[bytes]
        Output destination
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options
    renderer_options : DocxRendererOptions or None, default = None
        DOCX rendering options

    Returns
    -------
    Document
        The parsed AST, for callers that want to inspect what was rendered

    """
    doc = MarkdownToAstConverter(parser_options).parse(source)
    logger.debug(f"Parsed markdown into {len(doc.children)} top-level blocks")
    render_ast(doc, output, renderer_options)
    return doc
