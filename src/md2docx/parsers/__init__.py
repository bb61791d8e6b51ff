"""Parsers producing the md2docx AST."""

from md2docx.parsers.base import BaseParser
from md2docx.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
