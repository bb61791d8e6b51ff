#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning the md2docx AST into output documents."""

from md2docx.renderers.base import BaseRenderer
from md2docx.renderers.docx import DocxRenderer, NodeContext, RenderState, TableContext, classify_node_context

__all__ = [
    "BaseRenderer",
    "DocxRenderer",
    "NodeContext",
    "RenderState",
    "TableContext",
    "classify_node_context",
]
