#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/__init__.py
"""Abstract Syntax Tree (AST) module for markdown documents.

The module consists of three components:

- nodes: AST node classes with parent pointers
- walker: depth-first enter/leave traversal driver
- visitors: visitor base class with per-kind dispatch

Examples
--------
Building and walking a small tree:

    >>> from md2docx.ast import Document, Paragraph, Strong, Text
    >>> doc = Document(children=[
    ...     Paragraph(children=[Text("hello "), Strong(children=[Text("world")])])
    ... ])
    >>> doc.children[0].children[1].parent is doc.children[0]
    True

"""

from md2docx.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    HardBreak,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    Link,
    List,
    ListItem,
    Node,
    NodeType,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
)
from md2docx.ast.visitors import NodeVisitor, OutlineVisitor
from md2docx.ast.walker import WalkStatus, walk

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "HardBreak",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeType",
    "NodeVisitor",
    "OutlineVisitor",
    "Paragraph",
    "SoftBreak",
    "Strikethrough",
    "Strong",
    "Table",
    "TableBody",
    "TableCell",
    "TableHead",
    "TableRow",
    "Text",
    "ThematicBreak",
    "WalkStatus",
    "get_node_children",
    "walk",
]
