#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/nodes.py
"""AST node classes for markdown document representation.

This module defines the node hierarchy the DOCX renderer consumes. Every
node knows its kind (``node_type``), its ``parent`` and its ordered
``children``, so a visitor driven by enter/leave events can inspect the
surrounding structure without building any state of its own.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableHead, TableBody, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, HardBreak, SoftBreak, HTMLInline

Parent pointers are assigned whenever children are attached, either through
the constructor or through :meth:`Node.append_child`.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterator, Optional

from md2docx.constants import CellAlignment

_VALID_ALIGNMENTS = (None, "left", "center", "right")


class NodeType(Enum):
    """Kinds of AST nodes.

    The value of each member is the suffix of the visitor method that
    handles it (``visit_<value>``).
    """

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    TEXT = "text"
    CODE = "code"
    CODE_BLOCK = "code_block"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    LINK = "link"
    LIST = "list"
    LIST_ITEM = "list_item"
    BLOCK_QUOTE = "block_quote"
    HARD_BREAK = "hard_break"
    SOFT_BREAK = "soft_break"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_BODY = "table_body"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    IMAGE = "image"
    THEMATIC_BREAK = "thematic_break"
    HTML_BLOCK = "html_block"
    HTML_INLINE = "html_inline"
    STRIKETHROUGH = "strikethrough"


class Node(ABC):
    """Base class for all AST nodes.

    Attributes
    ----------
    node_type : NodeType
        Kind of the node (class attribute)
    parent : Node or None
        Enclosing node, None for the root
    children : list of Node
        Ordered child nodes (always empty for leaf kinds)

    """

    node_type: ClassVar[NodeType]
    accepts_children: ClassVar[bool] = True

    parent: Optional[Node]
    children: list[Node]

    def __post_init__(self) -> None:
        """Point every child back at this node."""
        if self.children and not self.accepts_children:
            raise ValueError(f"{type(self).__name__} nodes cannot have children")
        for child in self.children:
            child.parent = self

    def append_child(self, child: Node) -> Node:
        """Attach ``child`` as the last child of this node.

        Parameters
        ----------
        child : Node
            Node to attach; its ``parent`` is set to this node

        Returns
        -------
        Node
            The attached child, for chaining

        Raises
        ------
        TypeError
            If this node kind cannot hold children

        """
        if not self.accepts_children:
            raise TypeError(f"{type(self).__name__} nodes cannot have children")
        child.parent = self
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return not self.children

    def ancestors(self) -> Iterator[Node]:
        """Iterate over the enclosing nodes, innermost first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Deliver one enter or leave event for this node to ``visitor``.

        The visitor's ``visit`` method routes the event to
        ``visit_<node_type.value>``.
        """
        return visitor.visit(self, entering)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(eq=False)
class Document(Node):
    """Root document node containing block-level children."""

    node_type: ClassVar[NodeType] = NodeType.DOCUMENT

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Paragraph(Node):
    """Paragraph node containing inline content."""

    node_type: ClassVar[NodeType] = NodeType.PARAGRAPH

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    node_type: ClassVar[NodeType] = NodeType.HEADING

    level: int
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()


@dataclass(eq=False)
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    literal : str
        Code content, without the trailing newline of the last line
    info : str or None, default = None
        Info string following the opening fence (e.g. ``python``)

    """

    node_type: ClassVar[NodeType] = NodeType.CODE_BLOCK
    accepts_children: ClassVar[bool] = False

    literal: str
    info: Optional[str] = None
    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class BlockQuote(Node):
    """Block quote containing other block elements."""

    node_type: ClassVar[NodeType] = NodeType.BLOCK_QUOTE

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool
        True for ordered (numbered) lists, False for bulleted lists
    children : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether the list is tight (no blank lines between items)

    """

    node_type: ClassVar[NodeType] = NodeType.LIST

    ordered: bool
    children: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class ListItem(Node):
    """Single list item holding block content (paragraphs, nested lists)."""

    node_type: ClassVar[NodeType] = NodeType.LIST_ITEM

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Table(Node):
    """Table holding a TableHead and a TableBody."""

    node_type: ClassVar[NodeType] = NodeType.TABLE

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)

    def rows(self) -> list[TableRow]:
        """Return all rows of the table, header rows first."""
        collected: list[TableRow] = []
        for section in self.children:
            if isinstance(section, TableRow):
                collected.append(section)
            else:
                collected.extend(row for row in section.children if isinstance(row, TableRow))
        return collected

    def column_count(self) -> int:
        """Return the widest row's cell count."""
        return max((len(row.children) for row in self.rows()), default=0)


@dataclass(eq=False)
class TableHead(Node):
    """Header section of a table."""

    node_type: ClassVar[NodeType] = NodeType.TABLE_HEAD

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class TableBody(Node):
    """Body section of a table."""

    node_type: ClassVar[NodeType] = NodeType.TABLE_BODY

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class TableRow(Node):
    """Table row containing cells."""

    node_type: ClassVar[NodeType] = NodeType.TABLE_ROW

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class TableCell(Node):
    """Table cell with inline content and optional alignment.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline content of the cell
    alignment : {'left', 'center', 'right'} or None, default = None
        Declared column alignment

    """

    node_type: ClassVar[NodeType] = NodeType.TABLE_CELL

    children: list[Node] = field(default_factory=list)
    alignment: Optional[CellAlignment] = None
    parent: Optional[Node] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate the alignment value."""
        if self.alignment not in _VALID_ALIGNMENTS:
            raise ValueError(f"Invalid table cell alignment: {self.alignment!r}")
        super().__post_init__()


@dataclass(eq=False)
class ThematicBreak(Node):
    """Horizontal rule."""

    node_type: ClassVar[NodeType] = NodeType.THEMATIC_BREAK
    accepts_children: ClassVar[bool] = False

    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class HTMLBlock(Node):
    """Raw HTML block, preserved as-is."""

    node_type: ClassVar[NodeType] = NodeType.HTML_BLOCK
    accepts_children: ClassVar[bool] = False

    literal: str
    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(eq=False)
class Text(Node):
    """Plain text.

    Parameters
    ----------
    literal : str
        Text content

    """

    node_type: ClassVar[NodeType] = NodeType.TEXT
    accepts_children: ClassVar[bool] = False

    literal: str
    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Code(Node):
    """Inline code span."""

    node_type: ClassVar[NodeType] = NodeType.CODE
    accepts_children: ClassVar[bool] = False

    literal: str
    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Strong(Node):
    """Strong emphasis (bold)."""

    node_type: ClassVar[NodeType] = NodeType.STRONG

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Emphasis(Node):
    """Emphasis (italic)."""

    node_type: ClassVar[NodeType] = NodeType.EMPHASIS

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Strikethrough(Node):
    """Strikethrough text (GFM extension)."""

    node_type: ClassVar[NodeType] = NodeType.STRIKETHROUGH

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    destination : str
        Link target URL
    children : list of Node, default = empty list
        Inline nodes representing link text
    title : str, default = ''
        Optional link title, rendered as a tooltip

    """

    node_type: ClassVar[NodeType] = NodeType.LINK

    destination: str
    children: list[Node] = field(default_factory=list)
    title: str = ""
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class Image(Node):
    """Embedded image; children hold the alt text."""

    node_type: ClassVar[NodeType] = NodeType.IMAGE

    destination: str
    children: list[Node] = field(default_factory=list)
    title: str = ""
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class HardBreak(Node):
    """Forced line break within a paragraph."""

    node_type: ClassVar[NodeType] = NodeType.HARD_BREAK
    accepts_children: ClassVar[bool] = False

    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class SoftBreak(Node):
    """Newline in the source that does not force a break."""

    node_type: ClassVar[NodeType] = NodeType.SOFT_BREAK
    accepts_children: ClassVar[bool] = False

    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


@dataclass(eq=False)
class HTMLInline(Node):
    """Raw inline HTML."""

    node_type: ClassVar[NodeType] = NodeType.HTML_INLINE
    accepts_children: ClassVar[bool] = False

    literal: str
    children: list[Node] = field(default_factory=list, init=False, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Copy of the child list (empty for leaf nodes)

    """
    return list(node.children)
