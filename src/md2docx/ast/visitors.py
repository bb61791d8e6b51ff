#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/visitors.py
"""Visitor base class for enter/leave AST traversal.

A visitor has one entry point, :meth:`NodeVisitor.visit`, which the walker
calls twice per node. It dispatches to ``visit_<kind>(node, entering)``
methods named after :class:`~md2docx.ast.nodes.NodeType` values; kinds
without a method go to :meth:`NodeVisitor.generic_visit`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from md2docx.ast.nodes import Node
from md2docx.ast.walker import WalkStatus, walk


class NodeVisitor(ABC):
    """Abstract base class for enter/leave AST visitors.

    Subclasses implement ``visit_<kind>`` methods for the node kinds they
    handle and :meth:`generic_visit` for everything else. Visit methods may
    return a :class:`WalkStatus`; returning None means ``GO_TO_NEXT``.

    Examples
    --------
    Counting paragraphs:

        >>> class ParagraphCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_paragraph(self, node, entering):
        ...         if entering:
        ...             self.count += 1
        ...
        ...     def generic_visit(self, node, entering):
        ...         pass
        ...
        >>> counter = ParagraphCounter()
        >>> counter.run(document)

    """

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Dispatch one traversal event to the matching ``visit_<kind>`` method.

        Parameters
        ----------
        node : Node
            Node being entered or left
        entering : bool
            True on the enter event, False on the leave event

        Returns
        -------
        WalkStatus
            Traversal-control signal for the walker

        """
        method = self._visit_method(node)
        result = method(node, entering) if method is not None else self.generic_visit(node, entering)
        return WalkStatus.GO_TO_NEXT if result is None else result

    def run(self, root: Node) -> WalkStatus:
        """Walk ``root`` with this visitor."""
        return walk(root, self)

    def _visit_method(self, node: Node) -> Optional[Callable[[Node, bool], Any]]:
        return getattr(self, f"visit_{node.node_type.value}", None)

    @abstractmethod
    def generic_visit(self, node: Node, entering: bool) -> Any:
        """Handle a node kind that has no dedicated visit method.

        Parameters
        ----------
        node : Node
            Node being entered or left
        entering : bool
            Traversal direction

        """
        pass


class OutlineVisitor(NodeVisitor):
    """Collect an indented, one-line-per-node outline of the tree.

    Used by the ``md2docx ast`` command to show what the renderer will see.

    Parameters
    ----------
    indent : str, default = '  '
        Indentation added per nesting level

    """

    def __init__(self, indent: str = "  "):
        """Initialize the outline visitor."""
        self.indent = indent
        self.lines: list[str] = []
        self._depth = 0

    def generic_visit(self, node: Node, entering: bool) -> None:
        """Record the node on enter and track depth."""
        if not entering:
            self._depth -= 1
            return
        self.lines.append(f"{self.indent * self._depth}{node.node_type.value}{self._describe(node)}")
        self._depth += 1

    @staticmethod
    def _describe(node: Node) -> str:
        details = []
        for attr in ("level", "ordered", "alignment", "destination", "title", "info", "literal"):
            value = getattr(node, attr, None)
            if value in (None, ""):
                continue
            details.append(f"{attr}={value!r}")
        return f" ({', '.join(details)})" if details else ""

    def render(self) -> str:
        """Return the collected outline as text."""
        return "\n".join(self.lines)
