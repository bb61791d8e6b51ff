#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/walker.py
"""Depth-first enter/leave traversal of the AST.

Every node produces two events: one when the walk enters it and one when it
leaves it, after all of its children have been entered and left. The
visitor answers each event with a :class:`WalkStatus` that can prune the
current subtree or stop the walk altogether.

An explicit stack is used instead of recursion so that deeply nested
documents (long chains of block quotes or lists) are not limited by the
interpreter's recursion depth.

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from md2docx.ast.nodes import Node

logger = logging.getLogger(__name__)


class WalkStatus(Enum):
    """Traversal-control signal returned by visitors.

    GO_TO_NEXT
        Continue with the next event in document order.
    SKIP_CHILDREN
        Only meaningful on enter: skip the node's children and continue
        with its leave event.
    TERMINATE
        Stop the walk immediately; no further events are delivered.
    """

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


class EventVisitor(Protocol):
    """Anything with an enter/leave ``visit`` entry point."""

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Handle one traversal event."""
        ...


def walk(root: Node, visitor: EventVisitor) -> WalkStatus:
    """Walk ``root`` depth-first, left to right, delivering enter/leave events.

    Parameters
    ----------
    root : Node
        Node at which to start; usually a Document
    visitor : EventVisitor
        Receives ``visit(node, entering)`` for every event

    Returns
    -------
    WalkStatus
        ``TERMINATE`` if the visitor stopped the walk early, otherwise
        ``GO_TO_NEXT``

    Examples
    --------
        >>> from md2docx.ast import Document, Paragraph, Text
        >>> doc = Document(children=[Paragraph(children=[Text("hi")])])
        >>> walk(doc, renderer)
        <WalkStatus.GO_TO_NEXT: 'go_to_next'>

    """
    stack: list[tuple[Node, bool]] = [(root, True)]

    while stack:
        node, entering = stack.pop()
        status = visitor.visit(node, entering)

        if status is WalkStatus.TERMINATE:
            logger.debug(f"Walk terminated at {node.node_type.value} (entering={entering})")
            return status

        if entering:
            stack.append((node, False))
            if status is not WalkStatus.SKIP_CHILDREN:
                stack.extend((child, True) for child in reversed(node.children))

    return WalkStatus.GO_TO_NEXT
