#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/renderers/docx.py
"""DOCX rendering from AST.

This module provides the DocxRenderer class which converts AST nodes to
Microsoft Word (.docx) format. The renderer is a single-pass enter/leave
visitor: the walker delivers one event when a node is entered and one when
it is left, and the renderer keeps a small cursor state between events
(current paragraph, open table, list depth, bold and italic) to decide
where the next piece of output goes.

All writes go through :class:`~md2docx.renderers.docx_model.DocxDocumentModel`,
which wraps python-docx.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, TYPE_CHECKING, Optional, Union

from md2docx.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    HardBreak,
    Heading,
    Link,
    List,
    ListItem,
    Node,
    NodeType,
    SoftBreak,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
)
from md2docx.ast.nodes import (
    Document as ASTDocument,
)
from md2docx.ast.nodes import (
    Paragraph as ASTParagraph,
)
from md2docx.ast.visitors import NodeVisitor
from md2docx.ast.walker import WalkStatus, walk
from md2docx.constants import DEPS_DOCX_RENDER, LIST_LEVEL_NONE, TABLE_CELL_NEWLINE_ESCAPE
from md2docx.exceptions import (
    InvariantViolationError,
    NumberingDefinitionNotFoundError,
    OutputWriteError,
    RenderingError,
    UnsupportedNodeError,
)
from md2docx.options.docx import DocxRendererOptions
from md2docx.renderers.base import BaseRenderer
from md2docx.utils.decorators import debug_timer, requires_dependencies

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument
    from docx.table import Table as DocxTable
    from docx.table import _Cell, _Row
    from docx.text.paragraph import Paragraph
    from docx.text.run import Run

    from md2docx.renderers.docx_model import DocxDocumentModel

logger = logging.getLogger(__name__)


class NodeContext(Enum):
    """Where a node sits, judged from its parent's kind."""

    GENERIC = "generic"
    IN_LINK = "in_link"
    IN_TABLE_CELL = "in_table_cell"
    IN_LIST_ITEM = "in_list_item"


_PARENT_CONTEXTS = {
    NodeType.LINK: NodeContext.IN_LINK,
    NodeType.TABLE_CELL: NodeContext.IN_TABLE_CELL,
    NodeType.LIST_ITEM: NodeContext.IN_LIST_ITEM,
}


def classify_node_context(node: Node) -> NodeContext:
    """Classify ``node`` by the kind of its parent."""
    if node.parent is None:
        return NodeContext.GENERIC
    return _PARENT_CONTEXTS.get(node.parent.node_type, NodeContext.GENERIC)


@dataclass
class TableContext:
    """Cursor inside the table currently being written."""

    table: DocxTable
    row: Optional[_Row] = None
    cell: Optional[_Cell] = None
    next_cell_index: int = 0
    in_head: bool = False


@dataclass
class RenderState:
    """Mutable cursor state for one traversal.

    ``bold`` and ``italic`` are nesting counters in "counter" mode and 0/1
    flags in "flag" mode; formatting is on whenever the value is positive.
    """

    document: DocxDocumentModel
    current_paragraph: Optional[Paragraph] = None
    table: Optional[TableContext] = None
    list_level: int = LIST_LEVEL_NONE
    bold: int = 0
    italic: int = 0
    context: NodeContext = NodeContext.GENERIC


class DocxRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to DOCX format.

    Parameters
    ----------
    options : DocxRendererOptions or None, default = None
        DOCX rendering options

    Examples
    --------
    Basic usage:

        >>> from md2docx.ast import Document, Heading, Text
        >>> from md2docx.options import DocxRendererOptions
        >>> from md2docx.renderers.docx import DocxRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, children=[Text("Title")])
        ... ])
        >>> renderer = DocxRenderer(DocxRendererOptions())
        >>> renderer.render(doc, "output.docx")

    Rendering into an existing document:

        >>> from docx import Document as DocxDocument
        >>> target = DocxDocument("template.docx")
        >>> renderer.render_into(target, doc)
        >>> target.save("filled.docx")

    """

    def __init__(self, options: DocxRendererOptions | None = None):
        """Initialize the DOCX renderer with options."""
        BaseRenderer._validate_options_type(options, DocxRendererOptions, "docx")
        options = options or DocxRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: DocxRendererOptions = options
        self._state: RenderState | None = None

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    @requires_dependencies("docx_render", DEPS_DOCX_RENDER)
    def render(self, doc: ASTDocument, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the AST to a DOCX file.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or IO[bytes]
            Output destination (file path or file-like object)

        Raises
        ------
        UnsupportedNodeError
            If a node kind has no rendering rule and the policy is "fail"
        InvariantViolationError
            If the event stream breaks a rendering invariant
        OutputWriteError
            If the document cannot be written
        RenderingError
            If DOCX generation fails for any other reason

        """
        from md2docx.renderers.docx_model import DocxDocumentModel

        try:
            model = DocxDocumentModel.create(self.options.template_path)
        except Exception as e:
            raise RenderingError(
                f"Failed to open DOCX template {self.options.template_path!r}: {e!r}",
                rendering_stage="setup",
                original_error=e,
            ) from e

        model.set_creator(self.options.creator)
        self._render_model(model, doc)
        self._save(model, output)

    @requires_dependencies("docx_render", DEPS_DOCX_RENDER)
    def render_into(self, document: DocxDocument, doc: ASTDocument) -> DocxDocument:
        """Render the AST into an existing python-docx document without saving it.

        Content is appended after whatever the document already holds, and
        the document's own styles and numbering definitions are used.

        Parameters
        ----------
        document : docx.document.Document
            Target document
        doc : Document
            AST Document node to render

        Returns
        -------
        docx.document.Document
            The same ``document``, for chaining

        """
        from md2docx.renderers.docx_model import DocxDocumentModel

        self._render_model(DocxDocumentModel(document), doc)
        return document

    def _render_model(self, model: DocxDocumentModel, doc: ASTDocument) -> None:
        self._state = RenderState(document=model)
        try:
            with debug_timer(logger, "Rendering (docx)"):
                walk(doc, self)
        except RenderingError:
            raise
        except Exception as e:
            raise RenderingError(f"Failed to render DOCX: {e!r}", rendering_stage="rendering", original_error=e) from e
        finally:
            self._state = None

    @staticmethod
    def _save(model: DocxDocumentModel, output: Union[str, Path, IO[bytes]]) -> None:
        if isinstance(output, (str, Path)):
            try:
                model.save(str(output))
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
        else:
            try:
                model.save(output)
            except OSError as e:
                raise OutputWriteError("<stream>", original_error=e) from e

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Classify the node's context, then dispatch to its handler.

        The renderer never prunes or stops the walk, so the result is always
        ``GO_TO_NEXT``.
        """
        if self._state is None:
            raise InvariantViolationError("DocxRenderer.visit called outside of a render")
        self._state.context = classify_node_context(node)
        super().visit(node, entering)
        return WalkStatus.GO_TO_NEXT

    def generic_visit(self, node: Node, entering: bool) -> None:
        """Apply the unsupported-node policy to kinds without a handler."""
        if not entering:
            return
        kind = node.node_type.value
        if self.options.on_unsupported_node == "fail":
            raise UnsupportedNodeError(kind)
        logger.warning(f"Skipping unsupported node type '{kind}'; its children are still rendered")

    @property
    def state(self) -> RenderState:
        """Cursor state of the render in progress."""
        if self._state is None:
            raise InvariantViolationError("No render in progress")
        return self._state

    def _require_paragraph(self, node: Node) -> Paragraph:
        paragraph = self.state.current_paragraph
        if paragraph is None:
            raise InvariantViolationError(f"{node.node_type.value} node reached with no current paragraph")
        return paragraph

    def _require_table(self, node: Node) -> TableContext:
        table = self.state.table
        if table is None:
            raise InvariantViolationError(f"{node.node_type.value} node reached outside of a table")
        return table

    def _emphasized_run(self, paragraph: Paragraph) -> Run:
        state = self.state
        run = state.document.add_run(paragraph)
        state.document.set_run_emphasis(run, bold=state.bold > 0, italic=state.italic > 0)
        return run

    def _toggle(self, attr: str, entering: bool) -> None:
        state = self.state
        if self.options.emphasis_mode == "counter":
            setattr(state, attr, max(getattr(state, attr) + (1 if entering else -1), 0))
        else:
            setattr(state, attr, 1 if entering else 0)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: ASTDocument, entering: bool) -> None:
        """Nothing to do; the document already exists."""
        pass

    def visit_paragraph(self, node: ASTParagraph, entering: bool) -> None:
        """Start a paragraph, or reuse the cell paragraph inside a table cell.

        Paragraphs directly inside a list item get the list style and, when
        nested below the outermost list, explicit numbering at the current
        list level.
        """
        if not entering:
            return

        state = self.state
        if state.context is NodeContext.IN_TABLE_CELL:
            self._require_table(node)
            self._require_paragraph(node)
            return

        paragraph = state.document.add_paragraph()
        state.current_paragraph = paragraph

        if state.context is NodeContext.IN_LIST_ITEM:
            self._apply_list_formatting(node, paragraph)

    def _apply_list_formatting(self, node: ASTParagraph, paragraph: Paragraph) -> None:
        state = self.state
        item = node.parent
        list_node = item.parent if item is not None else None
        if not isinstance(list_node, List):
            raise InvariantViolationError("List item paragraph without an enclosing list")

        style = self.options.styles.list_style(list_node.ordered)
        state.document.set_paragraph_style(paragraph, style)

        if state.list_level <= 0:
            return

        num_id = state.document.find_numbering_id(style)
        if num_id is None:
            error = NumberingDefinitionNotFoundError(style)
            logger.warning(f"{error}; nested list item keeps its style without explicit numbering")
            return
        state.document.set_numbering(paragraph, state.list_level, num_id)

    def visit_heading(self, node: Heading, entering: bool) -> None:
        """Start a paragraph with the heading style for the node's level."""
        if not entering:
            return
        state = self.state
        paragraph = state.document.add_paragraph()
        state.document.set_paragraph_style(paragraph, self.options.styles.heading_style(node.level))
        state.current_paragraph = paragraph

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> None:
        """Apply the quote style to the paragraph current when the quote ends."""
        if entering:
            return
        paragraph = self.state.current_paragraph
        if paragraph is not None:
            self.state.document.set_paragraph_style(paragraph, self.options.styles.block_quote)

    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        """Write the code block as one run with a break between lines."""
        if not entering:
            return
        state = self.state
        paragraph = state.document.add_paragraph()
        state.document.set_paragraph_style(paragraph, self.options.styles.code_block)
        state.current_paragraph = paragraph
        run = state.document.add_run(paragraph)
        state.document.add_text_with_breaks(run, node.literal)

    def visit_list(self, node: List, entering: bool) -> None:
        """Track list nesting depth."""
        self.state.list_level += 1 if entering else -1

    def visit_list_item(self, node: ListItem, entering: bool) -> None:
        """List formatting happens on the item's paragraphs."""
        pass

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table, entering: bool) -> None:
        """Open a table on enter; close it and clear the current paragraph on leave."""
        state = self.state
        if entering:
            if state.table is not None:
                raise InvariantViolationError("Nested tables are not supported")
            table = state.document.add_table(
                node.column_count(), self.options.styles.table, full_width=self.options.table_full_width
            )
            state.table = TableContext(table=table)
        else:
            state.table = None
            state.current_paragraph = None

    def visit_table_head(self, node: TableHead, entering: bool) -> None:
        """Mark rows as header rows while inside the head section."""
        self._require_table(node).in_head = entering

    def visit_table_body(self, node: TableBody, entering: bool) -> None:
        """Mark rows as body rows."""
        self._require_table(node).in_head = False

    def visit_table_row(self, node: TableRow, entering: bool) -> None:
        """Append a row to the open table."""
        context = self._require_table(node)
        if not entering:
            return
        context.row = self.state.document.add_row(context.table)
        context.cell = None
        context.next_cell_index = 0

    def visit_table_cell(self, node: TableCell, entering: bool) -> None:
        """Move to the row's next cell and make its first paragraph current."""
        context = self._require_table(node)
        if not entering:
            return
        if context.row is None:
            raise InvariantViolationError("Table cell reached before any table row")

        state = self.state
        context.cell = state.document.add_cell(context.table, context.row, context.next_cell_index)
        context.next_cell_index += 1

        paragraph = state.document.cell_paragraph(context.cell)
        state.document.set_paragraph_alignment(paragraph, node.alignment)
        state.current_paragraph = paragraph

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, entering: bool) -> None:
        """Write text as a hyperlink run, as cell paragraphs, or as a plain run."""
        if not entering:
            return

        state = self.state
        if state.context is NodeContext.IN_LINK:
            self._write_link_text(node)
        elif state.context is NodeContext.IN_TABLE_CELL:
            self._write_cell_text(node)
        else:
            run = self._emphasized_run(self._require_paragraph(node))
            state.document.add_text_with_breaks(run, node.literal)

    def _write_link_text(self, node: Text) -> None:
        link = node.parent
        assert isinstance(link, Link)
        state = self.state
        run = state.document.add_hyperlink(
            self._require_paragraph(node), link.destination, link.title, self.options.styles.hyperlink
        )
        state.document.add_text(run, node.literal)

    def _write_cell_text(self, node: Text) -> None:
        state = self.state
        context = self._require_table(node)
        if context.cell is None:
            raise InvariantViolationError("Table cell text reached before any table cell")

        paragraph = self._require_paragraph(node)
        segments = node.literal.split(TABLE_CELL_NEWLINE_ESCAPE)
        state.document.add_text(self._emphasized_run(paragraph), segments[0])

        for segment in segments[1:]:
            new_paragraph = state.document.add_cell_paragraph(context.cell)
            state.document.copy_alignment(paragraph, new_paragraph)
            state.document.add_text(self._emphasized_run(new_paragraph), segment)
            paragraph = new_paragraph

        state.current_paragraph = paragraph

    def visit_code(self, node: Code, entering: bool) -> None:
        """Write inline code as its own run with the inline code style."""
        if not entering:
            return
        state = self.state
        run = state.document.add_run(self._require_paragraph(node))
        state.document.set_run_style(run, self.options.styles.code_inline)
        state.document.add_text(run, node.literal)

    def visit_strong(self, node: Strong, entering: bool) -> None:
        """Switch bold on or off."""
        self._toggle("bold", entering)

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        """Switch italic on or off."""
        self._toggle("italic", entering)

    def visit_link(self, node: Link, entering: bool) -> None:
        """Link text is written by the Text children."""
        pass

    def visit_hard_break(self, node: HardBreak, entering: bool) -> None:
        """Add a line break to the last run of the current paragraph."""
        if entering:
            self._add_line_break(node)

    def visit_soft_break(self, node: SoftBreak, entering: bool) -> None:
        """Render a soft break as a line break or as a space, per options."""
        if not entering:
            return
        if self.options.soft_break_mode == "break":
            self._add_line_break(node)
        else:
            run = self._emphasized_run(self._require_paragraph(node))
            self.state.document.add_text(run, " ")

    def _add_line_break(self, node: Node) -> None:
        document = self.state.document
        document.add_break(document.last_run(self._require_paragraph(node)))

