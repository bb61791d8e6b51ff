#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown text into the md2docx AST using mistune's
token stream (``renderer=None``). Tables and strikethrough come from
mistune plugins and can be switched off through MarkdownParserOptions.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Callable, Union

from md2docx.ast import (
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
)
from md2docx.constants import DEPS_MARKDOWN
from md2docx.exceptions import ParsingError
from md2docx.options.markdown import MarkdownParserOptions
from md2docx.parsers.base import BaseParser
from md2docx.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Title\n\nSome *text*")
        >>> [child.node_type.value for child in doc.children]
        ['heading', 'paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object in binary mode
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, _state = markdown.parse(markdown_content)
            except Exception as e:
                raise ParsingError(
                    f"Failed to parse markdown: {e!r}", parsing_stage="tokenize", original_error=e
                ) from e

            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block-level mistune tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is what tight list items hold
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(literal=token.get("raw", ""))
        elif token_type == "blank_line":
            return None

        logger.debug(f"Dropping unknown block token type '{token_type}'")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a code block token.

        mistune keeps the newline that ends the last code line; it is
        dropped so the block does not end in an empty line.
        """
        code = token.get("raw", "")
        if code.endswith("\n"):
            code = code[:-1]

        attrs = token.get("attrs", {})
        info = attrs.get("info") if isinstance(attrs, dict) else None
        info = info.strip() if info else None

        return CodeBlock(literal=code, info=info or None)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]
        return List(
            ordered=bool(attrs.get("ordered", False)),
            children=items,
            start=attrs.get("start", 1) or 1,
            tight=bool(token.get("tight", True)),
        )

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        mistune puts header cells directly under ``table_head``; they are
        wrapped in a TableRow so every table section holds rows.
        """
        sections: list[Node] = []

        for section_token in token.get("children", []):
            section_type = section_token.get("type", "")
            if section_type == "table_head":
                cells = self._process_table_cells(section_token.get("children", []))
                sections.append(TableHead(children=[TableRow(children=cells)]))
            elif section_type == "table_body":
                rows: list[Node] = [
                    TableRow(children=self._process_table_cells(row_token.get("children", [])))
                    for row_token in section_token.get("children", [])
                    if row_token.get("type") == "table_row"
                ]
                sections.append(TableBody(children=rows))

        return Table(children=sections)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        cells: list[Node] = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs", {})
            alignment = attrs.get("align") if isinstance(attrs, dict) else None
            cells.append(
                TableCell(children=self._process_inline_tokens(cell_token.get("children", [])), alignment=alignment)
            )
        return cells

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text into a single Text node.

        mistune splits text at characters that might start inline markup;
        merging keeps each run of plain text in one Text literal.
        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1].literal += node.literal
            else:
                nodes.append(node)

        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug(f"Dropping unknown inline token type '{token_type}'")
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(literal=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(literal=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            destination=attrs.get("url", ""),
            children=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title") or "",
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(
            destination=attrs.get("url", ""),
            children=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title") or "",
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> HardBreak:
        return HardBreak()

    def _handle_softbreak_token(self, token: dict[str, Any]) -> SoftBreak:
        return SoftBreak()

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(literal=token.get("raw", ""))


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to AST.

    Examples
    --------
    >>> from md2docx.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
