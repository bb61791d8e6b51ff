#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for Markdown to AST conversion."""

from io import BytesIO

import pytest

from md2docx.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    HardBreak,
    Heading,
    HTMLBlock,
    Image,
    Link,
    List,
    ListItem,
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
from md2docx.exceptions import InvalidOptionsError, ValidationError
from md2docx.options import DocxRendererOptions, MarkdownParserOptions
from md2docx.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level tokens."""

    def test_heading_levels(self):
        doc = markdown_to_ast("# One\n\n###### Six")

        assert [type(n) for n in doc.children] == [Heading, Heading]
        assert [n.level for n in doc.children] == [1, 6]
        assert doc.children[0].children[0].literal == "One"

    def test_paragraph(self):
        doc = markdown_to_ast("Just text.")

        para = doc.children[0]
        assert isinstance(para, Paragraph)
        assert isinstance(para.children[0], Text)
        assert para.children[0].literal == "Just text."

    def test_adjacent_text_merged(self):
        """Plain text split by mistune comes back as one Text node."""
        doc = markdown_to_ast("a [not a link and * star")

        para = doc.children[0]
        assert len(para.children) == 1
        assert para.children[0].literal == "a [not a link and * star"

    def test_fenced_code_block(self):
        doc = markdown_to_ast("```python\nprint(1)\n\nprint(2)\n```")

        block = doc.children[0]
        assert isinstance(block, CodeBlock)
        assert block.literal == "print(1)\n\nprint(2)"
        assert block.info == "python"

    def test_code_block_without_info(self):
        doc = markdown_to_ast("```\nx\n```")

        assert doc.children[0].info is None
        assert doc.children[0].literal == "x"

    def test_block_quote(self):
        doc = markdown_to_ast("> quoted")

        quote = doc.children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_thematic_break_and_html(self):
        doc = markdown_to_ast("---\n\n<div>raw</div>\n")

        assert isinstance(doc.children[0], ThematicBreak)
        assert isinstance(doc.children[1], HTMLBlock)
        assert "<div>raw</div>" in doc.children[1].literal

    def test_parents_assigned(self):
        doc = markdown_to_ast("**bold**")

        strong = doc.children[0].children[0]
        assert strong.parent is doc.children[0]
        assert strong.children[0].parent is strong


@pytest.mark.unit
class TestLists:
    """Tests for list structure."""

    def test_unordered_list(self):
        doc = markdown_to_ast("- a\n- b")

        lst = doc.children[0]
        assert isinstance(lst, List)
        assert lst.ordered is False
        assert len(lst.children) == 2
        assert all(isinstance(item, ListItem) for item in lst.children)
        assert isinstance(lst.children[0].children[0], Paragraph)

    def test_ordered_list_start(self):
        doc = markdown_to_ast("3. c\n4. d")

        lst = doc.children[0]
        assert lst.ordered is True
        assert lst.start == 3

    def test_nested_list(self):
        doc = markdown_to_ast("1. outer\n   - inner")

        outer = doc.children[0]
        item = outer.children[0]
        assert isinstance(item.children[0], Paragraph)
        inner = item.children[1]
        assert isinstance(inner, List)
        assert inner.ordered is False
        assert inner.parent is item

    def test_loose_list(self):
        doc = markdown_to_ast("- a\n\n- b")

        assert doc.children[0].tight is False


@pytest.mark.unit
class TestInline:
    """Tests for inline tokens."""

    def test_emphasis_and_strong(self):
        doc = markdown_to_ast("*it* and **bold**")

        children = doc.children[0].children
        assert isinstance(children[0], Emphasis)
        assert children[1].literal == " and "
        assert isinstance(children[2], Strong)

    def test_inline_code(self):
        doc = markdown_to_ast("use `x = 1` here")

        code = doc.children[0].children[1]
        assert isinstance(code, Code)
        assert code.literal == "x = 1"

    def test_link_with_title(self):
        doc = markdown_to_ast('[docs](https://example.com "Docs")')

        link = doc.children[0].children[0]
        assert isinstance(link, Link)
        assert link.destination == "https://example.com"
        assert link.title == "Docs"
        assert link.children[0].literal == "docs"

    def test_link_without_title(self):
        doc = markdown_to_ast("[docs](https://example.com)")

        assert doc.children[0].children[0].title == ""

    def test_image(self):
        doc = markdown_to_ast("![alt](pic.png)")

        image = doc.children[0].children[0]
        assert isinstance(image, Image)
        assert image.destination == "pic.png"
        assert image.children[0].literal == "alt"

    def test_hard_and_soft_breaks(self):
        doc = markdown_to_ast("one  \ntwo\nthree")

        kinds = [type(n) for n in doc.children[0].children]
        assert kinds == [Text, HardBreak, Text, SoftBreak, Text]

    def test_strikethrough(self):
        doc = markdown_to_ast("~~gone~~")

        assert isinstance(doc.children[0].children[0], Strikethrough)

    def test_strikethrough_disabled(self):
        doc = markdown_to_ast("~~gone~~", MarkdownParserOptions(parse_strikethrough=False))

        para = doc.children[0]
        assert not any(isinstance(n, Strikethrough) for n in para.children)


@pytest.mark.unit
class TestTables:
    """Tests for GFM tables."""

    markdown = "| Name | Score |\n|:-----|------:|\n| Ann | 10 |\n| Bob | 7 |\n"

    def test_table_structure(self):
        doc = markdown_to_ast(self.markdown)

        table = doc.children[0]
        assert isinstance(table, Table)
        head, body = table.children
        assert isinstance(head, TableHead)
        assert isinstance(body, TableBody)
        assert all(isinstance(row, TableRow) for row in head.children + body.children)
        assert len(head.children) == 1
        assert len(body.children) == 2
        assert table.column_count() == 2

    def test_cell_alignment(self):
        doc = markdown_to_ast(self.markdown)

        header_cells = doc.children[0].children[0].children[0].children
        assert all(isinstance(cell, TableCell) for cell in header_cells)
        assert [cell.alignment for cell in header_cells] == ["left", "right"]
        assert header_cells[0].children[0].literal == "Name"

    def test_tables_disabled(self):
        doc = markdown_to_ast(self.markdown, MarkdownParserOptions(parse_tables=False))

        assert not any(isinstance(n, Table) for n in doc.children)


@pytest.mark.unit
class TestInputs:
    """Tests for the accepted input types."""

    def test_bytes_input(self):
        doc = MarkdownToAstConverter().parse("# Title".encode("utf-8"))

        assert isinstance(doc.children[0], Heading)

    def test_bytes_with_bom(self):
        doc = MarkdownToAstConverter().parse("\ufeffHello".encode("utf-8"))

        assert doc.children[0].children[0].literal == "Hello"

    def test_latin1_bytes(self):
        doc = MarkdownToAstConverter().parse("caf\xe9".encode("latin-1"))

        assert doc.children[0].children[0].literal == "caf\xe9"

    def test_stream_input(self):
        doc = MarkdownToAstConverter().parse(BytesIO(b"- item"))

        assert isinstance(doc.children[0], List)

    def test_path_input(self, temp_dir):
        path = temp_dir / "doc.md"
        path.write_text("## From file", encoding="utf-8")

        assert MarkdownToAstConverter().parse(path).children[0].level == 2
        assert MarkdownToAstConverter().parse(str(path)).children[0].level == 2

    def test_missing_path(self, temp_dir):
        with pytest.raises(ValidationError):
            MarkdownToAstConverter().parse(temp_dir / "missing.md")

    def test_string_that_is_not_a_file(self):
        doc = MarkdownToAstConverter().parse("not/a/real/file.md")

        assert doc.children[0].children[0].literal == "not/a/real/file.md"

    def test_empty_input(self):
        assert markdown_to_ast("").children == []

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(DocxRendererOptions())
