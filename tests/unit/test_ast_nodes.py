#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for AST node classes."""

import pytest

from md2docx.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    HardBreak,
    Heading,
    Link,
    List,
    ListItem,
    NodeType,
    Paragraph,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    get_node_children,
)


@pytest.mark.unit
class TestParentPointers:
    """Tests for parent assignment."""

    def test_constructor_sets_parent(self):
        """Children passed to the constructor point back at their parent."""
        text = Text("hi")
        para = Paragraph(children=[text])
        doc = Document(children=[para])

        assert text.parent is para
        assert para.parent is doc
        assert doc.parent is None

    def test_append_child_sets_parent(self):
        """append_child attaches and returns the child."""
        para = Paragraph()
        text = para.append_child(Text("x"))

        assert text.parent is para
        assert para.children == [text]

    def test_append_child_to_leaf_raises(self):
        """Leaf kinds refuse children."""
        with pytest.raises(TypeError):
            Text("leaf").append_child(Text("child"))

    def test_ancestors_innermost_first(self):
        """ancestors() walks up to the root."""
        text = Text("deep")
        strong = Strong(children=[text])
        para = Paragraph(children=[strong])
        doc = Document(children=[para])

        assert list(text.ancestors()) == [strong, para, doc]


@pytest.mark.unit
class TestNodeKinds:
    """Tests for node kinds and payloads."""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Document(), NodeType.DOCUMENT),
            (Paragraph(), NodeType.PARAGRAPH),
            (Heading(level=2), NodeType.HEADING),
            (Text("t"), NodeType.TEXT),
            (Code("c"), NodeType.CODE),
            (CodeBlock("x = 1"), NodeType.CODE_BLOCK),
            (Strong(), NodeType.STRONG),
            (Emphasis(), NodeType.EMPHASIS),
            (Link(destination="https://example.com"), NodeType.LINK),
            (List(ordered=True), NodeType.LIST),
            (ListItem(), NodeType.LIST_ITEM),
            (BlockQuote(), NodeType.BLOCK_QUOTE),
            (HardBreak(), NodeType.HARD_BREAK),
            (Table(), NodeType.TABLE),
            (TableCell(alignment="center"), NodeType.TABLE_CELL),
        ],
    )
    def test_node_type(self, node, expected):
        """Each class reports its kind."""
        assert node.node_type is expected

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_level_validated(self, level):
        """Heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=level)

    def test_table_cell_alignment_validated(self):
        """Unknown alignments are rejected."""
        with pytest.raises(ValueError, match="alignment"):
            TableCell(alignment="justify")

    def test_link_title_defaults_to_empty(self):
        """Links without a title carry an empty string."""
        assert Link(destination="https://example.com").title == ""

    def test_leaf_nodes_have_no_children(self):
        """Leaf nodes expose an empty child list."""
        assert Text("x").children == []
        assert Text("x").is_leaf

    def test_get_node_children_returns_copy(self):
        """get_node_children does not expose the internal list."""
        para = Paragraph(children=[Text("a")])
        children = get_node_children(para)
        children.append(Text("b"))

        assert len(para.children) == 1


@pytest.mark.unit
class TestTableHelpers:
    """Tests for Table.rows and Table.column_count."""

    def test_rows_and_column_count(self):
        """Rows are gathered from head and body; width is the widest row."""
        table = Table(
            children=[
                TableHead(children=[TableRow(children=[TableCell(), TableCell()])]),
                TableBody(
                    children=[
                        TableRow(children=[TableCell()]),
                        TableRow(children=[TableCell(), TableCell(), TableCell()]),
                    ]
                ),
            ]
        )

        assert len(table.rows()) == 3
        assert table.column_count() == 3

    def test_empty_table(self):
        """An empty table has no columns."""
        assert Table().column_count() == 0
