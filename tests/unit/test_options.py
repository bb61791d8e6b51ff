#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for parser and renderer options."""

import dataclasses
import json

import pytest

from md2docx.options import DocxRendererOptions, DocxStyles, MarkdownParserOptions


@pytest.mark.unit
class TestDocxStyles:
    """Tests for the style configuration."""

    def test_defaults(self):
        styles = DocxStyles()

        assert styles.hyperlink == "Hyperlink"
        assert styles.list_ordered == "List Number"
        assert styles.list_unordered == "List Bullet"
        assert styles.heading1 == "Heading 1"
        assert styles.code_block == "Macro Text"
        assert styles.code_inline == ""
        assert styles.block_quote == "Quote"
        assert styles.table == "Light Grid Accent 1"

    @pytest.mark.parametrize("level,expected", [(1, "Heading 1"), (3, "Heading 3"), (5, "Heading 5"), (6, "Heading 5")])
    def test_heading_style(self, level, expected):
        assert DocxStyles().heading_style(level) == expected

    def test_list_style(self):
        styles = DocxStyles(list_ordered="Numbers", list_unordered="Bullets")

        assert styles.list_style(True) == "Numbers"
        assert styles.list_style(False) == "Bullets"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DocxStyles().heading1 = "Title"

    def test_non_string_rejected(self):
        with pytest.raises(ValueError, match="heading1"):
            DocxStyles(heading1=None)

    def test_role_names(self):
        roles = DocxStyles.role_names()

        assert roles[0] == "hyperlink"
        assert "code_inline" in roles
        assert len(roles) == 12

    def test_from_mapping_keeps_unmentioned_roles(self):
        styles = DocxStyles.from_mapping({"code_block": "IntenseQuote"})

        assert styles.code_block == "IntenseQuote"
        assert styles.heading1 == "Heading 1"

    def test_from_mapping_unknown_role(self):
        with pytest.raises(ValueError, match="Unknown style roles: heading7"):
            DocxStyles.from_mapping({"heading7": "Heading 7"})

    def test_from_json_file(self, temp_dir):
        path = temp_dir / "styles.json"
        path.write_text(json.dumps({"block_quote": "Intense Quote", "table": ""}), encoding="utf-8")

        styles = DocxStyles.from_json_file(path)

        assert styles.block_quote == "Intense Quote"
        assert styles.table == ""

    def test_from_json_file_not_object(self, temp_dir):
        path = temp_dir / "styles.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            DocxStyles.from_json_file(path)


@pytest.mark.unit
class TestDocxRendererOptions:
    """Tests for renderer options."""

    def test_defaults(self):
        options = DocxRendererOptions()

        assert options.on_unsupported_node == "ignore"
        assert options.emphasis_mode == "flag"
        assert options.soft_break_mode == "break"
        assert options.template_path is None
        assert options.table_full_width is True
        assert options.creator == "md2docx"
        assert options.styles == DocxStyles()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"on_unsupported_node": "explode"},
            {"emphasis_mode": "toggle"},
            {"soft_break_mode": "newline"},
            {"styles": {"heading1": "Title"}},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            DocxRendererOptions(**kwargs)

    def test_create_updated(self):
        options = DocxRendererOptions()
        updated = options.create_updated(emphasis_mode="counter")

        assert updated.emphasis_mode == "counter"
        assert options.emphasis_mode == "flag"

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            DocxRendererOptions().create_updated(on_unsupported_node="maybe")

    def test_choice_metadata(self):
        metadata = {f.name: f.metadata for f in dataclasses.fields(DocxRendererOptions)}

        assert metadata["on_unsupported_node"]["choices"] == ["fail", "ignore"]
        assert metadata["soft_break_mode"]["cli_name"] == "soft-break"


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for parser options."""

    def test_defaults(self):
        options = MarkdownParserOptions()

        assert options.parse_tables is True
        assert options.parse_strikethrough is True
