#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for DOCX rendering.

This module defines the style configuration (which Word style each markdown
construct is rendered with) and the behavioral options of the DOCX renderer.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Union

from md2docx.constants import (
    DEFAULT_EMPHASIS_MODE,
    DEFAULT_SOFT_BREAK_MODE,
    DEFAULT_STYLE_BLOCK_QUOTE,
    DEFAULT_STYLE_CODE_BLOCK,
    DEFAULT_STYLE_CODE_INLINE,
    DEFAULT_STYLE_HEADING1,
    DEFAULT_STYLE_HEADING2,
    DEFAULT_STYLE_HEADING3,
    DEFAULT_STYLE_HEADING4,
    DEFAULT_STYLE_HEADING5,
    DEFAULT_STYLE_HYPERLINK,
    DEFAULT_STYLE_LIST_ORDERED,
    DEFAULT_STYLE_LIST_UNORDERED,
    DEFAULT_STYLE_TABLE,
    DEFAULT_TABLE_FULL_WIDTH,
    DEFAULT_UNSUPPORTED_NODE_POLICY,
    MAX_STYLED_HEADING_LEVEL,
    EmphasisMode,
    SoftBreakMode,
    UnsupportedNodePolicy,
)
from md2docx.options.base import BaseRendererOptions, CloneFrozenMixin


# src/md2docx/options/docx.py
@dataclass(frozen=True)
class DocxStyles(CloneFrozenMixin):
    """Style reference for each semantic role.

    Each value is an opaque style reference: either a style id
    (``"ListBullet"``) or a style name (``"List Bullet"``) defined by the
    document or template being rendered into. An empty string means "apply
    no explicit style", which leaves Word's default in place.

    Parameters
    ----------
    hyperlink : str, default "Hyperlink"
        Character style for hyperlink runs.
    list_ordered : str, default "List Number"
        Paragraph style for ordered list items.
    list_unordered : str, default "List Bullet"
        Paragraph style for bulleted list items.
    heading1 .. heading5 : str, default "Heading 1" .. "Heading 5"
        Paragraph styles for headings; level 6 headings use ``heading5``.
    code_block : str, default "Macro Text"
        Paragraph style for fenced and indented code blocks.
    code_inline : str, default ""
        Character style for inline code spans.
    block_quote : str, default "Quote"
        Paragraph style applied when a block quote ends.
    table : str, default "Light Grid Accent 1"
        Table style.

    Examples
    --------
        >>> styles = DocxStyles(code_block="IntenseQuote", code_inline="BookTitle")
        >>> styles.heading_style(6)
        'Heading 5'

    """

    hyperlink: str = field(default=DEFAULT_STYLE_HYPERLINK, metadata={"help": "Character style for hyperlinks"})
    list_ordered: str = field(
        default=DEFAULT_STYLE_LIST_ORDERED, metadata={"help": "Paragraph style for ordered list items"}
    )
    list_unordered: str = field(
        default=DEFAULT_STYLE_LIST_UNORDERED, metadata={"help": "Paragraph style for bulleted list items"}
    )
    heading1: str = field(default=DEFAULT_STYLE_HEADING1, metadata={"help": "Paragraph style for level 1 headings"})
    heading2: str = field(default=DEFAULT_STYLE_HEADING2, metadata={"help": "Paragraph style for level 2 headings"})
    heading3: str = field(default=DEFAULT_STYLE_HEADING3, metadata={"help": "Paragraph style for level 3 headings"})
    heading4: str = field(default=DEFAULT_STYLE_HEADING4, metadata={"help": "Paragraph style for level 4 headings"})
    heading5: str = field(
        default=DEFAULT_STYLE_HEADING5, metadata={"help": "Paragraph style for level 5 and deeper headings"}
    )
    code_block: str = field(default=DEFAULT_STYLE_CODE_BLOCK, metadata={"help": "Paragraph style for code blocks"})
    code_inline: str = field(default=DEFAULT_STYLE_CODE_INLINE, metadata={"help": "Character style for inline code"})
    block_quote: str = field(default=DEFAULT_STYLE_BLOCK_QUOTE, metadata={"help": "Paragraph style for block quotes"})
    table: str = field(default=DEFAULT_STYLE_TABLE, metadata={"help": "Table style"})

    def __post_init__(self) -> None:
        """Validate that every style reference is a string."""
        for style_field in fields(self):
            value = getattr(self, style_field.name)
            if not isinstance(value, str):
                raise ValueError(f"Style '{style_field.name}' must be a string, got {type(value).__name__}")

    def heading_style(self, level: int) -> str:
        """Return the style for a heading level; levels past 5 share the level 5 style."""
        return getattr(self, f"heading{min(max(level, 1), MAX_STYLED_HEADING_LEVEL)}")

    def list_style(self, ordered: bool) -> str:
        """Return the list paragraph style for an ordered or bulleted list."""
        return self.list_ordered if ordered else self.list_unordered

    @classmethod
    def role_names(cls) -> list[str]:
        """Return the names of all style roles, in declaration order."""
        return [style_field.name for style_field in fields(cls)]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], base: DocxStyles | None = None) -> DocxStyles:
        """Build styles from a role -> style mapping, starting from ``base``.

        Parameters
        ----------
        mapping : Mapping[str, Any]
            Style overrides keyed by role name
        base : DocxStyles or None, default None
            Styles to start from (defaults when None)

        Raises
        ------
        ValueError
            If the mapping names an unknown role

        """
        unknown = sorted(set(mapping) - set(cls.role_names()))
        if unknown:
            raise ValueError(f"Unknown style roles: {', '.join(unknown)}")
        return (base or cls()).create_updated(**dict(mapping))

    @classmethod
    def from_json_file(cls, path: Union[str, Path], base: DocxStyles | None = None) -> DocxStyles:
        """Load style overrides from a JSON object file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Style file {path} must contain a JSON object")
        return cls.from_mapping(data, base=base)


@dataclass(frozen=True)
class DocxRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to DOCX format.

    Parameters
    ----------
    styles : DocxStyles, default DocxStyles()
        Style reference for each semantic role.
    on_unsupported_node : {"fail", "ignore"}, default "ignore"
        What to do with node kinds the renderer has no rule for:
        - "fail": raise UnsupportedNodeError and abort the render
        - "ignore": log a warning and continue; the node's children are
          still visited
    emphasis_mode : {"flag", "counter"}, default "flag"
        How nested bold/italic is tracked:
        - "flag": entering Strong/Emphasis sets the flag and leaving clears
          it, so the end of an inner span also ends an enclosing one of the
          same kind
        - "counter": nesting depth is counted and formatting stays on until
          the outermost span closes
    soft_break_mode : {"break", "space"}, default "break"
        Render soft line breaks as explicit breaks or as a single space.
    template_path : str or None, default None
        Path to a .docx template whose styles and numbering definitions are
        used. When None the python-docx default template is used.
    table_full_width : bool, default True
        Stretch tables across the full text width.

    """

    styles: DocxStyles = field(
        default_factory=DocxStyles,
        metadata={"help": "Style reference for each semantic role", "cli_flatten": True},
    )
    on_unsupported_node: UnsupportedNodePolicy = field(
        default=DEFAULT_UNSUPPORTED_NODE_POLICY,
        metadata={
            "help": "Abort (fail) or log and continue (ignore) on node kinds without a rendering rule",
            "cli_name": "on-unsupported",
            "choices": ["fail", "ignore"],
            "importance": "core",
        },
    )
    emphasis_mode: EmphasisMode = field(
        default=DEFAULT_EMPHASIS_MODE,
        metadata={
            "help": "Track nested bold/italic as on/off flags or as nesting counters",
            "choices": ["flag", "counter"],
            "importance": "advanced",
        },
    )
    soft_break_mode: SoftBreakMode = field(
        default=DEFAULT_SOFT_BREAK_MODE,
        metadata={
            "help": "Render soft line breaks as explicit breaks or as spaces",
            "cli_name": "soft-break",
            "choices": ["break", "space"],
            "importance": "advanced",
        },
    )
    template_path: str | None = field(
        default=None,
        metadata={
            "help": "Path to .docx template file for styles (None = default blank document)",
            "importance": "core",
        },
    )
    table_full_width: bool = field(
        default=DEFAULT_TABLE_FULL_WIDTH,
        metadata={"help": "Stretch tables across the full text width", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate choice fields.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.on_unsupported_node not in ("fail", "ignore"):
            raise ValueError(f"on_unsupported_node must be 'fail' or 'ignore', got {self.on_unsupported_node!r}")
        if self.emphasis_mode not in ("flag", "counter"):
            raise ValueError(f"emphasis_mode must be 'flag' or 'counter', got {self.emphasis_mode!r}")
        if self.soft_break_mode not in ("break", "space"):
            raise ValueError(f"soft_break_mode must be 'break' or 'space', got {self.soft_break_mode!r}")
        if not isinstance(self.styles, DocxStyles):
            raise ValueError(f"styles must be a DocxStyles instance, got {type(self.styles).__name__}")
