#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2docx.

This module centralizes the hardcoded values and default configuration
constants used across the library.

Constants are organized by category:
1. Type Definitions - Literal types used by the options classes
2. Dependency Specifications - Packages checked by @requires_dependencies
3. Style Defaults - Style references applied when none are configured
4. Rendering Behavior - Policies of the DOCX rendering visitor
5. CLI - Exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

UnsupportedNodePolicy = Literal["fail", "ignore"]
EmphasisMode = Literal["flag", "counter"]
SoftBreakMode = Literal["break", "space"]
CellAlignment = Literal["left", "center", "right"]

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_DOCX_RENDER = [("python-docx", "docx", ">=1.2.0")]

# =============================================================================
# Style Defaults
# =============================================================================
# Style references may be style names or style ids; unknown references are
# written through unchanged. Empty string means "no style".

DEFAULT_STYLE_HYPERLINK = "Hyperlink"
DEFAULT_STYLE_LIST_ORDERED = "List Number"
DEFAULT_STYLE_LIST_UNORDERED = "List Bullet"
DEFAULT_STYLE_HEADING1 = "Heading 1"
DEFAULT_STYLE_HEADING2 = "Heading 2"
DEFAULT_STYLE_HEADING3 = "Heading 3"
DEFAULT_STYLE_HEADING4 = "Heading 4"
DEFAULT_STYLE_HEADING5 = "Heading 5"
DEFAULT_STYLE_CODE_BLOCK = "Macro Text"
DEFAULT_STYLE_CODE_INLINE = ""
DEFAULT_STYLE_BLOCK_QUOTE = "Quote"
DEFAULT_STYLE_TABLE = "Light Grid Accent 1"

# Highest heading level with its own style role; deeper headings share it
MAX_STYLED_HEADING_LEVEL = 5

# =============================================================================
# Rendering Behavior
# =============================================================================

DEFAULT_UNSUPPORTED_NODE_POLICY: UnsupportedNodePolicy = "ignore"
DEFAULT_EMPHASIS_MODE: EmphasisMode = "flag"
DEFAULT_SOFT_BREAK_MODE: SoftBreakMode = "break"
DEFAULT_TABLE_FULL_WIDTH = True
DEFAULT_CREATOR = "md2docx"

# Two-character sequence (backslash, "n") that starts a new paragraph inside a table cell
TABLE_CELL_NEWLINE_ESCAPE = "\\n"

# Full page width for w:tblW of type "pct" (fiftieths of a percent)
FULL_WIDTH_PCT = 5000

# Nesting level sentinel meaning "not inside a list"
LIST_LEVEL_NONE = -1

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
