#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/cli/commands/styles.py
"""The ``styles`` command: list the styles a template defines.

Shows each style's name, id and type, and which style roles of the current
configuration resolve to it, so style references can be picked before a
conversion. Supports both plain text and rich terminal output.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from md2docx.constants import DEPS_DOCX_RENDER, EXIT_SUCCESS
from md2docx.options.docx import DocxStyles
from md2docx.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_STYLE_TYPES = ("paragraph", "character", "table", "list")


@dataclass
class StyleInfo:
    """One row of the style listing."""

    name: str
    style_id: str
    style_type: str
    roles: list[str] = field(default_factory=list)


def add_styles_parser(subparsers: Any, parents: Sequence[argparse.ArgumentParser]) -> argparse.ArgumentParser:
    """Register the ``styles`` subcommand."""
    parser = subparsers.add_parser(
        "styles",
        parents=list(parents),
        help="List the styles defined by a template",
        description="List style names, ids and types of a .docx template (default: the built-in template).",
    )
    parser.add_argument("template", nargs="?", help="Template .docx to inspect")
    parser.add_argument("--type", dest="style_type", choices=_STYLE_TYPES, help="Show only styles of this type")
    parser.add_argument("--styles-json", help="Style configuration to match roles against")
    parser.add_argument("--rich", action="store_true", help="Use rich terminal output with formatting")
    parser.set_defaults(handler=run_styles)
    return parser


@requires_dependencies("docx_render", DEPS_DOCX_RENDER)
def gather_style_info(
    template: Optional[str] = None, styles: DocxStyles | None = None, style_type: Optional[str] = None
) -> list[StyleInfo]:
    """Collect the styles of ``template`` and the roles that resolve to each.

    Parameters
    ----------
    template : str or None
        Template path; the python-docx default template when None
    styles : DocxStyles or None
        Style configuration whose roles are matched (defaults when None)
    style_type : str or None
        Restrict the listing to one style type

    Returns
    -------
    list of StyleInfo
        Styles sorted by type, then name

    """
    from md2docx.renderers.docx_model import DocxDocumentModel

    model = DocxDocumentModel.create(template)
    styles = styles or DocxStyles()

    roles_by_id: dict[str, list[str]] = {}
    for role in DocxStyles.role_names():
        ref = getattr(styles, role)
        if ref:
            roles_by_id.setdefault(model.resolve_style(ref), []).append(role)

    infos = []
    for style in model.document.styles:
        type_name = style.type.name.lower() if style.type is not None else "unknown"
        if style_type and type_name != style_type:
            continue
        infos.append(
            StyleInfo(
                name=style.name or "",
                style_id=style.style_id or "",
                style_type=type_name,
                roles=roles_by_id.get(style.style_id, []),
            )
        )
    infos.sort(key=lambda info: (info.style_type, info.name.lower()))
    return infos


def _render_plain(infos: list[StyleInfo]) -> None:
    for info in infos:
        roles = f"  [{', '.join(info.roles)}]" if info.roles else ""
        print(f"{info.style_type:<10} {info.style_id:<28} {info.name}{roles}")


def _render_rich(infos: list[StyleInfo], title: str) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title=title)
    table.add_column("Type", style="magenta", no_wrap=True)
    table.add_column("Style ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="yellow")
    table.add_column("Roles", style="green")

    for info in infos:
        table.add_row(info.style_type, info.style_id, info.name, ", ".join(info.roles))

    Console().print(table)


def run_styles(parsed_args: argparse.Namespace) -> int:
    """Execute the ``styles`` command."""
    styles = DocxStyles.from_json_file(parsed_args.styles_json) if parsed_args.styles_json else None
    infos = gather_style_info(parsed_args.template, styles=styles, style_type=parsed_args.style_type)
    logger.debug(f"Found {len(infos)} styles")

    if parsed_args.rich:
        _render_rich(infos, title=f"Styles in {parsed_args.template or 'default template'} ({len(infos)})")
    else:
        _render_plain(infos)
    return EXIT_SUCCESS
