#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/renderers/docx_model.py
"""Output model adapter over python-docx.

The rendering visitor never touches WordprocessingML directly; everything it
needs (paragraphs, runs, breaks, hyperlinks, tables, list numbering) goes
through :class:`DocxDocumentModel`. python-docx has no public API for
hyperlinks or for looking up numbering definitions, so those parts build or
read OOXML elements directly.

Style references may be style ids or style names. They are resolved against
the document's style table; a reference that matches nothing is logged once
and written through unchanged, which Word renders with the default style.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches
from docx.text.run import Run

from md2docx.constants import FULL_WIDTH_PCT
from md2docx.exceptions import InvariantViolationError

if TYPE_CHECKING:
    from pathlib import Path

    from docx.document import Document as DocxDocument
    from docx.table import Table, _Cell, _Row
    from docx.text.paragraph import Paragraph

logger = logging.getLogger(__name__)

_ALIGNMENTS = {
    "left": WD_ALIGN_PARAGRAPH.LEFT,
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "right": WD_ALIGN_PARAGRAPH.RIGHT,
}


@dataclass(frozen=True)
class NumberingDefinition:
    """A concrete numbering instance (``w:num``) and the style its level 0 is bound to.

    Parameters
    ----------
    num_id : int
        Value written to ``w:numId`` by paragraphs using this numbering
    abstract_num_id : int
        Abstract definition the instance points at
    level0_style : str or None
        ``w:pStyle`` of the abstract definition's level 0, if any

    """

    num_id: int
    abstract_num_id: int
    level0_style: Optional[str]


class DocxDocumentModel:
    """Adapter exposing the document operations the DOCX renderer needs.

    Parameters
    ----------
    document : docx.document.Document
        python-docx document to write into

    Examples
    --------
        >>> model = DocxDocumentModel.create()
        >>> para = model.add_paragraph()
        >>> run = model.add_run(para)
        >>> model.add_text_with_breaks(run, "one\\ntwo")

    """

    def __init__(self, document: DocxDocument):
        """Wrap an existing python-docx document."""
        self.document = document
        self._style_index: dict[str, str] | None = None
        self._numbering_index: dict[str, int] | None = None
        self._reported_styles: set[str] = set()

    @classmethod
    def create(cls, template_path: Union[str, Path, None] = None) -> DocxDocumentModel:
        """Create a model over a new document, optionally based on a template."""
        from docx import Document

        document = Document(str(template_path)) if template_path else Document()
        return cls(document)

    # ------------------------------------------------------------------
    # Styles
    # ------------------------------------------------------------------

    def _build_style_index(self) -> dict[str, str]:
        index: dict[str, str] = {}
        for style in self.document.styles:
            style_id = style.style_id
            if not style_id:
                continue
            index.setdefault(style_id, style_id)
            if style.name:
                index.setdefault(style.name.lower(), style_id)
        return index

    def resolve_style(self, ref: str) -> str:
        """Resolve a style reference to a style id.

        Lookup order is exact style id, case-insensitive style name, then the
        reference with spaces removed (Word derives most ids that way). An
        unresolvable reference is returned unchanged.

        Parameters
        ----------
        ref : str
            Style id or style name

        Returns
        -------
        str
            Style id to write into the document

        """
        if self._style_index is None:
            self._style_index = self._build_style_index()

        index = self._style_index
        for candidate in (ref, ref.lower(), ref.replace(" ", "")):
            if candidate in index:
                return index[candidate]

        if ref not in self._reported_styles:
            self._reported_styles.add(ref)
            logger.warning(f"Style '{ref}' is not defined in the document; writing the reference unchanged")
        return ref

    def set_paragraph_style(self, paragraph: Paragraph, ref: str) -> None:
        """Apply a paragraph style; an empty reference leaves the paragraph untouched."""
        if ref:
            paragraph._p.style = self.resolve_style(ref)

    def set_run_style(self, run: Run, ref: str) -> None:
        """Apply a character style; an empty reference leaves the run untouched."""
        if ref:
            run._r.style = self.resolve_style(ref)

    # ------------------------------------------------------------------
    # Paragraphs and runs
    # ------------------------------------------------------------------

    def add_paragraph(self) -> Paragraph:
        """Append an empty paragraph to the document body."""
        return self.document.add_paragraph()

    @staticmethod
    def add_run(paragraph: Paragraph) -> Run:
        """Append an empty run to a paragraph."""
        return paragraph.add_run()

    @staticmethod
    def add_text(run: Run, text: str) -> None:
        """Append literal text to a run."""
        run._r.add_t(text)

    @staticmethod
    def add_break(run: Run) -> None:
        """Append an explicit line break to a run."""
        run.add_break()

    def add_text_with_breaks(self, run: Run, text: str, separator: str = "\n") -> None:
        """Append ``text`` to a run, turning each ``separator`` into a line break.

        Every segment gets its own text element, empty ones included, so
        ``k`` separators yield ``k`` breaks and ``k + 1`` texts. No break
        follows the last segment.
        """
        for i, segment in enumerate(text.split(separator)):
            if i:
                self.add_break(run)
            self.add_text(run, segment)

    @staticmethod
    def set_run_emphasis(run: Run, bold: bool, italic: bool) -> None:
        """Turn bold and italic on for a run; formatting that is off is left unset."""
        if bold:
            run.bold = True
        if italic:
            run.italic = True

    @staticmethod
    def set_paragraph_alignment(paragraph: Paragraph, alignment: Optional[str]) -> None:
        """Set paragraph alignment from ``"left"``, ``"center"`` or ``"right"``; None is a no-op."""
        if alignment is None:
            return
        try:
            paragraph.alignment = _ALIGNMENTS[alignment]
        except KeyError:
            raise ValueError(f"Unknown paragraph alignment: {alignment!r}") from None

    @staticmethod
    def copy_alignment(source: Paragraph, target: Paragraph) -> None:
        """Give ``target`` the same alignment as ``source``."""
        target.alignment = source.alignment

    @staticmethod
    def last_run(paragraph: Paragraph) -> Run:
        """Return the paragraph's last run, including runs nested in hyperlinks.

        Raises
        ------
        InvariantViolationError
            If the paragraph has no run

        """
        runs = paragraph._p.xpath("./w:r | ./w:hyperlink/w:r")
        if not runs:
            raise InvariantViolationError("Line break requested on a paragraph without any run")
        return Run(runs[-1], paragraph)

    # ------------------------------------------------------------------
    # Hyperlinks
    # ------------------------------------------------------------------

    def add_hyperlink(self, paragraph: Paragraph, target: str, tooltip: str, style: str) -> Run:
        """Append an external hyperlink holding a single, empty run.

        python-docx has no hyperlink API, so the ``w:hyperlink`` element and
        its relationship are created by hand.

        Parameters
        ----------
        paragraph : Paragraph
            Paragraph receiving the hyperlink
        target : str
            Link destination URL
        tooltip : str
            Tooltip text; omitted when empty
        style : str
            Character style reference for the run; none when empty

        Returns
        -------
        Run
            The run inside the hyperlink, ready for text

        """
        r_id = paragraph.part.relate_to(target, RT.HYPERLINK, is_external=True)

        hyperlink = OxmlElement("w:hyperlink")
        hyperlink.set(qn("r:id"), r_id)
        if tooltip:
            hyperlink.set(qn("w:tooltip"), tooltip)

        new_run = OxmlElement("w:r")
        hyperlink.append(new_run)
        paragraph._p.append(hyperlink)

        run = Run(new_run, paragraph)
        self.set_run_style(run, style)
        return run

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def add_table(self, columns: int, style: str, full_width: bool = True) -> Table:
        """Append an empty table with ``columns`` grid columns.

        Parameters
        ----------
        columns : int
            Initial grid width; at least one column is always created
        style : str
            Table style reference; none when empty
        full_width : bool, default True
            Stretch the table across the text width

        """
        table = self.document.add_table(rows=0, cols=max(columns, 1))
        if style:
            table._tbl.tblStyle_val = self.resolve_style(style)
        if full_width:
            self._set_full_width(table)
        return table

    @staticmethod
    def _set_full_width(table: Table) -> None:
        tbl_pr = table._tbl.tblPr
        tbl_w = tbl_pr.find(qn("w:tblW"))
        if tbl_w is None:
            tbl_w = OxmlElement("w:tblW")
            tbl_pr.append(tbl_w)
        tbl_w.set(qn("w:type"), "pct")
        tbl_w.set(qn("w:w"), str(FULL_WIDTH_PCT))

    @staticmethod
    def add_row(table: Table) -> _Row:
        """Append a row with one cell per grid column."""
        return table.add_row()

    @staticmethod
    def add_cell(table: Table, row: _Row, index: int) -> _Cell:
        """Return cell ``index`` of ``row``, widening the grid when the row is too short."""
        while index >= len(table.columns):
            table.add_column(Inches(1))
        return row.cells[index]

    @staticmethod
    def cell_paragraph(cell: _Cell) -> Paragraph:
        """Return the paragraph every new cell starts with."""
        return cell.paragraphs[0]

    @staticmethod
    def add_cell_paragraph(cell: _Cell) -> Paragraph:
        """Append a new paragraph to a cell."""
        return cell.add_paragraph()

    # ------------------------------------------------------------------
    # Numbering
    # ------------------------------------------------------------------

    def numbering_definitions(self) -> list[NumberingDefinition]:
        """Enumerate the numbering instances registered in the document.

        Returns
        -------
        list of NumberingDefinition
            One entry per ``w:num``, in document order. Instances pointing at
            a missing abstract definition are skipped.

        """
        try:
            numbering_xml = self.document.part.numbering_part._element
        except NotImplementedError:
            # python-docx cannot create a numbering part for documents that lack one
            logger.debug("Document has no numbering part")
            return []

        # w:abstractNum has no registered oxml class, so its children are
        # plain lxml elements without prefix-aware xpath; walk by Clark name.
        level0_styles: dict[int, Optional[str]] = {}
        for abstract_num in numbering_xml.findall(qn("w:abstractNum")):
            abstract_id = abstract_num.get(qn("w:abstractNumId"))
            if abstract_id is None:
                continue
            level0_styles[int(abstract_id)] = self._level0_style(abstract_num)

        definitions = []
        for num in numbering_xml.findall(qn("w:num")):
            num_id = num.get(qn("w:numId"))
            abstract_ref = num.find(qn("w:abstractNumId"))
            if num_id is None or abstract_ref is None or abstract_ref.get(qn("w:val")) is None:
                continue
            abstract_id = int(abstract_ref.get(qn("w:val")))
            if abstract_id not in level0_styles:
                logger.debug(f"Numbering instance {num_id} refers to missing abstract definition {abstract_id}")
                continue
            definitions.append(NumberingDefinition(int(num_id), abstract_id, level0_styles[abstract_id]))
        return definitions

    @staticmethod
    def _level0_style(abstract_num) -> Optional[str]:
        for lvl in abstract_num.findall(qn("w:lvl")):
            if lvl.get(qn("w:ilvl")) != "0":
                continue
            p_style = lvl.find(qn("w:pStyle"))
            if p_style is not None and p_style.get(qn("w:val")):
                return p_style.get(qn("w:val"))
            return None
        return None

    def _build_numbering_index(self) -> dict[str, int]:
        index: dict[str, int] = {}
        for definition in self.numbering_definitions():
            if definition.level0_style:
                index.setdefault(definition.level0_style, definition.num_id)
        logger.debug(f"Indexed {len(index)} list styles with numbering definitions")
        return index

    def find_numbering_id(self, style_ref: str) -> Optional[int]:
        """Find the numbering instance whose level 0 is bound to ``style_ref``.

        The style-to-numbering mapping is computed on first use and reused
        for the lifetime of the model.

        Returns
        -------
        int or None
            The ``w:numId`` to reference, or None when no definition matches

        """
        if not style_ref:
            return None
        if self._numbering_index is None:
            self._numbering_index = self._build_numbering_index()
        return self._numbering_index.get(self.resolve_style(style_ref))

    @staticmethod
    def set_numbering(paragraph: Paragraph, level: int, num_id: int) -> None:
        """Write ``w:numPr`` (level and numbering instance) into the paragraph properties."""
        num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
        num_pr.get_or_add_ilvl().val = level
        num_pr.get_or_add_numId().val = num_id

    # ------------------------------------------------------------------
    # Metadata and output
    # ------------------------------------------------------------------

    def set_creator(self, creator: Optional[str]) -> None:
        """Record the creating application in the core properties."""
        if creator:
            self.document.core_properties.last_modified_by = creator

    def save(self, output) -> None:
        """Save the document to a path or binary stream."""
        self.document.save(output)
