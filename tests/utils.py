"""Helpers for inspecting rendered .docx output in tests."""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from io import BytesIO
from pathlib import Path

import pytest
from docx import Document as DocxDocument
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls, qn


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


@contextmanager
def isolated_root_logger():
    """Restore root and md2docx logger state after the CLI reconfigures logging."""
    root = logging.getLogger()
    package = logging.getLogger("md2docx")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)
        package.setLevel(package_level)


def load_docx(data: bytes):
    """Open rendered bytes as a python-docx Document."""
    return DocxDocument(BytesIO(data))


def body_paragraphs(docx_doc):
    """Paragraphs of the document body, excluding table cell paragraphs."""
    return list(docx_doc.paragraphs)


def run_elements(paragraph):
    """All ``w:r`` elements of a paragraph, including those inside hyperlinks."""
    return paragraph._p.xpath("./w:r | ./w:hyperlink/w:r")


def run_text(run_element) -> str:
    """Concatenated ``w:t`` text of a run element."""
    return "".join(t.text or "" for t in run_element.iter(qn("w:t")))


def break_count(element) -> int:
    """Number of ``w:br`` elements below ``element``."""
    return len(list(element.iter(qn("w:br"))))


def paragraph_style_id(paragraph):
    """The raw ``w:pStyle`` value of a paragraph, or None."""
    p_pr = paragraph._p.pPr
    if p_pr is None or p_pr.pStyle is None:
        return None
    return p_pr.pStyle.val


def numbering_of(paragraph):
    """``(ilvl, numId)`` written on a paragraph, or None without ``w:numPr``."""
    p_pr = paragraph._p.pPr
    if p_pr is None or p_pr.numPr is None:
        return None
    num_pr = p_pr.numPr
    return num_pr.ilvl.val, num_pr.numId.val


def text_count(element) -> int:
    """Number of ``w:t`` elements below ``element``."""
    return len(list(element.iter(qn("w:t"))))


def numbering_element(document):
    """Return the ``w:numbering`` element of a python-docx document, skipping when it has none."""
    try:
        return document.part.numbering_part._element
    except NotImplementedError:
        pytest.skip("default template has no numbering part")


def add_numbering(document, abstract_id, num_id, level0_style=None):
    """Register an abstract definition and a numbering instance bound to ``level0_style``."""
    p_style = f'<w:pStyle w:val="{level0_style}"/>' if level0_style else ""
    element = numbering_element(document)
    element.append(
        parse_xml(
            f'<w:abstractNum {nsdecls("w")} w:abstractNumId="{abstract_id}">'
            f'<w:lvl w:ilvl="0">{p_style}</w:lvl>'
            f"</w:abstractNum>"
        )
    )
    element.append(
        parse_xml(f'<w:num {nsdecls("w")} w:numId="{num_id}"><w:abstractNumId w:val="{abstract_id}"/></w:num>')
    )
