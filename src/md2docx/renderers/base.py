#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that AST renderers inherit from.
The BaseRenderer provides a consistent interface for turning the md2docx AST
into an output document.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from md2docx.ast import Document
from md2docx.exceptions import InvalidOptionsError
from md2docx.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the AST to the specified output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or IO[bytes]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to bytes.

        Creates a BytesIO buffer, calls render() with it, and returns the
        buffer contents.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        bytes
            Rendered document as bytes

        Examples
        --------
            >>> from md2docx.renderers.docx import DocxRenderer
            >>> from md2docx.ast import Document, Paragraph, Text
            >>> doc = Document(children=[Paragraph(children=[Text("test")])])
            >>> content = DocxRenderer().render_to_bytes(doc)
            >>> assert content.startswith(b'PK')  # DOCX is a ZIP file

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
