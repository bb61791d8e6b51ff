#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/parsers/base.py
"""Base class for document parsers.

A parser turns some input (path, bytes, stream or text) into an md2docx AST
Document.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2docx.ast import Document
from md2docx.exceptions import InvalidOptionsError, ValidationError
from md2docx.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

_FALLBACK_ENCODINGS = ("utf-8-sig", "latin-1")


def decode_text(data: bytes) -> str:
    """Decode bytes as UTF-8 (with or without BOM), falling back to latin-1."""
    for encoding in _FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug(f"Input is not valid {encoding}, trying next encoding")
    return data.decode("utf-8", errors="replace")


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method handles these input types:
    - str: an existing file path, otherwise the content itself
    - Path: File path to read
    - IO[bytes]: File-like object in binary mode
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Document:
        """Parse the input document into an AST.

        Raises
        ------
        ParsingError
            If parsing fails
        DependencyError
            If required dependencies are not installed
        ValidationError
            If input data is invalid or inaccessible

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], bytes]) -> str:
        """Load text from any supported input type.

        A string is read as a file when it names an existing file and is
        otherwise taken to be the content itself.
        """
        if isinstance(input_data, bytes):
            return decode_text(input_data)
        if isinstance(input_data, Path):
            try:
                return decode_text(input_data.read_bytes())
            except OSError as e:
                raise ValidationError(
                    f"Cannot read input file: {input_data}",
                    parameter_name="input_data",
                    parameter_value=str(input_data),
                    original_error=e,
                ) from e
        if isinstance(input_data, str):
            # Path components are limited to 255 chars on Linux; long strings are content
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return decode_text(path.read_bytes())
                except OSError as e:
                    logger.debug(f"Input string is not a readable path ({e}); treating it as content")
            return input_data

        data = input_data.read()
        return data if isinstance(data, str) else decode_text(data)
