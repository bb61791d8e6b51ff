#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2docx library.

This module defines specialized exception classes for the error conditions
that can occur while parsing markdown and rendering Word documents.

Exception Hierarchy
-------------------
- Md2DocxError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (markdown parsing failures)

  - RenderingError (output generation failures)
    - UnsupportedNodeError (node kind without a rendering rule)
    - InvariantViolationError (traversal/dispatch contract broken)
    - OutputWriteError (file write failures)

  - NumberingDefinitionNotFoundError (recoverable, logged during rendering)

  - DependencyError (missing/incompatible packages)

"""

from __future__ import annotations

from typing import Any


class Md2DocxError(Exception):
    """Base exception class for all md2docx-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2DocxError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2DocxError):
    """Exception raised when markdown parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2DocxError):
    """Exception raised when output rendering fails.

    A failure partway through rendering leaves the output document partially
    populated; nothing is rolled back.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeError(RenderingError):
    """Exception raised for a node kind the DOCX renderer has no rule for.

    Only raised when the renderer runs with ``on_unsupported_node="fail"``.

    Parameters
    ----------
    node_type : str
        Kind of the offending node

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the unsupported node error."""
        if message is None:
            message = f"Unsupported node type: {node_type}"
        super().__init__(message, rendering_stage="dispatch")
        self.node_type = node_type


class InvariantViolationError(RenderingError):
    """Exception raised when the enter/leave event stream breaks a rendering invariant.

    Examples are a table row arriving outside of a table, or a hard break
    requested on a paragraph that has no run yet. These indicate a mismatch
    between traversal and dispatch rather than a problem with the data.
    """

    def __init__(self, message: str):
        """Initialize the invariant violation error."""
        super().__init__(message, rendering_stage="dispatch")


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class NumberingDefinitionNotFoundError(Md2DocxError):
    """No numbering definition declares the given list style at level 0.

    The renderer treats this as recoverable: it is logged and the paragraph
    keeps its list style without explicit numbering.

    Parameters
    ----------
    style : str
        Style reference that had no matching numbering definition

    """

    def __init__(self, style: str, message: str | None = None):
        """Initialize the numbering lookup error."""
        if message is None:
            message = f"No numbering definition found for list style '{style}'"
        super().__init__(message)
        self.style = style


class DependencyError(Md2DocxError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name} has version mismatches: {mismatch_str}")

            packages_to_install = [f"{name}{spec}" if spec else name for name, spec in missing_packages]
            packages_to_install.extend(f"{name}{required}" for name, required, _ in version_mismatches)
            if packages_to_install:
                message_parts.append("Install with: pip install " + " ".join(f"'{p}'" for p in packages_to_install))

            message = ". ".join(message_parts)

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
