#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdreflow library.

This module defines specialized exception classes for the error conditions
that can occur while parsing Markdown into a document tree and while
rendering that tree back to CommonMark.

Exception Hierarchy
-------------------
- MdreflowError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - ParsingError (source text could not be turned into a tree)

  - RenderingError (output generation failures)
    - UnknownNodeKindError (node outside the closed kind set)
    - PrefixImbalanceError (block prefix push/pop mismatch)

  - FileError (file access and I/O)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

Rendering errors signal a broken tree contract. They are never caught inside
the library and a render that raises produces no partial output.

"""

from typing import Any


class MdreflowError(Exception):
    """Base exception class for all mdreflow-specific errors.

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


class ValidationError(MdreflowError):
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


class ParsingError(MdreflowError):
    """Exception raised when Markdown source cannot be turned into a tree.

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


class RenderingError(MdreflowError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnknownNodeKindError(RenderingError):
    """Exception raised when a node outside the known kind set reaches the renderer.

    Parameters
    ----------
    node : Any
        The offending node

    Attributes
    ----------
    node_type : str
        Class name of the offending node

    """

    def __init__(self, node: Any):
        """Initialize the error from the offending node."""
        self.node_type = type(node).__name__
        super().__init__(f"Cannot render node of unknown kind '{self.node_type}'", rendering_stage="dispatch")


class PrefixImbalanceError(RenderingError):
    """Exception raised when block prefix pushes and pops do not pair up.

    Parameters
    ----------
    message : str
        Description of the imbalance
    depth : int
        Number of prefix segments on the stack when the error was detected

    """

    def __init__(self, message: str, depth: int = 0):
        """Initialize the prefix imbalance error."""
        super().__init__(message, rendering_stage="prefix")
        self.depth = depth


class FileError(MdreflowError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the file that caused the error
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error."""
        super().__init__(message, original_error)
        self.file_path = file_path


class OutputWriteError(FileError):
    """Exception raised when rendered output cannot be written."""


class DependencyError(MdreflowError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    original_import_error : ImportError, optional
        The first ImportError raised while checking dependencies

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with an installation hint."""
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches or []

        requirements = [f"{name}{spec}" for name, spec in missing_packages]
        requirements.extend(f"{name}{spec}" for name, spec, _installed in self.version_mismatches)
        self.install_command = f"pip install {' '.join(repr(r) for r in requirements)}" if requirements else ""

        parts = [f"'{converter_name}' requires additional packages."]
        if missing_packages:
            parts.append("Missing: " + ", ".join(name for name, _spec in missing_packages) + ".")
        for name, required, installed in self.version_mismatches:
            parts.append(f"{name} {installed} is installed but {required} is required.")
        if self.install_command:
            parts.append(f"Install with: {self.install_command}")

        super().__init__(" ".join(parts), original_error=original_import_error)
