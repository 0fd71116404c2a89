#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the htmlmark library.

This module defines the exception classes raised while loading HTML input,
building the document tree and converting it to Markdown.

Exception Hierarchy
-------------------
- HtmlMarkError (base exception)

  - ValidationError (parameter/input validation)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - ParsingError (the tree builder rejected the markup)

  - DependencyError (requested tree builder is not installed)

Numeric attribute coercion (``colspan``, ``start``) never raises; invalid
values fall back to their defaults.

"""

from typing import Any


class HtmlMarkError(Exception):
    """Base exception class for all htmlmark-specific errors.

    Catching this will catch every error raised by the library.

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


class ValidationError(HtmlMarkError):
    """Exception raised for invalid input parameters.

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


class FileError(HtmlMarkError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(HtmlMarkError):
    """Exception raised when the HTML cannot be parsed into a tree.

    Conversion is all-or-nothing: when this is raised no Markdown has been
    produced.

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


class DependencyError(HtmlMarkError):
    """Exception raised when an optional tree builder is not installed.

    Parameters
    ----------
    message : str
        Description of the problem
    missing_packages : list[str], optional
        Distribution names that need to be installed

    """

    def __init__(
        self,
        message: str,
        missing_packages: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error."""
        self.missing_packages = missing_packages or []
        if self.missing_packages:
            message = f"{message} Install with: pip install {' '.join(self.missing_packages)}"
        super().__init__(message, original_error)
