#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the textcompare library.

The comparison engine itself has no fallible operations: any text input
produces a result. The exceptions below belong to the layers around it,
i.e. decoding options and configuration, reading input files, and writing
reports.

Exception Hierarchy
-------------------
- TextCompareError (base exception)

  - ValidationError (parameter/payload validation)
    - ConfigurationError (malformed DiffOptions or config content)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, undecodable content)

  - RenderingError (report generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class TextCompareError(Exception):
    """Base exception class for all textcompare-specific errors.

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


class ValidationError(TextCompareError):
    """Exception raised for invalid input parameters or payloads.

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


class ConfigurationError(ValidationError):
    """Exception raised when diff options cannot be decoded.

    Raised at construction time only: once a valid ``DiffOptions`` value
    exists, no engine operation raises it.

    Parameters
    ----------
    message : str
        Description of what is malformed
    key : str, optional
        The offending option key
    value : any, optional
        The offending value
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name=key, parameter_value=value, original_error=original_error)
        self.key = key
        self.value = value


class FileError(TextCompareError):
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


class FileAccessError(FileError):
    """Exception raised when an input file cannot be read.

    This includes permission errors and content that is not valid UTF-8.
    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(TextCompareError):
    """Exception raised when a diff report cannot be produced."""


class OutputWriteError(RenderingError):
    """Exception raised when a rendered report cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        Destination that could not be written
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path
