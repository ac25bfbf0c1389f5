#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the splitdiff library.

This module defines specialized exception classes for the error conditions
that can occur while comparing two texts or presenting the result. The
engine itself is total over text input; the only engine-side failures are
the resource bound and cancellation.

Exception Hierarchy
-------------------
- SplitDiffError (base exception)

  - ValidationError (option validation)
    - ConfigError (unreadable or malformed configuration files)

  - ResourceLimitExceeded (alignment table too large)

  - DiffCancelled (in-flight comparison aborted)

  - DependencyError (missing optional packages)

"""

from typing import Any


class SplitDiffError(Exception):
    """Base exception class for all splitdiff-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(SplitDiffError):
    """Exception raised for invalid options or parameters.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The underlying parse or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class ResourceLimitExceeded(SplitDiffError):
    """Exception raised when an alignment would exceed the configured pair bound.

    The alignment table grows with the product of both input sizes. Rather
    than hang on very large inputs, the engine refuses to build a table
    whose pair count is above ``limit``.

    Parameters
    ----------
    original_size : int
        Number of original lines that would enter the table
    modified_size : int
        Number of modified lines that would enter the table
    limit : int
        The configured maximum pair count
    message : str, optional
        Custom error message

    Attributes
    ----------
    original_size : int
    modified_size : int
    limit : int

    """

    def __init__(self, original_size: int, modified_size: int, limit: int, message: str | None = None):
        """Initialize the resource limit error with the offending sizes."""
        if message is None:
            message = (
                f"Comparing {original_size} x {modified_size} lines needs "
                f"{original_size * modified_size:,} line pairs, above the limit of {limit:,}"
            )
        super().__init__(message)
        self.original_size = original_size
        self.modified_size = modified_size
        self.limit = limit

    @property
    def pair_count(self) -> int:
        """Number of line pairs the rejected comparison would have needed."""
        return self.original_size * self.modified_size


class DiffCancelled(SplitDiffError):
    """Exception raised when an in-flight comparison is cancelled.

    Cancellation is all-or-nothing: no partial alignment is returned.
    """

    def __init__(self, message: str = "Comparison cancelled"):
        """Initialize the cancellation error."""
        super().__init__(message)


class DependencyError(SplitDiffError):
    """Exception raised when an optional dependency is not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring the dependency
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import error that triggered this exception

    Attributes
    ----------
    feature_name : str
    missing_packages : list[tuple[str, str]]
    install_command : str

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.original_import_error = original_import_error
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            if install_command:
                message += f". Install with: {install_command}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.install_command = install_command
