"""
DataMind Exception Hierarchy.

This module defines the exception hierarchy for the DataMind analysis engine,
providing clear categorization of errors and standardized error handling across
all components.

Note that bad cell values never raise: they degrade to missing or categorical
classifications. Exceptions here cover configuration, loading, precondition
violations on the engine's inputs, and export failures.

Exception Severity Levels:
    - FATAL: Stop all processing immediately
    - CRITICAL: Stop processing of the current dataset
    - RECOVERABLE: Log error and continue
    - WARNING: Log warning, processing continues
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorSeverity(Enum):
    """
    Classify error severity for handling decisions.

    Attributes:
        FATAL: Unrecoverable error, stop all processing
        CRITICAL: Dataset-level error, stop processing this dataset
        RECOVERABLE: Operation-level error, continue with other work
        WARNING: Non-critical issue, log and continue
    """
    FATAL = "fatal"
    CRITICAL = "critical"
    RECOVERABLE = "recoverable"
    WARNING = "warning"


class DataMindException(Exception):
    """
    Base exception for all DataMind errors with enhanced context.

    Attributes:
        message (str): Human-readable error message
        severity (ErrorSeverity): Error severity level
        details (Dict[str, Any]): Additional context (file path, column, etc.)
        original_exception (Optional[Exception]): Original exception if wrapping

    Example:
        >>> try:
        ...     frame = pd.read_csv(path)
        ... except Exception as e:
        ...     raise DataMindException(
        ...         "Data loading failed",
        ...         severity=ErrorSeverity.CRITICAL,
        ...         details={'file': 'sales.csv'},
        ...         original_exception=e
        ...     )
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.RECOVERABLE,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize DataMind exception.

        Args:
            message: Human-readable error description
            severity: Error severity level (default: RECOVERABLE)
            details: Additional context dictionary
            original_exception: Original exception if this wraps another error
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for logging/reporting.

        Returns:
            Dictionary containing exception details suitable for JSON serialization
        """
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'severity': self.severity.value,
            'details': self.details,
            'original_error': str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Configuration Errors (Fatal)
# ============================================================================

class ConfigError(DataMindException):
    """
    Configuration file errors (fatal - stop all processing).

    Raised when:
    - Configuration file not found
    - Invalid YAML syntax
    - Invalid configuration structure

    Attributes:
        field (Optional[str]): Specific config field that caused error
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'field': field} if field else {}
        )
        self.field = field


class YAMLSizeError(ConfigError):
    """
    YAML file too large.

    Example:
        >>> raise YAMLSizeError(
        ...     "Config file exceeds 1MB limit",
        ...     file_size=1500000,
        ...     max_size=1048576
        ... )
    """

    def __init__(self, message: str, file_size: Optional[int] = None, max_size: Optional[int] = None):
        super().__init__(message)
        self.details.update({
            'file_size': file_size,
            'max_size': max_size
        })


class ConfigValidationError(ConfigError):
    """
    Configuration values don't match the expected schema.

    Example:
        >>> raise ConfigValidationError(
        ...     "Unknown mode tie-break: 'random'",
        ...     field="mode_tie_break",
        ...     expected="last_seen, smallest",
        ...     actual="random"
        ... )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None
    ):
        super().__init__(message, field)
        self.details.update({
            'expected': expected,
            'actual': actual
        })


# ============================================================================
# Data Loading Errors (Critical)
# ============================================================================

class DataLoadError(DataMindException):
    """
    Data file loading errors (critical - stop processing this dataset).

    Raised when the loading collaborator cannot read or decode a file.

    Attributes:
        file_path (str): Path to file that failed to load
    """

    def __init__(
        self,
        message: str,
        file_path: str,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            details={'file_path': file_path},
            original_exception=original_exception
        )
        self.file_path = file_path


class UnsupportedFormatError(DataLoadError):
    """
    File format not supported by the loader.

    Example:
        >>> raise UnsupportedFormatError(
        ...     "sales.xml",
        ...     format="xml",
        ...     supported_formats=["csv", "json"]
        ... )
    """

    def __init__(self, file_path: str, format: str, supported_formats: list):
        super().__init__(
            f"Unsupported file format '{format}'. Supported: {', '.join(supported_formats)}",
            file_path
        )
        self.details.update({
            'format': format,
            'supported_formats': supported_formats
        })


# ============================================================================
# Engine Input Errors
# ============================================================================

class InvalidInputError(DataMindException):
    """
    Engine precondition violated.

    Raised when:
    - A dataset declares duplicate column names
    - A row carries a field that is not a declared column
    - A column is profiled over a dataset with zero rows

    Attributes:
        operation (Optional[str]): Engine operation that rejected the input
    """

    def __init__(self, message: str, operation: Optional[str] = None, column: Optional[str] = None):
        details = {'operation': operation}
        if column is not None:
            details['column'] = column
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            details=details
        )
        self.operation = operation
        self.column = column


class ColumnNotFoundError(DataMindException):
    """
    Requested column is not part of the analysed dataset.

    Example:
        >>> raise ColumnNotFoundError(
        ...     column="revenue",
        ...     available_columns=["id", "score"]
        ... )
    """

    def __init__(self, column: str, available_columns: list):
        super().__init__(
            f"Column '{column}' not found in report. Available: {', '.join(available_columns)}",
            severity=ErrorSeverity.RECOVERABLE,
            details={
                'column': column,
                'available_columns': available_columns
            }
        )
        self.column = column


# ============================================================================
# Reporter Errors
# ============================================================================

class ReporterError(DataMindException):
    """
    Report export errors.

    Raised when a Markdown or JSON export cannot be written.
    """

    def __init__(
        self,
        message: str,
        report_type: Optional[str] = None,
        output_path: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message,
            severity=ErrorSeverity.RECOVERABLE,
            details={
                'report_type': report_type,
                'output_path': output_path
            },
            original_exception=original_exception
        )
