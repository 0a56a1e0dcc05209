"""Structured exception hierarchy for the response helpers.

Key components:
- **ErrorCode enum**: Standardized error identifiers for programmatic handling
- **Severity enum**: Error classification for monitoring and alerting
- **JsonResponseError**: Base exception with rich context
- **Specialized exceptions**: Serialization, transformer and configuration
  failures

None of these errors are retried or converted into a fallback body. A
serialization failure in particular is a programming defect: it aborts the
response currently being emitted and propagates to the caller.
"""

from enum import Enum

from jsonresponse.core.types import ErrorContext


class ErrorCode(Enum):
    """Standardized error codes raised by the library."""

    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    """The response body could not be represented as JSON."""

    TRANSFORMER_ERROR = "TRANSFORMER_ERROR"
    """A transformer is not usable or returned a malformed result."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """Settings describe something the library cannot build."""


class Severity(Enum):
    """Severity levels for library errors."""

    LOW = "LOW"
    """Low severity errors that don't significantly impact functionality."""

    MEDIUM = "MEDIUM"
    """Medium severity errors that may affect some features but not critical ops."""

    HIGH = "HIGH"
    """High severity errors impacting critical functionality."""

    CRITICAL = "CRITICAL"
    """Critical errors, the current response cannot be produced at all."""


class JsonResponseError(Exception):
    """Base exception class for all library exceptions.

    Args:
        error_code: Unique identifier for the error type (string or ErrorCode enum)
        message: Human-readable error message
        severity: Severity level of the error (defaults to MEDIUM)
        context: Additional context information about the error
        cause: The original exception that caused this error
    """

    def __init__(
        self,
        error_code: str | ErrorCode,
        message: str,
        severity: Severity = Severity.MEDIUM,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.error_code = (
            error_code.value if isinstance(error_code, ErrorCode) else error_code
        )
        self.message = message
        self.severity = severity
        self.context = context or {}
        self.cause = cause

        super().__init__(message)
        if cause:
            self.__cause__ = cause

    @property
    def is_expected(self) -> bool:
        """Determine if this is an expected error based on severity.

        Returns:
            bool: True if the error is expected (LOW or MEDIUM severity)
        """
        return self.severity in (Severity.LOW, Severity.MEDIUM)

    @property
    def should_alert(self) -> bool:
        """Determine if this error should trigger alerts.

        Returns:
            bool: True if the error should trigger alerts (HIGH or CRITICAL severity)
        """
        return self.severity in (Severity.HIGH, Severity.CRITICAL)

    def __str__(self) -> str:
        """Return a string representation of the exception.

        Returns:
            str: A formatted string containing the error code and message
        """
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return a detailed representation of the exception.

        Returns:
            str: A string showing the class name, error code, message, severity,
                and context
        """
        class_name = self.__class__.__name__
        context_str = f", context={self.context}" if self.context else ""
        return (
            f"{class_name}(error_code='{self.error_code}', "
            f"message='{self.message}', severity={self.severity.value}{context_str})"
        )


class SerializationError(JsonResponseError):
    """Raised when a response body cannot be encoded as JSON.

    Unsupported types, cyclic structures and out-of-range integers all end
    up here. The error is never swallowed: nothing is written to the
    response writer once it is raised.

    Args:
        message: Description of the serialization failure
        context: Additional context information about the error
        cause: The original encoder exception
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.SERIALIZATION_ERROR, message, Severity.CRITICAL, context, cause
        )


class TransformerError(JsonResponseError):
    """Raised when a transformer cannot be installed or misbehaves.

    Args:
        message: Description of the transformer problem
        context: Additional context information about the error
        cause: The original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.TRANSFORMER_ERROR, message, Severity.HIGH, context, cause
        )


class ConfigurationError(JsonResponseError):
    """Raised when settings cannot be turned into runtime options.

    Args:
        message: Description of the configuration problem
        context: Additional context information about the error
        cause: The original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.CONFIGURATION_ERROR, message, Severity.MEDIUM, context, cause
        )
