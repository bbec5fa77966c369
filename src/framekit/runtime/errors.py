"""
Framekit Error Model

This module provides the error handling framework for framekit. Every failure
is raised eagerly at the point of the invalid input; nothing is retried and no
partial result is ever returned.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Type
from enum import IntEnum


class ErrorCode(IntEnum):
    """Framekit error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Range errors (100-199)
    RANGE_VIOLATION = 100
    VALUE_OVERFLOW = 101

    # Parameter errors (200-299)
    UNSUPPORTED_PARAMETER = 200
    UNSUPPORTED_TYPE = 201

    # Encoding errors (300-399)
    MALFORMED_ENCODING = 300
    TRUNCATED_FRAME = 301

    # Environment errors (400-499)
    ENVIRONMENT_UNAVAILABLE = 400


class FramekitError(Exception):
    """
    Base class for all framekit errors.

    Carries a machine-readable code plus optional details and cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        """
        Initialize a framekit error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FramekitError':
        """Create error from dictionary representation."""
        return error_from_dict(data)


class RangeViolationError(FramekitError, ValueError):
    """Negative or otherwise out-of-range numeric input."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.RANGE_VIOLATION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class OverflowRangeError(RangeViolationError):
    """Value does not fit in the requested fixed width."""

    def __init__(self, message: str = "Value does not fit in the requested byte length",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.VALUE_OVERFLOW, details, cause)


class UnsupportedParameterError(FramekitError, ValueError):
    """Algorithm selector or output length outside the supported set."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNSUPPORTED_PARAMETER,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class UnsupportedInputTypeError(UnsupportedParameterError, TypeError):
    """Input of a type the framing dispatcher cannot encode."""

    def __init__(self, message: str = "Unsupported input type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_TYPE, details, cause)


class MalformedEncodingError(FramekitError, ValueError):
    """Input that is not a valid encoding (base64, hex, UTF-8, frame)."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MALFORMED_ENCODING,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class TruncatedFrameError(MalformedEncodingError):
    """Frame ends before the number of bytes its prefix announces."""

    def __init__(self, message: str = "Frame is truncated",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.TRUNCATED_FRAME, details, cause)


class EnvironmentUnavailableError(FramekitError, RuntimeError):
    """No usable hashing or encoding engine in the current runtime."""

    def __init__(self, message: str = "Engine not available in this environment",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.ENVIRONMENT_UNAVAILABLE, details, cause)


_CODE_TO_CLASS: Dict[ErrorCode, Type[FramekitError]] = {
    ErrorCode.RANGE_VIOLATION: RangeViolationError,
    ErrorCode.VALUE_OVERFLOW: OverflowRangeError,
    ErrorCode.UNSUPPORTED_PARAMETER: UnsupportedParameterError,
    ErrorCode.UNSUPPORTED_TYPE: UnsupportedInputTypeError,
    ErrorCode.MALFORMED_ENCODING: MalformedEncodingError,
    ErrorCode.TRUNCATED_FRAME: TruncatedFrameError,
    ErrorCode.ENVIRONMENT_UNAVAILABLE: EnvironmentUnavailableError,
}


def error_from_dict(data: Dict[str, Any]) -> FramekitError:
    """
    Create the most specific error for a serialized error dict.

    Args:
        data: Dictionary as produced by FramekitError.to_dict()

    Returns:
        Error instance of the class matching the code
    """
    message = data.get("message", "Unknown error")
    details = data.get("details")
    code_value = data.get("code", ErrorCode.UNKNOWN)

    try:
        code = ErrorCode(code_value)
    except ValueError:
        code = ErrorCode.UNKNOWN

    error_cls = _CODE_TO_CLASS.get(code)
    if error_cls is None:
        return FramekitError(message, code, details)
    if code in (ErrorCode.RANGE_VIOLATION, ErrorCode.UNSUPPORTED_PARAMETER, ErrorCode.MALFORMED_ENCODING):
        return error_cls(message, code, details)
    return error_cls(message, details)


__all__ = [
    "ErrorCode",
    "FramekitError",
    "RangeViolationError",
    "OverflowRangeError",
    "UnsupportedParameterError",
    "UnsupportedInputTypeError",
    "MalformedEncodingError",
    "TruncatedFrameError",
    "EnvironmentUnavailableError",
    "error_from_dict",
]
