"""Runtime helpers for framekit"""

from .errors import (
    ErrorCode,
    FramekitError,
    RangeViolationError,
    OverflowRangeError,
    UnsupportedParameterError,
    UnsupportedInputTypeError,
    MalformedEncodingError,
    TruncatedFrameError,
    EnvironmentUnavailableError,
    error_from_dict,
)

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
