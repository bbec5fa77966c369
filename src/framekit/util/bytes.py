"""
Big-endian byte conversions and length-prefixed framing.

Wire format (all integers big-endian):

    bytes/text frame:      [length_prefix_bytes: N][N bytes payload]
    signed-integer frame:  [length_prefix_bytes: M][1 byte sign][M bytes magnitude]

The signed-integer prefix counts the magnitude only, never the sign byte.
This keeps the frames byte-compatible with the Go and TypeScript encoders.
"""

from typing import Union

from ..runtime.errors import (
    MalformedEncodingError,
    OverflowRangeError,
    RangeViolationError,
    UnsupportedInputTypeError,
)

BytesLike = Union[bytes, bytearray, memoryview]
Frameable = Union[bytes, bytearray, memoryview, int, str]

DEFAULT_LENGTH_PREFIX_BYTES = 4


def _is_integer(v: object) -> bool:
    # bool is an int subclass but never a valid integer input here
    return isinstance(v, int) and not isinstance(v, bool)


def bytes_to_big_int(data: BytesLike) -> int:
    """
    Interpret bytes as an unsigned big-endian integer.

    Args:
        data: Bytes to convert; empty input yields 0

    Returns:
        The resulting non-negative integer
    """
    return int.from_bytes(bytes(data), "big")


def big_int_to_byte_array(value: int) -> bytes:
    """
    Convert a non-negative integer to its minimal big-endian byte form.

    Zero encodes as a single 0x00 byte, never as an empty sequence.

    Args:
        value: Integer to convert

    Returns:
        Big-endian bytes without leading zero bytes

    Raises:
        RangeViolationError: If value is negative or not an integer
    """
    if not _is_integer(value):
        raise RangeViolationError(
            f"big_int_to_byte_array requires an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise RangeViolationError("big_int_to_byte_array only supports non-negative values")
    if value == 0:
        return b"\x00"
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def int_to_bytes(i: int, byte_length: int) -> bytes:
    """
    Convert a non-negative integer to exactly byte_length big-endian bytes.

    The result is left-padded with zeros. A value that does not fit is
    rejected, it is never truncated.

    Args:
        i: Integer to convert
        byte_length: Number of output bytes, must be positive

    Returns:
        Big-endian bytes of length byte_length

    Raises:
        RangeViolationError: If i is negative or not an integer, or byte_length is not positive
        OverflowRangeError: If i does not fit in byte_length bytes
    """
    if not _is_integer(byte_length) or byte_length <= 0:
        raise RangeViolationError("int_to_bytes: byte_length must be a positive integer",
                                  details={"byte_length": byte_length})
    if not _is_integer(i):
        raise RangeViolationError(
            f"int_to_bytes requires an exact integer, got {type(i).__name__}"
        )
    if i < 0:
        raise RangeViolationError("int_to_bytes only supports non-negative integers")
    if i >> (8 * byte_length):
        raise OverflowRangeError(
            "int_to_bytes: input does not fit in the requested byte length",
            details={"value": i, "byte_length": byte_length},
        )
    return i.to_bytes(byte_length, "big")


def concat_bytes(*arrays: BytesLike) -> bytes:
    """Concatenate any number of byte strings into one, preserving order."""
    return b"".join(bytes(a) for a in arrays)


def framed_bytes_from_bytes(data: BytesLike, length_prefix_bytes: int) -> bytes:
    """
    Prefix data with its big-endian length.

    Args:
        data: Payload to frame
        length_prefix_bytes: Width of the length prefix in bytes

    Returns:
        Length prefix followed by the payload

    Raises:
        OverflowRangeError: If len(data) does not fit in length_prefix_bytes
    """
    payload = bytes(data)
    return concat_bytes(int_to_bytes(len(payload), length_prefix_bytes), payload)


def framed_bytes_from_big_int(value: int, length_prefix_bytes: int) -> bytes:
    """
    Frame a signed integer as length, sign byte and magnitude.

    The length prefix measures the magnitude bytes only. The sign byte is
    0 for non-negative values and 1 for negative values.

    Args:
        value: Signed integer to frame
        length_prefix_bytes: Width of the length prefix in bytes

    Returns:
        Framed bytes
    """
    if not _is_integer(value):
        raise RangeViolationError(
            f"framed_bytes_from_big_int requires an integer, got {type(value).__name__}"
        )
    is_negative = 1 if value < 0 else 0
    magnitude = big_int_to_byte_array(-value if is_negative else value)
    return concat_bytes(
        int_to_bytes(len(magnitude), length_prefix_bytes),
        bytes([is_negative]),
        magnitude,
    )


def framed_bytes_from_string(text: str, length_prefix_bytes: int) -> bytes:
    """Frame the UTF-8 encoding of text."""
    if not isinstance(text, str):
        raise UnsupportedInputTypeError(
            f"framed_bytes_from_string requires a str, got {type(text).__name__}"
        )
    try:
        encoded = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedEncodingError("string is not encodable as UTF-8", cause=e) from e
    return framed_bytes_from_bytes(encoded, length_prefix_bytes)


def framed_bytes(value: Frameable, length_prefix_bytes: int = DEFAULT_LENGTH_PREFIX_BYTES) -> bytes:
    """
    Frame bytes, a signed integer or a string depending on the input type.

    Args:
        value: bytes-like, int or str
        length_prefix_bytes: Width of the length prefix (default 4)

    Returns:
        Framed bytes

    Raises:
        UnsupportedInputTypeError: For any other input type, bool included
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return framed_bytes_from_bytes(value, length_prefix_bytes)
    elif _is_integer(value):
        return framed_bytes_from_big_int(value, length_prefix_bytes)
    elif isinstance(value, str):
        return framed_bytes_from_string(value, length_prefix_bytes)
    raise UnsupportedInputTypeError(
        f"framed_bytes: unsupported input type {type(value).__name__}"
    )


__all__ = [
    "DEFAULT_LENGTH_PREFIX_BYTES",
    "bytes_to_big_int",
    "big_int_to_byte_array",
    "int_to_bytes",
    "concat_bytes",
    "framed_bytes_from_bytes",
    "framed_bytes_from_big_int",
    "framed_bytes_from_string",
    "framed_bytes",
]
