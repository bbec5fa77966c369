"""
URL-safe base64 and hex helpers.

The URL-safe codec is a character substitution over standard base64:
'+' becomes '-', '/' becomes '_' and '=' padding is dropped.
"""

import base64
import binascii
import string

from ..runtime.errors import MalformedEncodingError
from .bytes import BytesLike

_URL_SAFE_ALPHABET = frozenset(string.ascii_letters + string.digits + "-_")
_HEX_DIGITS = frozenset(string.hexdigits)

_TO_URL_SAFE = str.maketrans({"+": "-", "/": "_", "=": None})
_FROM_URL_SAFE = str.maketrans({"-": "+", "_": "/"})


def enc_url_safe(data: BytesLike) -> str:
    """
    Encode bytes as URL-safe base64 without padding.

    Args:
        data: Bytes to encode

    Returns:
        String over [A-Za-z0-9_-]
    """
    return base64.b64encode(bytes(data)).decode("ascii").translate(_TO_URL_SAFE)


def dec_url_safe(data: str) -> bytes:
    """
    Decode an unpadded URL-safe base64 string.

    Args:
        data: URL-safe base64 text

    Returns:
        Decoded bytes

    Raises:
        MalformedEncodingError: On characters outside the URL-safe alphabet
            or a length that no base64 encoding can have
    """
    bad = sorted(set(data) - _URL_SAFE_ALPHABET)
    if bad:
        raise MalformedEncodingError(
            "dec_url_safe: invalid characters in input", details={"characters": bad}
        )
    if len(data) % 4 == 1:
        raise MalformedEncodingError(
            "dec_url_safe: impossible base64 length", details={"length": len(data)}
        )

    b64 = data.translate(_FROM_URL_SAFE)
    b64 += "=" * (-len(b64) % 4)
    try:
        return base64.b64decode(b64, validate=True)
    except binascii.Error as e:
        raise MalformedEncodingError("dec_url_safe: malformed base64", cause=e) from e


def hex_to_bytes(text: str) -> bytes:
    """
    Decode a plain hex string (no 0x prefix, no whitespace).

    Raises:
        MalformedEncodingError: On odd length or non-hex characters
    """
    if len(text) % 2 != 0:
        raise MalformedEncodingError("hex length must be even", details={"length": len(text)})
    if not _HEX_DIGITS.issuperset(text):
        raise MalformedEncodingError("hex string contains non-hex characters")
    return bytes.fromhex(text)


def bytes_to_hex(data: BytesLike) -> str:
    """Lower-case hex encoding of data."""
    return bytes(data).hex()


__all__ = [
    "enc_url_safe",
    "dec_url_safe",
    "hex_to_bytes",
    "bytes_to_hex",
]
