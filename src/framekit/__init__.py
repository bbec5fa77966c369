"""
Framekit - binary framing, URL-safe base64 and hash dispatch helpers

Provides big-endian integer/byte conversions, a length-prefixed frame format
for bytes, signed integers and text, URL-safe base64 coding, and a single
call surface over SHA-2, SHA-3, SHAKE and cSHAKE.
"""

# Conversion, framing, coding and hashing helpers
from .util import *

# Stream codec
from .codec import FrameReader, FrameWriter

# Options
from .options import FramingOptions, XofOptions

# Errors
from .runtime.errors import *

__version__ = "1.0.0"
__all__ = [
    # Numeric helpers
    "big_mod_pos",
    "big_cmp",

    # Byte conversion and framing
    "DEFAULT_LENGTH_PREFIX_BYTES",
    "bytes_to_big_int",
    "big_int_to_byte_array",
    "int_to_bytes",
    "concat_bytes",
    "framed_bytes_from_bytes",
    "framed_bytes_from_big_int",
    "framed_bytes_from_string",
    "framed_bytes",

    # Coding
    "enc_url_safe",
    "dec_url_safe",
    "hex_to_bytes",
    "bytes_to_hex",

    # Hashing
    "sha2_hash",
    "sha3_hash",
    "shake_hash",
    "cshake_hash",
    "xof_hash",
    "sha2_hash_async",
    "sha3_hash_async",
    "shake_hash_async",
    "cshake_hash_async",

    # Stream codec
    "FrameReader",
    "FrameWriter",

    # Options
    "FramingOptions",
    "XofOptions",

    # Errors
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
