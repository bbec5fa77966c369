"""
Byte conversion, framing, coding and hashing helpers.
"""

from .numeric import big_mod_pos, big_cmp
from .bytes import (
    DEFAULT_LENGTH_PREFIX_BYTES,
    bytes_to_big_int,
    big_int_to_byte_array,
    int_to_bytes,
    concat_bytes,
    framed_bytes_from_bytes,
    framed_bytes_from_big_int,
    framed_bytes_from_string,
    framed_bytes,
)
from .coding import enc_url_safe, dec_url_safe, hex_to_bytes, bytes_to_hex
from .hash import (
    sha2_hash,
    sha3_hash,
    shake_hash,
    cshake_hash,
    xof_hash,
    sha2_hash_async,
    sha3_hash_async,
    shake_hash_async,
    cshake_hash_async,
)

__all__ = [
    "big_mod_pos",
    "big_cmp",
    "DEFAULT_LENGTH_PREFIX_BYTES",
    "bytes_to_big_int",
    "big_int_to_byte_array",
    "int_to_bytes",
    "concat_bytes",
    "framed_bytes_from_bytes",
    "framed_bytes_from_big_int",
    "framed_bytes_from_string",
    "framed_bytes",
    "enc_url_safe",
    "dec_url_safe",
    "hex_to_bytes",
    "bytes_to_hex",
    "sha2_hash",
    "sha3_hash",
    "shake_hash",
    "cshake_hash",
    "xof_hash",
    "sha2_hash_async",
    "sha3_hash_async",
    "shake_hash_async",
    "cshake_hash_async",
]
