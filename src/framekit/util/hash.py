"""
Hash Functions

Dispatch facade over SHA-2, SHA-3, SHAKE and cSHAKE. The algorithms
themselves come from hashlib, except cSHAKE which hashlib does not provide
and which is computed with pycryptodome.

Every function is a pure function of (data, parameters). The async variants
run the same call in the event loop's default executor.
"""

import asyncio
import hashlib
import logging
from functools import partial
from typing import TYPE_CHECKING, Callable, Dict, Tuple

from Crypto.Hash import cSHAKE128, cSHAKE256

from ..runtime.errors import EnvironmentUnavailableError, UnsupportedParameterError
from .bytes import BytesLike

if TYPE_CHECKING:
    from ..options import XofOptions

logger = logging.getLogger(__name__)

SHA2_BITS: Tuple[int, ...] = (256, 384, 512)
SHA3_BITS: Tuple[int, ...] = (224, 256, 384, 512)
SHAKE_BITS: Tuple[int, ...] = (128, 256)
CSHAKE_BITS: Tuple[int, ...] = (128, 256)

_SHA2_NAMES: Dict[int, str] = {256: "sha256", 384: "sha384", 512: "sha512"}
_SHA3_NAMES: Dict[int, str] = {224: "sha3_224", 256: "sha3_256", 384: "sha3_384", 512: "sha3_512"}
_SHAKE_NAMES: Dict[int, str] = {128: "shake_128", 256: "shake_256"}
_CSHAKE_MODULES = {128: cSHAKE128, 256: cSHAKE256}


def _new_hash(name: str, data: BytesLike):
    try:
        return hashlib.new(name, bytes(data))
    except ValueError as e:
        # hashlib raises ValueError when OpenSSL/FIPS policy hides an algorithm
        raise EnvironmentUnavailableError(
            f"{name} is not available in this environment", details={"algorithm": name}, cause=e
        ) from e


def _output_bytes(output_length_in_bits: int, family: str) -> int:
    if isinstance(output_length_in_bits, bool) or not isinstance(output_length_in_bits, int):
        raise UnsupportedParameterError(f"{family} output length must be an integer number of bits")
    if output_length_in_bits < 0 or output_length_in_bits % 8 != 0:
        raise UnsupportedParameterError(
            "output length must be a multiple of 8 bits",
            details={"outputLengthInBits": output_length_in_bits},
        )
    return output_length_in_bits // 8


def sha2_hash(data: BytesLike, bits: int) -> bytes:
    """
    Compute a SHA-2 digest.

    Args:
        data: Input data to hash
        bits: 256, 384 or 512

    Returns:
        Digest of bits // 8 bytes

    Raises:
        UnsupportedParameterError: For any other bit length
    """
    name = _SHA2_NAMES.get(bits)
    if name is None:
        raise UnsupportedParameterError(f"Unsupported SHA-2 bit length: {bits}",
                                        details={"supported": list(SHA2_BITS)})
    logger.debug(f"sha2_hash: {name} over {len(data)} bytes")
    return _new_hash(name, data).digest()


def sha3_hash(data: BytesLike, bits: int) -> bytes:
    """
    Compute a SHA-3 digest.

    Args:
        data: Input data to hash
        bits: 224, 256, 384 or 512

    Returns:
        Digest of bits // 8 bytes
    """
    name = _SHA3_NAMES.get(bits)
    if name is None:
        raise UnsupportedParameterError(f"Unsupported SHA-3 bit length: {bits}",
                                        details={"supported": list(SHA3_BITS)})
    logger.debug(f"sha3_hash: {name} over {len(data)} bytes")
    return _new_hash(name, data).digest()


def shake_hash(data: BytesLike, bits: int, output_length_in_bits: int) -> bytes:
    """
    Compute a SHAKE extendable output.

    Args:
        data: Input data to hash
        bits: 128 or 256
        output_length_in_bits: Requested output length, a multiple of 8

    Returns:
        output_length_in_bits // 8 bytes of output
    """
    name = _SHAKE_NAMES.get(bits)
    if name is None:
        raise UnsupportedParameterError(f"Unsupported SHAKE bit length: {bits}",
                                        details={"supported": list(SHAKE_BITS)})
    out_len = _output_bytes(output_length_in_bits, "SHAKE")
    logger.debug(f"shake_hash: {name} over {len(data)} bytes, {out_len} output bytes")
    return _new_hash(name, data).digest(out_len)


def cshake_hash(data: BytesLike, bits: int, output_length_in_bits: int,
                function_name: str = "", customization: str = "") -> bytes:
    """
    Compute a cSHAKE extendable output (NIST SP 800-185).

    With both function_name and customization empty the result is exactly
    SHAKE with the same bits and output length.

    Args:
        data: Input data to hash
        bits: 128 or 256
        output_length_in_bits: Requested output length, a multiple of 8
        function_name: Function-name string N
        customization: Customization string S

    Returns:
        output_length_in_bits // 8 bytes of output
    """
    module = _CSHAKE_MODULES.get(bits)
    if module is None:
        raise UnsupportedParameterError(f"Unsupported cSHAKE bit length: {bits}",
                                        details={"supported": list(CSHAKE_BITS)})
    out_len = _output_bytes(output_length_in_bits, "cSHAKE")
    logger.debug(
        f"cshake_hash: cSHAKE{bits} over {len(data)} bytes, {out_len} output bytes, "
        f"N={function_name!r} S={customization!r}"
    )
    if out_len == 0:
        return b""

    # new() does not take N; _new(data, custom, function) is the SP 800-185 entry point
    xof = module._new(bytes(data), customization.encode("utf-8"), function_name.encode("utf-8"))
    return xof.read(out_len)


def xof_hash(data: BytesLike, options: "XofOptions") -> bytes:
    """Run SHAKE or cSHAKE as described by a validated XofOptions."""
    if options.is_plain_shake:
        return shake_hash(data, options.bits, options.output_length_bits)
    return cshake_hash(data, options.bits, options.output_length_bits,
                       options.function_name, options.customization)


async def _run_in_executor(fn: Callable[..., bytes], *args) -> bytes:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(fn, *args))


async def sha2_hash_async(data: BytesLike, bits: int) -> bytes:
    """Async variant of sha2_hash."""
    return await _run_in_executor(sha2_hash, bytes(data), bits)


async def sha3_hash_async(data: BytesLike, bits: int) -> bytes:
    """Async variant of sha3_hash."""
    return await _run_in_executor(sha3_hash, bytes(data), bits)


async def shake_hash_async(data: BytesLike, bits: int, output_length_in_bits: int) -> bytes:
    """Async variant of shake_hash."""
    return await _run_in_executor(shake_hash, bytes(data), bits, output_length_in_bits)


async def cshake_hash_async(data: BytesLike, bits: int, output_length_in_bits: int,
                            function_name: str = "", customization: str = "") -> bytes:
    """Async variant of cshake_hash."""
    return await _run_in_executor(cshake_hash, bytes(data), bits, output_length_in_bits,
                                  function_name, customization)


__all__ = [
    "SHA2_BITS",
    "SHA3_BITS",
    "SHAKE_BITS",
    "CSHAKE_BITS",
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
