"""
Frame Reader

Decodes the length-prefixed wire format written by FrameWriter and the
framed_bytes_* functions:

    bytes/text frame:      [prefix: N][N bytes payload]
    signed-integer frame:  [prefix: M][sign byte][M bytes magnitude]
"""

import builtins
import logging
from typing import Optional

from ..options import FramingOptions
from ..runtime.errors import MalformedEncodingError, RangeViolationError, TruncatedFrameError
from ..util.bytes import BytesLike, bytes_to_big_int

logger = logging.getLogger(__name__)


class FrameReader:
    """
    Binary reader for framed streams.

    All reads advance an internal offset; reading past the end raises
    TruncatedFrameError.
    """

    def __init__(self, buf: BytesLike, options: Optional[FramingOptions] = None):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
            options: Framing options (default: 4-byte length prefix)
        """
        self._buf = builtins.bytes(buf)
        self._off = 0
        self.options = options or FramingOptions()

    @property
    def length_prefix_bytes(self) -> int:
        return self.options.length_prefix_bytes

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        return self._off

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def u8(self) -> int:
        """
        Read a single unsigned byte.

        Returns:
            Unsigned 8-bit integer value
        """
        if self._off >= len(self._buf):
            raise TruncatedFrameError("attempting to read beyond end of buffer",
                                      details={"offset": self._off})
        val = self._buf[self._off]
        self._off += 1
        return val

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length

        Raises:
            RangeViolationError: If n is negative
            TruncatedFrameError: If fewer than n bytes remain
        """
        if n < 0:
            raise RangeViolationError(
                f"cannot read a negative number of bytes: {n}", details={"offset": self._off}
            )
        if self._off + n > len(self._buf):
            raise TruncatedFrameError(
                f"attempting to read {n} bytes beyond end of buffer",
                details={"offset": self._off, "requested": n, "remaining": self.remaining},
            )
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def length_prefix(self) -> int:
        """Read a big-endian length prefix of the configured width."""
        return bytes_to_big_int(self.bytes(self.length_prefix_bytes))

    def framed_bytes(self) -> builtins.bytes:
        """
        Read a length-prefixed byte payload.

        Returns:
            The payload, without its prefix
        """
        n = self.length_prefix()
        logger.debug(f"framed_bytes: {n} byte payload at offset {self._off}")
        return self.bytes(n)

    def framed_big_int(self) -> int:
        """
        Read a signed-integer frame.

        The prefix gives the magnitude length; the sign byte follows it and
        is not counted.

        Returns:
            The decoded signed integer

        Raises:
            MalformedEncodingError: If the sign byte is neither 0 nor 1
        """
        n = self.length_prefix()
        sign = self.u8()
        if sign not in (0, 1):
            raise MalformedEncodingError(
                f"invalid sign byte 0x{sign:02x}", details={"offset": self._off - 1}
            )
        magnitude = bytes_to_big_int(self.bytes(n))
        return -magnitude if sign else magnitude

    def framed_string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        raw = self.framed_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedEncodingError("string frame is not valid UTF-8", cause=e) from e
