"""
Frame Writer

Accumulates a stream of length-prefixed frames that share one prefix width.
Each framed write produces exactly the bytes of the matching function in
framekit.util.bytes.
"""

from typing import List, Optional

from ..options import FramingOptions
from ..util.bytes import (
    BytesLike,
    Frameable,
    framed_bytes,
    framed_bytes_from_big_int,
    framed_bytes_from_bytes,
    framed_bytes_from_string,
)


class FrameWriter:
    """
    Binary writer for framed streams.

    Frames are appended in call order; to_bytes() returns the whole stream.
    """

    def __init__(self, options: Optional[FramingOptions] = None):
        """
        Initialize writer with an empty buffer.

        Args:
            options: Framing options (default: 4-byte length prefix)
        """
        self.options = options or FramingOptions()
        self._bb: List[int] = []

    @property
    def length_prefix_bytes(self) -> int:
        return self.options.length_prefix_bytes

    def __len__(self) -> int:
        return len(self._bb)

    def u8(self, v: int) -> None:
        """
        Write a single unsigned byte.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.append(v & 0xFF)

    def bytes(self, v: BytesLike) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def framed_bytes(self, v: BytesLike) -> None:
        """Write bytes with a length prefix."""
        self._bb.extend(framed_bytes_from_bytes(v, self.length_prefix_bytes))

    def framed_big_int(self, v: int) -> None:
        """Write a signed integer as length, sign byte and magnitude."""
        self._bb.extend(framed_bytes_from_big_int(v, self.length_prefix_bytes))

    def framed_string(self, s: str) -> None:
        """Write a UTF-8 string with a length prefix."""
        self._bb.extend(framed_bytes_from_string(s, self.length_prefix_bytes))

    def framed(self, v: Frameable) -> None:
        """Write bytes, an int or a str, choosing the frame by type."""
        self._bb.extend(framed_bytes(v, self.length_prefix_bytes))

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
