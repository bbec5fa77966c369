"""
FrameWriter / FrameReader tests.

Covers byte-exact parity with the framing functions and decoding of every
frame kind, including truncated and malformed streams.
"""

import pytest

from framekit.codec import FrameReader, FrameWriter
from framekit.options import FramingOptions
from framekit.runtime.errors import (
    MalformedEncodingError,
    OverflowRangeError,
    RangeViolationError,
    TruncatedFrameError,
)
from framekit.util.bytes import (
    framed_bytes,
    framed_bytes_from_big_int,
    framed_bytes_from_bytes,
    framed_bytes_from_string,
)

pytestmark = pytest.mark.unit


class TestFrameWriter:

    def test_defaults_to_four_byte_prefix(self):
        writer = FrameWriter()
        assert writer.length_prefix_bytes == 4
        writer.framed_bytes(b"\xaa")
        assert writer.to_bytes() == b"\x00\x00\x00\x01\xaa"

    def test_matches_framing_functions(self, two_byte_options):
        writer = FrameWriter(two_byte_options)
        writer.framed_bytes(b"\xaa\xbb")
        writer.framed_big_int(-258)
        writer.framed_string("héllo")
        writer.framed(7)

        expected = (
            framed_bytes_from_bytes(b"\xaa\xbb", 2)
            + framed_bytes_from_big_int(-258, 2)
            + framed_bytes_from_string("héllo", 2)
            + framed_bytes(7, 2)
        )
        assert writer.to_bytes() == expected
        assert len(writer) == len(expected)

    def test_raw_writes(self):
        writer = FrameWriter()
        writer.u8(0x1FF)
        writer.bytes(b"\x01\x02")
        assert writer.to_bytes() == b"\xff\x01\x02"

    def test_overflow_propagates(self):
        writer = FrameWriter(FramingOptions(length_prefix_bytes=1))
        with pytest.raises(OverflowRangeError):
            writer.framed_bytes(b"\x00" * 256)
        assert writer.to_bytes() == b""


class TestFrameReader:

    def test_negative_read_is_rejected_without_moving_offset(self):
        reader = FrameReader(b"abcdef")
        assert reader.bytes(3) == b"abc"
        with pytest.raises(RangeViolationError):
            reader.bytes(-2)
        assert reader.offset == 3
        assert reader.bytes(3) == b"def"

    def test_recovers_width_length_and_payload(self):
        for width in (1, 2, 4, 8):
            payload = bytes(range(200))
            frame = framed_bytes_from_bytes(payload, width)
            reader = FrameReader(frame, FramingOptions(length_prefix_bytes=width))
            assert reader.length_prefix_bytes == width
            assert reader.length_prefix() == len(payload)
            assert reader.bytes(len(payload)) == payload
            assert reader.eof

    def test_reads_stream_in_order(self, two_byte_options):
        writer = FrameWriter(two_byte_options)
        writer.framed_bytes(b"")
        writer.framed_big_int(0)
        writer.framed_big_int(-(2 ** 100))
        writer.framed_string("€")
        writer.framed_bytes(b"tail")

        reader = FrameReader(writer.to_bytes(), two_byte_options)
        assert reader.framed_bytes() == b""
        assert reader.framed_big_int() == 0
        assert reader.framed_big_int() == -(2 ** 100)
        assert reader.framed_string() == "€"
        assert reader.framed_bytes() == b"tail"
        assert reader.eof
        assert reader.remaining == 0

    def test_signed_scenario(self):
        reader = FrameReader(b"\x02\x01\x01\x02", FramingOptions(length_prefix_bytes=1))
        assert reader.framed_big_int() == -258

    def test_truncated_prefix(self):
        reader = FrameReader(b"\x00", FramingOptions(length_prefix_bytes=2))
        with pytest.raises(TruncatedFrameError):
            reader.framed_bytes()

    def test_truncated_payload(self):
        reader = FrameReader(b"\x00\x05abc", FramingOptions(length_prefix_bytes=2))
        with pytest.raises(TruncatedFrameError) as exc_info:
            reader.framed_bytes()
        assert exc_info.value.details["requested"] == 5
        assert exc_info.value.details["remaining"] == 3

    def test_missing_sign_byte(self):
        reader = FrameReader(b"\x01", FramingOptions(length_prefix_bytes=1))
        with pytest.raises(TruncatedFrameError):
            reader.framed_big_int()

    def test_invalid_sign_byte(self):
        reader = FrameReader(b"\x01\x02\x05", FramingOptions(length_prefix_bytes=1))
        with pytest.raises(MalformedEncodingError):
            reader.framed_big_int()

    def test_invalid_utf8(self):
        reader = FrameReader(b"\x02\xc3\x28", FramingOptions(length_prefix_bytes=1))
        with pytest.raises(MalformedEncodingError):
            reader.framed_string()

    def test_u8_past_end(self):
        reader = FrameReader(b"")
        assert reader.eof
        with pytest.raises(TruncatedFrameError):
            reader.u8()
