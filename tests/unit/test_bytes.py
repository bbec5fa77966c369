"""
Byte conversion and framing tests.
"""

import pytest

from framekit.runtime.errors import (
    MalformedEncodingError,
    OverflowRangeError,
    RangeViolationError,
    UnsupportedInputTypeError,
)
from framekit.util.bytes import (
    DEFAULT_LENGTH_PREFIX_BYTES,
    big_int_to_byte_array,
    bytes_to_big_int,
    concat_bytes,
    framed_bytes,
    framed_bytes_from_big_int,
    framed_bytes_from_bytes,
    framed_bytes_from_string,
    int_to_bytes,
)

pytestmark = pytest.mark.unit


class TestConversions:
    """Unsigned big-endian conversions."""

    def test_big_int_to_byte_array_scenarios(self):
        assert big_int_to_byte_array(0) == b"\x00"
        assert big_int_to_byte_array(0x0102) == b"\x01\x02"
        with pytest.raises(RangeViolationError):
            big_int_to_byte_array(-1)

    def test_big_int_to_byte_array_has_no_leading_zero(self):
        for v in (1, 0x7F, 0x80, 0xFF, 0x100, 0xFFFF, 2 ** 64, 2 ** 521 - 1):
            out = big_int_to_byte_array(v)
            assert out[0] != 0
            assert bytes_to_big_int(out) == v

    def test_bytes_to_big_int_empty_is_zero(self):
        assert bytes_to_big_int(b"") == 0

    def test_bytes_to_big_int_accepts_bytes_like(self):
        assert bytes_to_big_int(bytearray(b"\x01\x00")) == 256
        assert bytes_to_big_int(memoryview(b"\x01\x00")) == 256

    def test_canonical_round_trip(self):
        for b in (b"\x00", b"\x01", b"\x80\x00", b"\x12\x34\x56\x78\x9a\xbc\xde\xf0\x11"):
            assert big_int_to_byte_array(bytes_to_big_int(b)) == b

    def test_leading_zeros_are_stripped(self):
        assert big_int_to_byte_array(bytes_to_big_int(b"\x00\x00\x01\x02")) == b"\x01\x02"

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_big_int_to_byte_array_rejects_non_integers(self, value):
        with pytest.raises(RangeViolationError):
            big_int_to_byte_array(value)


class TestIntToBytes:
    """Fixed-width conversion."""

    def test_scenarios(self):
        assert int_to_bytes(258, 2) == b"\x01\x02"
        assert int_to_bytes(0, 1) == b"\x00"
        with pytest.raises(OverflowRangeError):
            int_to_bytes(256, 1)

    def test_left_pads(self):
        assert int_to_bytes(1, 4) == b"\x00\x00\x00\x01"

    def test_boundaries(self):
        assert int_to_bytes(0xFFFF, 2) == b"\xff\xff"
        with pytest.raises(OverflowRangeError):
            int_to_bytes(0x10000, 2)

    def test_wide_values_are_exact(self):
        v = 2 ** 100 + 12345
        assert bytes_to_big_int(int_to_bytes(v, 16)) == v

    def test_negative_rejected(self):
        with pytest.raises(RangeViolationError):
            int_to_bytes(-1, 4)

    @pytest.mark.parametrize("value", [1.5, 2.0, True])
    def test_non_exact_integers_rejected(self, value):
        with pytest.raises(RangeViolationError):
            int_to_bytes(value, 4)

    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_width_rejected(self, width):
        with pytest.raises(RangeViolationError):
            int_to_bytes(0, width)

    def test_overflow_is_a_range_violation(self):
        with pytest.raises(RangeViolationError):
            int_to_bytes(2 ** 32, 4)
        with pytest.raises(ValueError):
            int_to_bytes(2 ** 32, 4)


class TestConcat:

    def test_order_and_length(self):
        out = concat_bytes(b"\x01", bytearray(b"\x02\x03"), memoryview(b""), b"\x04")
        assert out == b"\x01\x02\x03\x04"
        assert isinstance(out, bytes)

    def test_no_arguments(self):
        assert concat_bytes() == b""


class TestFraming:
    """Length-prefixed framing."""

    def test_frame_bytes_scenario(self):
        assert framed_bytes_from_bytes(b"\xaa\xbb", 2) == b"\x00\x02\xaa\xbb"

    def test_frame_bytes_overflow(self):
        with pytest.raises(OverflowRangeError):
            framed_bytes_from_bytes(b"\x00" * 256, 1)
        assert framed_bytes_from_bytes(b"\x00" * 255, 1)[:1] == b"\xff"

    def test_frame_signed_int_scenario(self):
        assert framed_bytes_from_big_int(-258, 1) == b"\x02\x01\x01\x02"
        assert framed_bytes_from_big_int(258, 1) == b"\x02\x00\x01\x02"

    def test_signed_length_excludes_sign_byte(self):
        for value in (0, 1, -1, 255, -256, 2 ** 70, -(2 ** 70)):
            frame = framed_bytes_from_big_int(value, 2)
            magnitude = big_int_to_byte_array(abs(value))
            assert int.from_bytes(frame[:2], "big") == len(magnitude)
            assert len(frame) == 2 + 1 + len(magnitude)
            assert frame[2] == (1 if value < 0 else 0)
            assert frame[3:] == magnitude

    def test_signed_int_magnitude_overflow(self):
        with pytest.raises(OverflowRangeError):
            framed_bytes_from_big_int(2 ** (8 * 256), 1)

    def test_frame_text_is_utf8(self):
        assert framed_bytes_from_string("A", 1) == b"\x01A"
        assert framed_bytes_from_string("é", 2) == b"\x00\x02\xc3\xa9"

    def test_frame_text_rejects_lone_surrogate(self):
        with pytest.raises(MalformedEncodingError):
            framed_bytes_from_string("\ud800", 1)

    @pytest.mark.parametrize("value", [b"x", 1, None])
    def test_frame_text_rejects_non_str(self, value):
        with pytest.raises(UnsupportedInputTypeError) as exc_info:
            framed_bytes_from_string(value, 1)
        assert isinstance(exc_info.value, TypeError)


class TestFramedBytesDispatcher:

    def test_dispatch(self):
        assert framed_bytes(b"\xaa", 1) == b"\x01\xaa"
        assert framed_bytes(bytearray(b"\xaa"), 1) == b"\x01\xaa"
        assert framed_bytes(1, 1) == b"\x01\x00\x01"
        assert framed_bytes("A", 1) == b"\x01A"

    def test_default_prefix_is_four_bytes(self):
        assert DEFAULT_LENGTH_PREFIX_BYTES == 4
        assert framed_bytes(b"\xaa") == b"\x00\x00\x00\x01\xaa"

    @pytest.mark.parametrize("value", [True, 1.5, None, [1, 2], {"a": 1}])
    def test_unsupported_types(self, value):
        with pytest.raises(UnsupportedInputTypeError):
            framed_bytes(value, 1)

    def test_unsupported_type_is_a_type_error(self):
        with pytest.raises(TypeError):
            framed_bytes(object())
