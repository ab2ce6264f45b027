"""Tests for order-preserving primitive encodings."""

import math

import pytest

from ope import encoder
from ope.errors import InvalidInputLengthError, NullInputError


def assert_strictly_sorted(encoded: list[bytes]) -> None:
    for lo, hi in zip(encoded, encoded[1:]):
        assert lo < hi


class TestIntegers:
    """Tests for offset-binary integer encodings."""

    @pytest.mark.parametrize(
        "width, encode, decode",
        [
            (1, encoder.encode_int8, encoder.decode_int8),
            (2, encoder.encode_int16, encoder.decode_int16),
            (4, encoder.encode_int32, encoder.decode_int32),
            (8, encoder.encode_int64, encoder.decode_int64),
        ],
    )
    def test_bounds_and_order(self, width, encode, decode):
        low = -(1 << (8 * width - 1))
        high = (1 << (8 * width - 1)) - 1
        values = [low, low + 1, -1, 0, 1, high - 1, high]

        encoded = [encode(v) for v in values]
        assert all(len(e) == width for e in encoded)
        assert_strictly_sorted(encoded)
        assert [decode(e) for e in encoded] == values

        assert encode(low) == b"\x00" * width
        assert encode(high) == b"\xff" * width

    def test_int16_known_values(self):
        assert encoder.encode_int16(0) == b"\x80\x00"
        assert encoder.encode_int16(-1) == b"\x7f\xff"
        assert encoder.encode_int16(1000) == b"\x83\xe8"

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            encoder.encode_int8(128)
        with pytest.raises(ValueError):
            encoder.encode_int16(-32769)

    def test_wrong_length(self):
        with pytest.raises(InvalidInputLengthError) as excinfo:
            encoder.decode_int32(b"\x00\x00")
        assert excinfo.value.expected == 4
        assert excinfo.value.found == 2

    def test_null(self):
        with pytest.raises(NullInputError):
            encoder.decode_int64(None)


class TestFloats:
    """Tests for IEEE float encodings."""

    def test_double_order(self):
        values = [-math.inf, -1e300, -2.5, -1e-300, 0.0, 1e-300, 2.5, 1e300, math.inf]
        encoded = [encoder.encode_double(v) for v in values]
        assert all(len(e) == 8 for e in encoded)
        assert_strictly_sorted(encoded)
        assert [encoder.decode_double(e) for e in encoded] == values

    def test_float_order(self):
        values = [-3.5, -1.0, -0.25, 0.0, 0.25, 1.0, 3.5]
        encoded = [encoder.encode_float(v) for v in values]
        assert all(len(e) == 4 for e in encoded)
        assert_strictly_sorted(encoded)
        assert [encoder.decode_float(e) for e in encoded] == values

    def test_sign_handling(self):
        assert encoder.encode_double(0.0) == b"\x80" + b"\x00" * 7
        # -1.0 is 0xbff0000000000000; every bit inverted
        assert encoder.encode_double(-1.0) == bytes.fromhex("400fffffffffffff")

    def test_wrong_length(self):
        with pytest.raises(InvalidInputLengthError):
            encoder.decode_float(b"\x00" * 8)
        with pytest.raises(InvalidInputLengthError):
            encoder.decode_double(b"\x00" * 4)


class TestOtherTypes:
    """Tests for bool, char and string encodings."""

    def test_bool(self):
        assert encoder.encode_bool(False) < encoder.encode_bool(True)
        assert encoder.decode_bool(encoder.encode_bool(True)) is True
        assert encoder.decode_bool(encoder.encode_bool(False)) is False
        assert encoder.decode_bool(b"\x02") is True

    def test_bool_wrong_length(self):
        with pytest.raises(InvalidInputLengthError):
            encoder.decode_bool(b"")

    def test_char(self):
        assert encoder.encode_char("A") == b"\x00A"
        assert encoder.encode_char("€") == b"\x20\xac"
        chars = ["\x00", "A", "Z", "a", "é", "€", "\uffff"]
        encoded = [encoder.encode_char(c) for c in chars]
        assert_strictly_sorted(encoded)
        assert [encoder.decode_char(e) for e in encoded] == chars

    def test_char_invalid(self):
        with pytest.raises(ValueError):
            encoder.encode_char("ab")
        with pytest.raises(ValueError):
            encoder.encode_char("\U0001f600")
        with pytest.raises(InvalidInputLengthError):
            encoder.decode_char(b"A")

    def test_str(self):
        assert encoder.encode_str("héllo") == "héllo".encode("utf-8")
        assert encoder.decode_str(encoder.encode_str("héllo")) == "héllo"
        assert encoder.encode_str(None) is None
        assert encoder.decode_str(None) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
