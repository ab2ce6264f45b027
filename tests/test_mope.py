"""Tests for the MOPE key and cipher."""

import secrets

import pytest

from ope.errors import (
    InvalidKeyError,
    KeyDecodeError,
    KeyDecodeTruncatedError,
    NullInputError,
    PlaintextTooLargeError,
)
from ope.fast import FastOpeCipher, FastOpeKey, FastOpeParams
from ope.mope import MopeCipher, MopeConfig, MopeKey


def inner_key() -> FastOpeKey:
    return FastOpeKey(FastOpeParams(n=1 << 31, alpha=0.25, e=0.125, k=0x0123456789ABCDEF))


class TestMopeKey:
    """Tests for MopeKey."""

    def test_zero_offset_is_inner(self):
        """With offset 0 the plaintext is only widened to w bytes."""
        inner = inner_key()
        key = MopeKey(inner, 2, 0)
        assert key.encrypt(b"\x12\x34") == inner.encrypt(b"\x12\x34")
        assert key.encrypt(b"\x05") == inner.encrypt(b"\x00\x05")

    def test_offset_shift(self):
        inner = inner_key()
        key = MopeKey(inner, 2, 0x0100)
        # 0x1234 - 0x0100 = 0x1134
        assert key.encrypt(b"\x12\x34") == inner.encrypt(b"\x11\x34")
        # 0x0005 - 0x0100 wraps to 0xff05
        assert key.encrypt(b"\x00\x05") == inner.encrypt(b"\xff\x05")

    def test_roundtrip(self):
        key = MopeKey(inner_key(), 4, 0xDEADBEEF)
        for plaintext in [b"\x00\x00\x00\x00", b"\xff\xff\xff\xff", b"\xde\xad\xbe\xef", b"\x01\x02\x03\x04"]:
            assert key.decrypt(key.encrypt(plaintext)) == plaintext

    def test_short_plaintext_widened(self):
        key = MopeKey(inner_key(), 4, 12345)
        assert key.decrypt(key.encrypt(b"\x07")) == b"\x00\x00\x00\x07"
        assert key.decrypt(key.encrypt(b"")) == b"\x00\x00\x00\x00"

    def test_order_within_non_wrapping_range(self):
        key = MopeKey(inner_key(), 2, 0x4000)
        # [0x4000, 0xffff] maps to [0x0000, 0xbfff]: no wrap inside
        values = [0x4000, 0x4001, 0x8000, 0xC000, 0xFFFF]
        ciphertexts = [key.encrypt(v.to_bytes(2, "big")) for v in values]
        for lo, hi in zip(ciphertexts, ciphertexts[1:]):
            assert lo < hi

    def test_order_breaks_at_wrap(self):
        """The offset's wrap point is where ciphertext order restarts."""
        key = MopeKey(inner_key(), 2, 0x4000)
        below = key.encrypt((0x3FFF).to_bytes(2, "big"))
        above = key.encrypt((0x4000).to_bytes(2, "big"))
        assert below > above

    def test_properties(self):
        inner = inner_key()
        key = MopeKey(inner, 3, 77)
        assert key.key is inner
        assert key.plaintext_bytes == 3
        assert key.offset == 77
        assert key.max == 1 << 24

    def test_repr_hides_offset(self):
        assert "987654" not in repr(MopeKey(inner_key(), 4, 987654))


class TestMopeKeyErrors:
    """Test error handling."""

    def test_plaintext_too_large(self):
        key = MopeKey(inner_key(), 2, 0)
        with pytest.raises(PlaintextTooLargeError):
            key.encrypt(b"\x00\x00\x01")

    def test_decrypted_too_large(self):
        """Inner plaintext wider than w is rejected on decrypt."""
        inner = inner_key()
        key = MopeKey(inner, 2, 0)
        with pytest.raises(PlaintextTooLargeError):
            key.decrypt(inner.encrypt(b"\x00\x00\x01"))

    def test_invalid_width(self):
        with pytest.raises(InvalidKeyError):
            MopeKey(inner_key(), 0, 0)

    def test_invalid_offset(self):
        with pytest.raises(InvalidKeyError):
            MopeKey(inner_key(), 1, 256)
        with pytest.raises(InvalidKeyError):
            MopeKey(inner_key(), 1, -1)

    def test_null(self):
        key = MopeKey(inner_key(), 2, 0)
        with pytest.raises(NullInputError):
            key.encrypt(None)
        with pytest.raises(NullInputError):
            key.decrypt(None)


class TestMopeCipher:
    """Tests for MopeCipher."""

    def test_default_width(self):
        cipher = MopeCipher(FastOpeCipher())
        assert cipher.plaintext_bytes == 8
        key = cipher.generate_key()
        assert key.plaintext_bytes == 8
        assert 0 <= key.offset < 1 << 64

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            MopeConfig(plaintext_bytes=0)

    def test_generated_roundtrip(self):
        key = MopeCipher(FastOpeCipher(), MopeConfig(plaintext_bytes=4)).generate_key()
        for _ in range(10):
            plaintext = secrets.token_bytes(4)
            assert key.decrypt(key.encrypt(plaintext)) == plaintext

    def test_encode_layout(self):
        inner = inner_key()
        key = MopeKey(inner, 2, 0x0102)
        encoded = key.encode_key()
        assert encoded[0:4] == b"\x00\x00\x00\x02"
        assert encoded[4:6] == b"\x01\x02"
        assert encoded[6:] == inner.encode_key()

    def test_encode_pads_offset(self):
        encoded = MopeKey(inner_key(), 4, 5).encode_key()
        assert encoded[4:8] == b"\x00\x00\x00\x05"

    def test_decode_roundtrip(self):
        cipher = MopeCipher(FastOpeCipher(), MopeConfig(plaintext_bytes=2))
        key = cipher.generate_key()
        decoded = cipher.decode_key(key.encode_key())
        assert decoded == key
        assert decoded.offset == key.offset

        plaintext = b"\xab\xcd"
        assert decoded.encrypt(plaintext) == key.encrypt(plaintext)
        assert decoded.decrypt(key.encrypt(plaintext)) == plaintext

    def test_decode_uses_encoded_width(self):
        """The width comes from the encoding, not from the decoding cipher's config."""
        key = MopeCipher(FastOpeCipher(), MopeConfig(plaintext_bytes=3)).generate_key()
        decoded = MopeCipher(FastOpeCipher()).decode_key(key.encode_key())
        assert decoded.plaintext_bytes == 3

    def test_decode_truncated(self):
        encoded = MopeKey(inner_key(), 4, 1).encode_key()
        cipher = MopeCipher(FastOpeCipher())
        with pytest.raises(KeyDecodeTruncatedError):
            cipher.decode_key(encoded[:3])
        with pytest.raises(KeyDecodeTruncatedError):
            cipher.decode_key(encoded[:6])
        # inner key cut short
        with pytest.raises(KeyDecodeTruncatedError):
            cipher.decode_key(encoded[:-1])

    def test_decode_invalid_width(self):
        encoded = b"\x00\x00\x00\x00" + inner_key().encode_key()
        with pytest.raises(KeyDecodeError):
            MopeCipher(FastOpeCipher()).decode_key(encoded)

    def test_nested(self):
        """MOPE can wrap another MOPE cipher."""
        cipher = MopeCipher(
            MopeCipher(FastOpeCipher(), MopeConfig(plaintext_bytes=2)),
            MopeConfig(plaintext_bytes=2),
        )
        key = cipher.generate_key()
        decoded = cipher.decode_key(key.encode_key())
        assert decoded.decrypt(key.encrypt(b"\x12\x34")) == b"\x12\x34"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
