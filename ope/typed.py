"""
Typed encrypt/decrypt helpers.

Free functions that compose any Key's encrypt()/decrypt() with the
order-preserving encodings in ope.encoder:

    ct = encrypt_int16(key, -100)
    assert decrypt_int16(key, ct) == -100

Ciphertexts are only comparable when produced by the same key from values
of the same type.
"""

from . import encoder
from .protocols import Key


def encrypt_bool(key: Key, value: bool) -> bytes:
    return key.encrypt(encoder.encode_bool(value))


def decrypt_bool(key: Key, ciphertext: bytes) -> bool:
    return encoder.decode_bool(key.decrypt(ciphertext))


def encrypt_int8(key: Key, value: int) -> bytes:
    return key.encrypt(encoder.encode_int8(value))


def decrypt_int8(key: Key, ciphertext: bytes) -> int:
    return encoder.decode_int8(key.decrypt(ciphertext))


def encrypt_int16(key: Key, value: int) -> bytes:
    return key.encrypt(encoder.encode_int16(value))


def decrypt_int16(key: Key, ciphertext: bytes) -> int:
    return encoder.decode_int16(key.decrypt(ciphertext))


def encrypt_int32(key: Key, value: int) -> bytes:
    return key.encrypt(encoder.encode_int32(value))


def decrypt_int32(key: Key, ciphertext: bytes) -> int:
    return encoder.decode_int32(key.decrypt(ciphertext))


def encrypt_int64(key: Key, value: int) -> bytes:
    return key.encrypt(encoder.encode_int64(value))


def decrypt_int64(key: Key, ciphertext: bytes) -> int:
    return encoder.decode_int64(key.decrypt(ciphertext))


def encrypt_float(key: Key, value: float) -> bytes:
    """Encrypt as a 32-bit float."""
    return key.encrypt(encoder.encode_float(value))


def decrypt_float(key: Key, ciphertext: bytes) -> float:
    return encoder.decode_float(key.decrypt(ciphertext))


def encrypt_double(key: Key, value: float) -> bytes:
    return key.encrypt(encoder.encode_double(value))


def decrypt_double(key: Key, ciphertext: bytes) -> float:
    return encoder.decode_double(key.decrypt(ciphertext))


def encrypt_char(key: Key, value: str) -> bytes:
    return key.encrypt(encoder.encode_char(value))


def decrypt_char(key: Key, ciphertext: bytes) -> str:
    return encoder.decode_char(key.decrypt(ciphertext))


def encrypt_str(key: Key, value: str) -> bytes:
    """
    Encrypt a UTF-8 string.

    Ordering between strings only holds for equal byte lengths or within
    one ciphertext block; use fixed-width values for range queries.
    """
    return key.encrypt(encoder.encode_str(value))


def decrypt_str(key: Key, ciphertext: bytes) -> str:
    return encoder.decode_str(key.decrypt(ciphertext))
