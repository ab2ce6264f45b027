"""
Order-preserving byte encodings for primitive values.

Every encoding maps values to fixed-width (strings: variable-width) unsigned
big-endian byte strings such that a <= b implies encode(a) <= encode(b)
under plain bytes comparison. No cryptography happens here; the output is
what gets fed to Key.encrypt().

Encodings:
- bool: 0x00 / 0x01
- signed integers: offset binary (value - MIN), big-endian
- floats: IEEE 754 big-endian; non-negative values get the sign bit set,
  negative values have every bit inverted
- char: UTF-16 code unit, big-endian
- str: UTF-8
"""

import struct

from .errors import InvalidInputLengthError, NullInputError


def _check_length(value: bytes, expected: int) -> None:
    if value is None:
        raise NullInputError()
    if len(value) != expected:
        raise InvalidInputLengthError(expected, len(value))


def encode_bool(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def decode_bool(value: bytes) -> bool:
    _check_length(value, 1)
    return value[0] != 0


def encode_int(value: int, width: int) -> bytes:
    """
    Encode a signed integer of `width` bytes in offset binary.

    Args:
        value: Integer in [-2^(8w-1), 2^(8w-1))
        width: Width in bytes

    Returns:
        `width` bytes, order-preserving
    """
    low = -(1 << (8 * width - 1))
    if not low <= value < -low:
        raise ValueError(f"{value} does not fit in a signed {8 * width}-bit integer")
    return (value - low).to_bytes(width, "big")


def decode_int(value: bytes, width: int) -> int:
    """Inverse of encode_int()."""
    _check_length(value, width)
    return int.from_bytes(value, "big") - (1 << (8 * width - 1))


def encode_int8(value: int) -> bytes:
    return encode_int(value, 1)


def decode_int8(value: bytes) -> int:
    return decode_int(value, 1)


def encode_int16(value: int) -> bytes:
    return encode_int(value, 2)


def decode_int16(value: bytes) -> int:
    return decode_int(value, 2)


def encode_int32(value: int) -> bytes:
    return encode_int(value, 4)


def decode_int32(value: bytes) -> int:
    return decode_int(value, 4)


def encode_int64(value: int) -> bytes:
    return encode_int(value, 8)


def decode_int64(value: bytes) -> int:
    return decode_int(value, 8)


def _encode_ieee(raw: bytes) -> bytes:
    if raw[0] & 0x80 == 0:
        return bytes([raw[0] | 0x80]) + raw[1:]
    return bytes(b ^ 0xFF for b in raw)


def _decode_ieee(value: bytes) -> bytes:
    if value[0] & 0x80:
        return bytes([value[0] & 0x7F]) + value[1:]
    return bytes(b ^ 0xFF for b in value)


def encode_float(value: float) -> bytes:
    """Encode as a 32-bit IEEE float (values are rounded to single precision)."""
    return _encode_ieee(struct.pack(">f", value))


def decode_float(value: bytes) -> float:
    _check_length(value, 4)
    return struct.unpack(">f", _decode_ieee(value))[0]


def encode_double(value: float) -> bytes:
    """Encode as a 64-bit IEEE double."""
    return _encode_ieee(struct.pack(">d", value))


def decode_double(value: bytes) -> float:
    _check_length(value, 8)
    return struct.unpack(">d", _decode_ieee(value))[0]


def encode_char(value: str) -> bytes:
    """
    Encode a single character as a 2-byte UTF-16 code unit.

    Characters outside the Basic Multilingual Plane do not fit and raise ValueError.
    """
    if len(value) != 1:
        raise ValueError("char must be a single character")
    code = ord(value)
    if code > 0xFFFF:
        raise ValueError("char must be in the Basic Multilingual Plane")
    return code.to_bytes(2, "big")


def decode_char(value: bytes) -> str:
    _check_length(value, 2)
    return chr(int.from_bytes(value, "big"))


def encode_str(value: str | None) -> bytes | None:
    """UTF-8 encode; None passes through."""
    if value is None:
        return None
    return value.encode("utf-8")


def decode_str(value: bytes | None) -> str | None:
    if value is None:
        return None
    return bytes(value).decode("utf-8")
