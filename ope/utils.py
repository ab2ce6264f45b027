"""
Utility functions for OPE byte strings.
"""

from typing import Iterable


def bytes_to_int(data: bytes) -> int:
    """Interpret bytes as an unsigned big-endian integer."""
    return int.from_bytes(data, "big")


def int_to_fixed_bytes(value: int, width: int) -> bytes:
    """
    Encode a non-negative integer as exactly `width` big-endian bytes.

    Shorter encodings are left-padded with zeros; wider ones keep only
    the low `width` bytes.

    Args:
        value: Non-negative integer
        width: Output length in bytes

    Returns:
        Big-endian byte string of length `width`
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    if width < 0:
        raise ValueError("width must be non-negative")
    return (value & ((1 << (8 * width)) - 1)).to_bytes(width, "big")


def compare(c1: bytes, c2: bytes) -> int:
    """
    Compare two ciphertexts as unsigned byte strings.

    Returns:
        -1, 0 or 1
    """
    # bytes comparison in Python is already unsigned and lexicographic
    if c1 < c2:
        return -1
    if c1 > c2:
        return 1
    return 0


def in_range(value: bytes, low: bytes, high: bytes) -> bool:
    """Check low <= value <= high under ciphertext ordering."""
    return compare(value, low) >= 0 and compare(value, high) <= 0


def range_filter(ciphertexts: Iterable[bytes], low: bytes, high: bytes) -> list[bytes]:
    """
    Select the ciphertexts that fall inside an inclusive ciphertext range.

    `low` and `high` are the encryptions of the range bounds under the same
    key that produced `ciphertexts`.

    Args:
        ciphertexts: Ciphertexts to scan
        low: Encrypted lower bound
        high: Encrypted upper bound

    Returns:
        Matching ciphertexts, in input order
    """
    return [c for c in ciphertexts if in_range(c, low, high)]


def to_hex(data: bytes) -> str:
    """Lower-case hex string for display."""
    return data.hex()
