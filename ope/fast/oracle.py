"""
Pseudorandom interval oracle for Fast-OPE.

Uses SHA-256 as a keyed PRF to pick, for every node of the per-byte binary
tree, a reproducible integer inside that level's interval [fmin[i], fmax[i]).

A node at level i is identified by the i most significant bits of the byte,
so every byte value sharing those bits maps to the same oracle call:

    f(i, x) = SHA-256(k || msb_i(x)) mod (fmax[i] - fmin[i]) + fmin[i]

where k is the seed as 8 big-endian bytes and msb_i(x) is x with its low
8 - i bits cleared.
"""

from Crypto.Hash import SHA256
import struct

from ..errors import OracleError
from .params import FastOpeParams, NUM_LEVELS


class IntervalOracle:
    """
    SHA-256 based interval oracle.

    Deterministic given the seed and parameter tables.
    """

    def __init__(self, params: FastOpeParams):
        """
        Initialize oracle.

        Args:
            params: Fast-OPE parameters holding the seed and interval tables
        """
        self._params = params
        self._seed = struct.pack(">q", params.k)

    @staticmethod
    def truncate(level: int, x: int) -> int:
        """Keep only the `level` most significant bits of byte x."""
        shift = 8 - level
        return (x >> shift) << shift

    def f(self, level: int, x: int) -> int:
        """
        Evaluate the oracle at a tree node.

        Args:
            level: Tree level in [0, 8]
            x: Byte value in [0, 255]; only its top `level` bits are used

        Returns:
            Integer in [fmin[level], fmax[level])
        """
        if not 0 <= level < NUM_LEVELS:
            raise ValueError(f"level must be in [0, {NUM_LEVELS - 1}]")
        if not 0 <= x <= 0xFF:
            raise ValueError("x must be a byte value in [0, 255]")

        node = self.truncate(level, x)
        fmin = self._params.fmin[level]
        width = self._params.fmax[level] - fmin

        try:
            digest = SHA256.new(self._seed + bytes([node])).digest()
            value = int.from_bytes(digest, "big")
            return value % width + fmin
        except (ValueError, TypeError, ZeroDivisionError) as exc:
            raise OracleError(f"Oracle evaluation failed at level {level}") from exc
