"""
Key implementation of Boldyreva et al's Modular Order-Preserving Encryption.

MOPE is not a standalone scheme: it shifts every plaintext by a secret random
offset modulo 2^(8w) before handing it to an inner OPE key. This hides where
plaintexts sit in the domain. Order is kept only between plaintexts in a range
that does not cross the wrap point; splitting such queries is up to the caller.

Reference:
    Boldyreva, A., Chenette, N., & O'Neill, A. (2011).
    Order-preserving encryption revisited: Improved security analysis and
    alternative solutions. CRYPTO 2011.
"""

import struct

from ..errors import InvalidKeyError, NullInputError, PlaintextTooLargeError
from ..protocols import Key
from ..utils import bytes_to_int, int_to_fixed_bytes

WIDTH_FORMAT = ">i"
WIDTH_SIZE = struct.calcsize(WIDTH_FORMAT)
MAX_WIDTH = (1 << 31) - 1


class MopeKey:
    """
    MOPE key wrapping an inner OPE key.

    Encoding: width (4-byte big-endian int) | offset (width bytes) | inner key.
    """

    def __init__(self, key: Key, plaintext_bytes: int, offset: int):
        """
        Initialize key.

        Args:
            key: Inner OPE key; owned by this key from now on
            plaintext_bytes: Width w; plaintexts may be at most w bytes
            offset: Secret shift in [0, 2^(8w))
        """
        if not 1 <= plaintext_bytes <= MAX_WIDTH:
            raise InvalidKeyError("plaintext_bytes must be in [1, 2^31)")

        max_value = 1 << (8 * plaintext_bytes)
        if not 0 <= offset < max_value:
            raise InvalidKeyError("offset must be in [0, 2^(8 * plaintext_bytes))")

        self._key = key
        self._plaintext_bytes = plaintext_bytes
        self._offset = offset
        self._max = max_value

    @property
    def key(self) -> Key:
        """Inner OPE key."""
        return self._key

    @property
    def plaintext_bytes(self) -> int:
        """Maximum plaintext size w in bytes."""
        return self._plaintext_bytes

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def max(self) -> int:
        """Modulus 2^(8w)."""
        return self._max

    def encode_key(self) -> bytes:
        w = self._plaintext_bytes
        return (
            struct.pack(WIDTH_FORMAT, w)
            + int_to_fixed_bytes(self._offset, w)
            + self._key.encode_key()
        )

    def _check_size(self, data: bytes) -> None:
        if len(data) > self._plaintext_bytes:
            raise PlaintextTooLargeError(self._plaintext_bytes, len(data))

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Shift the plaintext down by the offset, then encrypt with the inner key.

        Args:
            plaintext: At most plaintext_bytes bytes, read as an unsigned
                big-endian integer

        Returns:
            Inner key's ciphertext of the shifted w-byte value
        """
        if plaintext is None:
            raise NullInputError()
        self._check_size(plaintext)

        shifted = (bytes_to_int(plaintext) - self._offset) % self._max
        return self._key.encrypt(int_to_fixed_bytes(shifted, self._plaintext_bytes))

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt with the inner key, then shift back up by the offset.

        Args:
            ciphertext: Output of encrypt()

        Returns:
            Plaintext as exactly plaintext_bytes bytes
        """
        if ciphertext is None:
            raise NullInputError()

        shifted = self._key.decrypt(ciphertext)
        self._check_size(shifted)

        plain = (bytes_to_int(shifted) + self._offset) % self._max
        return int_to_fixed_bytes(plain, self._plaintext_bytes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MopeKey):
            return NotImplemented
        return (
            self._plaintext_bytes == other._plaintext_bytes
            and self._offset == other._offset
            and self._key == other._key
        )

    def __hash__(self) -> int:
        return hash((self._plaintext_bytes, self._offset, self._key))

    def __repr__(self) -> str:
        # offset is secret
        return f"MopeKey(plaintext_bytes={self._plaintext_bytes}, key={self._key!r})"
