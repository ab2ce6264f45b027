"""
Key implementation of Hwang et al's Fast Order-Preserving Encryption scheme.

Reference:
    Hwang, Y. H., Kim, S., & Seo, J. W. (2015).
    Fast order-preserving encryption from uniform distribution sampling.
    CCSW '15. https://dl.acm.org/citation.cfm?id=2808431

Each plaintext byte b is mapped to an integer by walking a depth-8 binary
tree from the root (level 0) to a leaf, MSB first:

    c(b) = f(0, 0) + sum_{j=1..8} (+f(j, b) if bit j of b is 1 else -f(j, b))

Each level's interval is large enough to outweigh every level below it, so
c(b) is strictly increasing in b. Per-byte integers are packed MSB-first into
byte-aligned blocks, followed by one trailer byte holding the padding count.
"""

import struct

from ..errors import CiphertextError, InvalidKeyError, NullInputError
from ..utils import bytes_to_int, int_to_fixed_bytes
from .oracle import IntervalOracle
from .params import FastOpeParams

# Bit j of a byte (1 = MSB, 8 = LSB); index 0 is unused
BIT_MASKS = (0x00, 0x80, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02, 0x01)

KEY_FORMAT = ">qddq"  # n | alpha | e | k
KEY_SIZE = struct.calcsize(KEY_FORMAT)


class FastOpeKey:
    """
    Fast-OPE key.

    Immutable; encrypt() and decrypt() are pure functions of the key and input.
    """

    def __init__(self, params: FastOpeParams):
        """
        Initialize key.

        Args:
            params: Scheme parameters; must be sound (see FastOpeParams.is_sound)
        """
        if not params.is_sound():
            raise InvalidKeyError(
                "Key parameters do not yield an order-preserving tree"
            )
        self._params = params
        self._oracle = IntervalOracle(params)

    @property
    def params(self) -> FastOpeParams:
        """Scheme parameters."""
        return self._params

    def encode_key(self) -> bytes:
        """Serialize as 32 big-endian bytes: n | alpha | e | k."""
        p = self._params
        return struct.pack(KEY_FORMAT, p.n, p.alpha, p.e, p.k)

    def ciphertext_size(self, plaintext_size: int) -> int:
        """Ciphertext length for a plaintext of the given length."""
        return self._params.ciphertext_size(plaintext_size)

    def encrypt_byte(self, b: int) -> int:
        """
        Encrypt one byte to its per-byte integer.

        Args:
            b: Byte value in [0, 255]

        Returns:
            Positive integer, strictly increasing in b
        """
        if not 0 <= b <= 0xFF:
            raise ValueError("b must be a byte value in [0, 255]")

        f = self._oracle.f
        cipher = f(0, 0)
        for j in range(1, 9):
            if b & BIT_MASKS[j]:
                cipher += f(j, b)
            else:
                cipher -= f(j, b)
        return cipher

    def decrypt_byte(self, cipher: int) -> int:
        """
        Recover the byte whose per-byte integer is `cipher`.

        Walks the tree top-down: each bit is decided by comparing against the
        running sum, and the next oracle call depends on the bits decided so far.

        Args:
            cipher: Per-byte integer produced by encrypt_byte()

        Returns:
            Byte value in [0, 255]
        """
        f = self._oracle.f

        b = 0
        a = f(0, 0)
        if cipher >= a:
            b |= BIT_MASKS[1]

        for j in range(1, 8):
            step = f(j, b)
            a += step if b & BIT_MASKS[j] else -step
            if cipher >= a:
                b |= BIT_MASKS[j + 1]

        # Complete the walk: the leaf must land exactly on the input
        step = f(8, b)
        a += step if b & BIT_MASKS[8] else -step
        if a != cipher:
            raise CiphertextError("Ciphertext was not produced by this key")

        return b

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Encrypt a byte string.

        Args:
            plaintext: Bytes to encrypt (may be empty)

        Returns:
            ceil(len / plaintext_bytes_per_block) * ciphertext_bytes_per_block + 1 bytes
        """
        if plaintext is None:
            raise NullInputError()

        p = self._params
        per_block = p.plaintext_bytes_per_block
        bits = p.cipher_bits_per_byte
        mask = p.cipher_bit_mask
        size = len(plaintext)

        block_count = -(-size // per_block)
        padding = block_count * per_block - size

        out = bytearray()
        for block in range(block_count):
            block_cipher = 0
            for i in range(per_block):
                pos = block * per_block + i
                # Padding positions after the end contribute 0
                cipher = self.encrypt_byte(plaintext[pos]) if pos < size else 0
                block_cipher = (block_cipher << bits) | (cipher & mask)
            out += int_to_fixed_bytes(block_cipher, p.ciphertext_bytes_per_block)

        out.append(padding)
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a ciphertext produced by encrypt().

        Args:
            ciphertext: Ciphertext bytes

        Returns:
            The original plaintext
        """
        if ciphertext is None:
            raise NullInputError()

        p = self._params
        per_block = p.plaintext_bytes_per_block
        block_size = p.ciphertext_bytes_per_block
        bits = p.cipher_bits_per_byte
        mask = p.cipher_bit_mask

        if len(ciphertext) < 1:
            raise CiphertextError("Ciphertext is empty")
        if (len(ciphertext) - 1) % block_size != 0:
            raise CiphertextError(
                f"Ciphertext length {len(ciphertext)} is not "
                f"a multiple of {block_size} plus 1"
            )

        block_count = (len(ciphertext) - 1) // block_size
        padding = ciphertext[-1]
        if padding >= per_block or (block_count == 0 and padding != 0):
            raise CiphertextError(f"Invalid padding count {padding}")

        size = block_count * per_block - padding
        plaintext = bytearray(size)

        for block in range(block_count):
            start = block * block_size
            block_cipher = bytes_to_int(ciphertext[start:start + block_size])

            # Unpack from the least significant end: last byte of the block first
            for i in range(per_block - 1, -1, -1):
                cipher = block_cipher & mask
                block_cipher >>= bits
                pos = block * per_block + i
                if pos < size:
                    plaintext[pos] = self.decrypt_byte(cipher)
                elif cipher != 0:
                    raise CiphertextError("Non-zero value in a padding position")

        return bytes(plaintext)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FastOpeKey):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __repr__(self) -> str:
        return f"FastOpeKey({self._params!r})"
