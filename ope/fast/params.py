"""
Parameters for the Fast-OPE scheme.

Key parameters:
- n: Domain-size parameter; its bit length is the ciphertext width of one byte
- alpha: Lower split ratio, 0 < alpha < 0.5
- beta: Upper split ratio, 1 - alpha
- e: Shrink factor per tree level, 0 < e < alpha
- k: Secret 64-bit seed for the interval oracle

Derived (pure functions of n, alpha, e):
- fmin[i] = floor(alpha * n * e^i), fmax[i] = ceil(beta * n * e^i) for the
  9 levels of the per-byte binary tree
- cipher_bits_per_byte = bit length of n
- plaintext_bytes_per_block: smallest i in [1, 8] making i * cipher_bits_per_byte
  a whole number of bytes
- ciphertext_bytes_per_block = plaintext_bytes_per_block * cipher_bits_per_byte / 8

The interval tables are computed with exact rational arithmetic over the exact
binary values of alpha, beta and e, so they are reproducible bit for bit.
"""

from dataclasses import dataclass, field
from fractions import Fraction
import math

# Levels of the per-byte tree: level 0 is the root, levels 1..8 are the bits
NUM_LEVELS = 9

MAX_N = (1 << 63) - 1
MAX_SEED = (1 << 63) - 1


@dataclass(frozen=True)
class FastOpeParams:
    """Parameters for the Fast-OPE scheme."""

    n: int          # Domain-size parameter
    alpha: float    # Lower split ratio
    e: float        # Shrink factor per level
    k: int          # Oracle seed (secret)

    beta: float = field(init=False, repr=False)
    fmin: tuple[int, ...] = field(init=False, repr=False)
    fmax: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self):
        # Validate parameters
        if not 1 <= self.n <= MAX_N:
            raise ValueError("n must be in [1, 2^63)")
        if not 0.0 < self.alpha < 0.5:
            raise ValueError("alpha must be in (0, 0.5)")
        if not 0.0 < self.e < self.alpha:
            raise ValueError("e must be in (0, alpha)")
        if not 0 <= self.k <= MAX_SEED:
            raise ValueError("k must be in [0, 2^63)")

        # beta is a double, matching what the encoded key can reproduce
        beta = 1.0 - self.alpha
        object.__setattr__(self, "beta", beta)

        exact_alpha = Fraction(self.alpha)
        exact_beta = Fraction(beta)
        exact_e = Fraction(self.e)

        fmin = []
        fmax = []
        for i in range(NUM_LEVELS):
            factor = self.n * exact_e ** i
            fmin.append(math.floor(exact_alpha * factor))
            fmax.append(math.ceil(exact_beta * factor))

        object.__setattr__(self, "fmin", tuple(fmin))
        object.__setattr__(self, "fmax", tuple(fmax))

    @property
    def cipher_bits_per_byte(self) -> int:
        """Bits used to represent one encrypted byte."""
        return self.n.bit_length()

    @property
    def cipher_bit_mask(self) -> int:
        """Mask selecting one encrypted byte's bits."""
        return (1 << self.cipher_bits_per_byte) - 1

    @property
    def plaintext_bytes_per_block(self) -> int:
        """Plaintext bytes packed into one byte-aligned ciphertext block."""
        bits = self.cipher_bits_per_byte
        for i in range(1, 9):
            if (bits * i) % 8 == 0:
                return i
        # unreachable: i = 8 always aligns
        return 8

    @property
    def ciphertext_bytes_per_block(self) -> int:
        """Ciphertext bytes produced per block."""
        return self.plaintext_bytes_per_block * self.cipher_bits_per_byte // 8

    def slack_below(self, level: int) -> int:
        """
        Largest magnitude the levels below `level` can add or subtract.

        Sum of (fmax[l] - 1) for l in (level, 8].
        """
        return sum(self.fmax[l] - 1 for l in range(level + 1, NUM_LEVELS))

    def is_sound(self) -> bool:
        """
        Check that integer rounding has not broken the tree.

        Sound parameters guarantee:
        - each level's smallest value outweighs everything below it, so
          per-byte ciphertexts are strictly increasing and decode uniquely
        - the smallest per-byte value is positive (above the padding value 0)
        - the largest per-byte value fits in cipher_bits_per_byte bits
        """
        for level in range(NUM_LEVELS):
            if self.fmin[level] <= self.slack_below(level):
                return False
        largest = self.fmax[0] - 1 + self.slack_below(0)
        return largest <= self.cipher_bit_mask

    def ciphertext_size(self, plaintext_size: int) -> int:
        """Ciphertext length for a plaintext of the given length."""
        block_count = -(-plaintext_size // self.plaintext_bytes_per_block)
        return block_count * self.ciphertext_bytes_per_block + 1

    def __repr__(self) -> str:
        # k is secret
        return (
            f"FastOpeParams(n={self.n}, alpha={self.alpha}, e={self.e}, "
            f"cipher_bits_per_byte={self.cipher_bits_per_byte}, "
            f"plaintext_bytes_per_block={self.plaintext_bytes_per_block}, "
            f"ciphertext_bytes_per_block={self.ciphertext_bytes_per_block})"
        )
