"""
Cipher implementation of Hwang et al's Fast Order-Preserving Encryption scheme.

Key generation draws:
- alpha uniformly from [0, 0.5), beta = 1 - alpha
- e uniformly from [0, alpha)
- n = ceil(tau / (beta * e^8))
- a 63-bit secret seed k

tau is the security parameter: it bounds the smallest leaf interval from
below, so smaller alpha / e force a larger n (wider ciphertexts).

Draws that are degenerate (alpha or e equal to 0, n beyond 64-bit range) or
whose rounded interval tables would break monotonicity are redrawn.
"""

from dataclasses import dataclass
import logging
import math
import secrets
import struct

from Crypto.Random import get_random_bytes

from ..errors import (
    InvalidKeyError,
    KeyDecodeError,
    KeyDecodeTruncatedError,
    NullInputError,
    OpeError,
)
from .key import KEY_FORMAT, KEY_SIZE, FastOpeKey
from .params import MAX_N, MAX_SEED, FastOpeParams

logger = logging.getLogger(__name__)

DEFAULT_TAU = 16
MIN_TAU = 2

# Upper bound on redraws before giving up (only reachable with extreme tau)
MAX_KEYGEN_ATTEMPTS = 1000


@dataclass
class FastOpeConfig:
    """Configuration for Fast-OPE key generation."""

    tau: int = DEFAULT_TAU  # Security parameter (minimum leaf domain size)

    def __post_init__(self):
        # fmin[8] ~ alpha * tau / beta < tau, so tau = 1 leaves the leaf interval empty
        if self.tau < MIN_TAU:
            raise ValueError(f"tau must be at least {MIN_TAU}")


class FastOpeCipher:
    """
    Fast-OPE cipher: generates and decodes FastOpeKey instances.
    """

    def __init__(self, config: FastOpeConfig = None):
        """
        Initialize cipher.

        Args:
            config: Key generation settings. If None, uses tau = 16.
        """
        self.config = config if config is not None else FastOpeConfig()
        self._rng = secrets.SystemRandom()

    @property
    def tau(self) -> int:
        return self.config.tau

    def _draw_params(self) -> FastOpeParams | None:
        """Draw one candidate parameter set, or None if the draw is unusable."""
        alpha = self._rng.random() / 2.0
        beta = 1.0 - alpha
        e = self._rng.random() * alpha
        if not 0.0 < e < alpha:
            return None

        denominator = beta * math.pow(e, 8)
        if denominator == 0.0:
            return None
        limit = self.config.tau / denominator
        if not math.isfinite(limit) or limit > MAX_N:
            return None
        n = math.ceil(limit)

        k = int.from_bytes(get_random_bytes(8), "big") & MAX_SEED
        params = FastOpeParams(n=n, alpha=alpha, e=e, k=k)
        if not params.is_sound():
            return None
        return params

    def generate_key(self) -> FastOpeKey:
        """
        Generate a fresh random key.

        Returns:
            FastOpeKey with sound parameters
        """
        for attempt in range(1, MAX_KEYGEN_ATTEMPTS + 1):
            params = self._draw_params()
            if params is None:
                logger.debug("Rejected Fast-OPE parameter draw %d; redrawing", attempt)
                continue
            logger.debug("Generated Fast-OPE key after %d draw(s): %r", attempt, params)
            return FastOpeKey(params)

        raise OpeError(
            f"Could not draw usable Fast-OPE parameters for tau={self.config.tau} "
            f"in {MAX_KEYGEN_ATTEMPTS} attempts"
        )

    def decode_key(self, data: bytes) -> FastOpeKey:
        """
        Rebuild a key from FastOpeKey.encode_key() output.

        Args:
            data: 32 bytes, big-endian n (i64) | alpha (f64) | e (f64) | k (i64)

        Returns:
            FastOpeKey equal to the encoded one
        """
        if data is None:
            raise NullInputError("Encoded key is null.")
        if len(data) < KEY_SIZE:
            raise KeyDecodeTruncatedError(KEY_SIZE, len(data))
        if len(data) > KEY_SIZE:
            raise KeyDecodeError(
                f"Encoded Fast-OPE key has {len(data) - KEY_SIZE} trailing bytes"
            )

        n, alpha, e, k = struct.unpack(KEY_FORMAT, data)
        try:
            params = FastOpeParams(n=n, alpha=alpha, e=e, k=k)
        except ValueError as exc:
            raise InvalidKeyError(f"Invalid Fast-OPE key: {exc}") from exc

        logger.debug("Decoded Fast-OPE key: %r", params)
        return FastOpeKey(params)
