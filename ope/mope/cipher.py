"""
Cipher implementation of Boldyreva et al's Modular Order-Preserving Encryption.

Wraps any other OPE cipher: key generation draws a random offset of
plaintext_bytes bytes and asks the inner cipher for a fresh inner key.
"""

from dataclasses import dataclass
import logging
import struct

from Crypto.Random import get_random_bytes

from ..errors import KeyDecodeError, KeyDecodeTruncatedError, NullInputError
from ..protocols import Cipher
from ..utils import bytes_to_int
from .key import MAX_WIDTH, WIDTH_FORMAT, WIDTH_SIZE, MopeKey

logger = logging.getLogger(__name__)

DEFAULT_PLAINTEXT_BYTES = 8


@dataclass
class MopeConfig:
    """Configuration for MOPE key generation."""

    plaintext_bytes: int = DEFAULT_PLAINTEXT_BYTES  # Width w of the modular domain

    def __post_init__(self):
        if not 1 <= self.plaintext_bytes <= MAX_WIDTH:
            raise ValueError("plaintext_bytes must be in [1, 2^31)")


class MopeCipher:
    """
    MOPE cipher around an inner cipher.
    """

    def __init__(self, cipher: Cipher, config: MopeConfig = None):
        """
        Initialize cipher.

        Args:
            cipher: Inner cipher (e.g. FastOpeCipher); owned by this cipher
            config: Width settings. If None, uses plaintext_bytes = 8.
        """
        self._cipher = cipher
        self.config = config if config is not None else MopeConfig()

    @property
    def cipher(self) -> Cipher:
        """Inner cipher."""
        return self._cipher

    @property
    def plaintext_bytes(self) -> int:
        return self.config.plaintext_bytes

    def generate_key(self) -> MopeKey:
        """
        Generate a fresh MOPE key with a new inner key.

        Returns:
            MopeKey with a uniformly random offset in [0, 2^(8w))
        """
        w = self.config.plaintext_bytes
        offset = bytes_to_int(get_random_bytes(w))
        key = self._cipher.generate_key()

        logger.debug("Generated MOPE key with plaintext_bytes=%d", w)
        return MopeKey(key, w, offset)

    def decode_key(self, data: bytes) -> MopeKey:
        """
        Rebuild a key from MopeKey.encode_key() output.

        Args:
            data: width (4 bytes) | offset (width bytes) | inner key encoding

        Returns:
            MopeKey equal to the encoded one
        """
        if data is None:
            raise NullInputError("Encoded key is null.")
        if len(data) < WIDTH_SIZE:
            raise KeyDecodeTruncatedError(WIDTH_SIZE, len(data))

        (w,) = struct.unpack_from(WIDTH_FORMAT, data)
        if w < 1:
            raise KeyDecodeError(f"Invalid MOPE plaintext width {w}")

        end = WIDTH_SIZE + w
        if len(data) < end:
            raise KeyDecodeTruncatedError(end, len(data))

        offset = bytes_to_int(data[WIDTH_SIZE:end])
        key = self._cipher.decode_key(data[end:])

        logger.debug("Decoded MOPE key with plaintext_bytes=%d", w)
        return MopeKey(key, w, offset)
