"""
Protocol interfaces for OPE schemes.

This module defines:
1. Key: what every OPE key must provide (encode, encrypt, decrypt)
2. Cipher: what every OPE cipher must provide (generate and decode keys)

Fast-OPE and MOPE both implement these interfaces, so a MOPE cipher can wrap
any other cipher and the typed helpers in ope.typed work with any key.

Keys are immutable once constructed. A key may be shared between threads
without locking.
"""

from typing import Protocol


class Key(Protocol):
    """
    Protocol for OPE keys.

    Ordering guarantee: for plaintexts a <= b of the same encoded type,
    encrypt(a) <= encrypt(b) as unsigned byte strings.
    """

    def encode_key(self) -> bytes:
        """
        Serialize the full key material, secrets included.

        Returns:
            Scheme-specific binary encoding, accepted by Cipher.decode_key()
        """
        ...

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Encrypt a byte string.

        Args:
            plaintext: Bytes to encrypt

        Returns:
            Ciphertext whose length depends only on len(plaintext)
        """
        ...

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a ciphertext produced by encrypt().

        Args:
            ciphertext: Bytes returned by encrypt()

        Returns:
            The original plaintext
        """
        ...


class Cipher(Protocol):
    """
    Protocol for OPE ciphers.

    A cipher holds scheme configuration and produces keys.
    """

    def generate_key(self) -> Key:
        """Generate a fresh random key."""
        ...

    def decode_key(self, data: bytes) -> Key:
        """
        Rebuild a key from the output of Key.encode_key().

        Args:
            data: Encoded key

        Returns:
            A key that encrypts identically to the encoded one
        """
        ...
