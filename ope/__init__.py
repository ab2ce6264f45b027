"""
OPE: Order-Preserving Encryption for range queries over ciphertext.

A Python implementation of two schemes:
- Fast-OPE: Hwang, Kim & Seo, "Fast order-preserving encryption from uniform
  distribution sampling" (CCSW 2015)
- MOPE: Boldyreva, Chenette & O'Neill, "Order-preserving encryption
  revisited" (CRYPTO 2011), layered over any other OPE key

Modules:
- protocols: Key and Cipher interfaces
- fast: Fast-OPE key and cipher
- mope: Modular offset key and cipher
- encoder: Order-preserving byte encodings for primitive values
- typed: Typed encrypt/decrypt helpers
- utils: Ciphertext comparison and range filtering
- errors: Exception hierarchy

Example usage:
    from ope import FastOpeCipher, MopeCipher, typed

    key = FastOpeCipher().generate_key()
    assert typed.encrypt_int32(key, 5) < typed.encrypt_int32(key, 7)
"""

from . import encoder
from . import typed
from .errors import (
    OpeError,
    InvalidInputLengthError,
    NullInputError,
    PlaintextTooLargeError,
    KeyDecodeError,
    KeyDecodeTruncatedError,
    InvalidKeyError,
    CiphertextError,
    OracleError,
)
from .protocols import Key, Cipher
from .fast import FastOpeParams, FastOpeKey, FastOpeCipher, FastOpeConfig
from .mope import MopeKey, MopeCipher, MopeConfig
from .utils import compare, in_range, range_filter

__version__ = "0.1.0"
__all__ = [
    "encoder",
    "typed",
    "OpeError",
    "InvalidInputLengthError",
    "NullInputError",
    "PlaintextTooLargeError",
    "KeyDecodeError",
    "KeyDecodeTruncatedError",
    "InvalidKeyError",
    "CiphertextError",
    "OracleError",
    "Key",
    "Cipher",
    "FastOpeParams",
    "FastOpeKey",
    "FastOpeCipher",
    "FastOpeConfig",
    "MopeKey",
    "MopeCipher",
    "MopeConfig",
    "compare",
    "in_range",
    "range_filter",
]
