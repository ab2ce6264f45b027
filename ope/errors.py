"""
Exceptions raised by the OPE library.

All library errors derive from OpeError. Errors caused by bad caller input
(wrong lengths, oversize plaintexts, malformed keys or ciphertexts) also
derive from ValueError so callers can treat them like any other argument error.

Messages never include key material or plaintext values.
"""


class OpeError(Exception):
    """Base class for all OPE errors."""


class InvalidInputLengthError(OpeError, ValueError):
    """A primitive decoder was given the wrong number of bytes."""

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"Invalid byte array length. Expecting {expected}, found {found}."
        )
        self.expected = expected
        self.found = found


class NullInputError(OpeError, ValueError):
    """A required byte buffer was None."""

    def __init__(self, message: str = "Input value is null."):
        super().__init__(message)


class PlaintextTooLargeError(OpeError, ValueError):
    """A MOPE plaintext exceeds the key's configured width."""

    def __init__(self, limit: int, found: int):
        super().__init__(
            f"Plaintext cannot exceed {limit} bytes in size (got {found})."
        )
        self.limit = limit
        self.found = found


class KeyDecodeError(OpeError, ValueError):
    """An encoded key could not be parsed."""


class KeyDecodeTruncatedError(KeyDecodeError):
    """An encoded key is shorter than its format requires."""

    def __init__(self, required: int, found: int):
        super().__init__(
            f"Encoded key is truncated: need at least {required} bytes, found {found}."
        )
        self.required = required
        self.found = found


class InvalidKeyError(OpeError, ValueError):
    """Key parameters are outside the domain the scheme supports."""


class CiphertextError(OpeError, ValueError):
    """A ciphertext is malformed or was not produced by this key."""


class OracleError(OpeError):
    """The pseudorandom interval oracle failed internally."""
