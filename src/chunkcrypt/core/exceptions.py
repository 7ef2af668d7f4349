"""
Exceptions for chunkcrypt
Every error the package raises derives from ChunkCryptError so callers have
one general error catcher
"""

from __future__ import annotations


class ChunkCryptError(Exception):
    # general container for errors
    pass


class InvalidArgument(ChunkCryptError, ValueError):
    """Raised before any cryptographic work when an argument is malformed.

    ``name`` is the offending parameter, ``expected`` its required length
    (or a short description for type errors) and ``actual`` what was given.
    """

    def __init__(self, name: str, expected, actual=None, message: str | None = None):
        self.name = name
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"{name} must be exactly {expected} bytes"
            if actual is not None:
                message += f" (got {actual})"
        super().__init__(message)


class EncryptionFailure(ChunkCryptError):
    # raised if the cipher itself fails; not expected for valid inputs
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"encryption failed: {reason}")


class DecryptionFailure(ChunkCryptError):
    # raised on tag mismatch or malformed ciphertext; the message never says which
    def __init__(self):
        super().__init__("decryption failed")
