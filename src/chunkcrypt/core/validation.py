"""Argument checks shared by every chunkcrypt operation.

All checks run before any cryptographic work and raise
:class:`~chunkcrypt.core.exceptions.InvalidArgument`.
"""

from __future__ import annotations

from .exceptions import InvalidArgument


KEY_SIZE = 32
NONCE_SIZE = 24
TAG_SIZE = 16
DIGEST_SIZE = 32

# IETF ChaCha20 has a 32-bit block counter of 64-byte blocks; block 0 keys Poly1305.
MAX_CHUNK_SIZE = 64 * (2**32 - 1)


def as_bytes(value, name: str) -> bytes:
    """Copy a bytes-like ``value`` into an immutable ``bytes`` object.

    Text is rejected: callers must encode it themselves.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgument(
        name,
        "bytes-like",
        type(value).__name__,
        message=f"{name} must be bytes-like (got {type(value).__name__})",
    )


def as_text(value, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(
            name,
            "str",
            type(value).__name__,
            message=f"{name} must be str (got {type(value).__name__})",
        )
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        # lone surrogates, e.g. from surrogateescape-decoded argv or environ
        raise InvalidArgument(
            name,
            "valid UTF-8 text",
            f"unencodable character at index {e.start}",
            message=f"{name} must be valid UTF-8 text (unencodable character at index {e.start})",
        ) from None
    return value


def require_length(value, name: str, length: int) -> bytes:
    """Return ``value`` as bytes, raising unless it is exactly ``length`` long."""
    data = as_bytes(value, name)
    if len(data) != length:
        raise InvalidArgument(name, length, len(data))
    return data


def require_key(key) -> bytes:
    return require_length(key, "key", KEY_SIZE)


def require_nonce(nonce) -> bytes:
    return require_length(nonce, "nonce", NONCE_SIZE)


def require_chunk(plaintext) -> bytes:
    data = as_bytes(plaintext, "plaintext")
    if len(data) > MAX_CHUNK_SIZE:
        raise InvalidArgument(
            "plaintext",
            MAX_CHUNK_SIZE,
            len(data),
            message=f"plaintext must be at most {MAX_CHUNK_SIZE} bytes (got {len(data)})",
        )
    return data
