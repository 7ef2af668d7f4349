""" BLAKE3 content hashing and keyed hashing for data chunks. """

from blake3 import blake3

from .validation import DIGEST_SIZE, as_bytes, require_key


def hash_chunk(data) -> bytes:
    """Return the 32-byte BLAKE3 digest of ``data``."""
    return blake3(as_bytes(data, "data")).digest(length=DIGEST_SIZE)


def hash_chunk_keyed(data, key) -> bytes:
    """Return a 32-byte BLAKE3 MAC of ``data`` under a 32-byte ``key``.

    This is BLAKE3's native keyed mode, not HMAC. The key is checked before
    any hashing happens.
    """
    key = require_key(key)
    data = as_bytes(data, "data")
    return blake3(data, key=key).digest(length=DIGEST_SIZE)
