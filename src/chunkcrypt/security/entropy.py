"""Random key and nonce generation.

A random source is any callable taking a byte count and returning that many
random bytes. Production code uses :class:`SystemRandomSource` (the OS
CSPRNG via ``os.urandom``); tests can pass a :class:`SeededRandomSource` to
get reproducible output.
"""
from __future__ import annotations

import hashlib
import os
from typing import Callable, Optional

from chunkcrypt.core.validation import KEY_SIZE, NONCE_SIZE


RandomSource = Callable[[int], bytes]


class SystemRandomSource:
    """Cryptographically secure bytes from the operating system."""

    def __call__(self, n: int) -> bytes:
        return os.urandom(n)


class SeededRandomSource:
    """Deterministic byte stream for tests. Never use it for real keys.

    Output is SHAKE-256 of the seed, read sequentially, so the same seed
    always yields the same sequence of draws.
    """

    def __init__(self, seed: bytes | int = 0):
        if isinstance(seed, int):
            # at least 8 bytes; signed so negative and large seeds both encode
            length = max(8, (seed.bit_length() + 8) // 8)
            seed = seed.to_bytes(length, "big", signed=True)
        self._seed = bytes(seed)
        self._offset = 0

    def __call__(self, n: int) -> bytes:
        end = self._offset + n
        out = hashlib.shake_256(self._seed).digest(end)[self._offset:end]
        self._offset = end
        return out


_system_source = SystemRandomSource()


def random_bytes(source: Optional[RandomSource], n: int) -> bytes:
    out = (source or _system_source)(n)
    if len(out) != n:
        raise RuntimeError(f"random source returned {len(out)} bytes, expected {n}")
    return bytes(out)


def generate_key(source: Optional[RandomSource] = None) -> bytes:
    """Return a random 32-byte key."""
    return random_bytes(source, KEY_SIZE)


def generate_nonce(source: Optional[RandomSource] = None) -> bytes:
    """Return a random 24-byte XChaCha20 nonce."""
    return random_bytes(source, NONCE_SIZE)
