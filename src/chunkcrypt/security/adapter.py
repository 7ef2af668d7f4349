"""Crypto adapter: one interface over the native and standard implementations.

The native implementation is XChaCha20-Poly1305 + BLAKE3 (see
:mod:`chunkcrypt.security.crypto`, :mod:`chunkcrypt.core.hashing`,
:mod:`chunkcrypt.security.kdf`). The standard implementation uses only
widely deployed primitives from ``cryptography``:

- AES-256-GCM with a 16-byte IV, tag appended to the ciphertext
- SHA-256 and HMAC-SHA256
- PBKDF2-HMAC-SHA256 with 100,000 iterations

Both produce 32-byte keys and digests and ``len + 16`` ciphertexts, so a host
switching implementations only has to store nonces of a different length.
The implementation is picked once, from :class:`AdapterConfig`, and never
changes for the lifetime of an adapter.
"""
from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from chunkcrypt.core.exceptions import DecryptionFailure, EncryptionFailure
from chunkcrypt.core.hashing import hash_chunk, hash_chunk_keyed
from chunkcrypt.core.validation import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    as_bytes,
    as_text,
    require_chunk,
    require_key,
    require_length,
)

from . import crypto, kdf
from .entropy import RandomSource, random_bytes


logger = logging.getLogger(__name__)

NATIVE = "native"
STANDARD = "standard"

ENV_USE_NATIVE = "CHUNKCRYPT_USE_NATIVE"

STANDARD_NONCE_SIZE = 16
PBKDF2_ITERATIONS = 100_000


@dataclass(frozen=True)
class AdapterConfig:
    """Settings for :class:`CryptoAdapter`."""

    use_native: bool = True

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "AdapterConfig":
        """Read ``CHUNKCRYPT_USE_NATIVE``; unset means native."""
        env = os.environ if environ is None else environ
        raw = env.get(ENV_USE_NATIVE)
        if raw is None:
            return cls()
        return cls(use_native=raw.strip().lower() in ("1", "true", "yes"))


class CryptoAdapter:
    def __init__(self, config: Optional[AdapterConfig] = None, source: Optional[RandomSource] = None):
        self.config = config or AdapterConfig()
        self._source = source
        self.nonce_size = crypto_nonce_size(self.implementation)
        logger.info("Using %s crypto implementation", self.implementation)

    @property
    def implementation(self) -> str:
        return NATIVE if self.config.use_native else STANDARD

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_key(self) -> bytes:
        return random_bytes(self._source, KEY_SIZE)

    def generate_nonce(self) -> bytes:
        return random_bytes(self._source, self.nonce_size)

    # ------------------------------------------------------------------
    # Encryption
    # ------------------------------------------------------------------

    def encrypt_chunk(self, plaintext, key, nonce) -> bytes:
        if self.config.use_native:
            return crypto.encrypt_chunk(plaintext, key, nonce)

        key = require_key(key)
        nonce = require_length(nonce, "nonce", STANDARD_NONCE_SIZE)
        plaintext = require_chunk(plaintext)
        try:
            # AESGCM already returns ciphertext || tag
            return AESGCM(key).encrypt(nonce, plaintext, None)
        except (ValueError, OverflowError) as e:
            raise EncryptionFailure(str(e)) from e

    def decrypt_chunk(self, ciphertext, key, nonce) -> bytes:
        if self.config.use_native:
            return crypto.decrypt_chunk(ciphertext, key, nonce)

        key = require_key(key)
        nonce = require_length(nonce, "nonce", STANDARD_NONCE_SIZE)
        ciphertext = as_bytes(ciphertext, "ciphertext")
        if len(ciphertext) < TAG_SIZE:
            raise DecryptionFailure()
        try:
            return AESGCM(key).decrypt(nonce, ciphertext, None)
        except InvalidTag:
            raise DecryptionFailure() from None

    # ------------------------------------------------------------------
    # Hashing
    # ------------------------------------------------------------------

    def hash_chunk(self, data) -> bytes:
        if self.config.use_native:
            return hash_chunk(data)

        digest = hashes.Hash(hashes.SHA256())
        digest.update(as_bytes(data, "data"))
        return digest.finalize()

    def hash_chunk_keyed(self, data, key) -> bytes:
        if self.config.use_native:
            return hash_chunk_keyed(data, key)

        key = require_key(key)
        mac = hmac.HMAC(key, hashes.SHA256())
        mac.update(as_bytes(data, "data"))
        return mac.finalize()

    # ------------------------------------------------------------------
    # Key derivation
    # ------------------------------------------------------------------

    def derive_key(self, password: str, salt: bytes, context: str = "chunkcrypt") -> bytes:
        if self.config.use_native:
            return kdf.derive_key(password, salt, context)

        password = as_text(password, "password")
        as_text(context, "context")
        # PBKDF2 has no domain-separation input
        logger.debug("standard derive_key ignores context %r", context)
        pbkdf2 = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_SIZE,
            salt=as_bytes(salt, "salt"),
            iterations=PBKDF2_ITERATIONS,
        )
        return pbkdf2.derive(password.encode("utf-8"))


def crypto_nonce_size(implementation: str) -> int:
    """Nonce length used by ``implementation`` (``"native"`` or ``"standard"``)."""
    if implementation == NATIVE:
        return NONCE_SIZE
    if implementation == STANDARD:
        return STANDARD_NONCE_SIZE
    raise ValueError(f"unknown crypto implementation: {implementation!r}")


# module-level default adapter, built from the environment on first use
_default_adapter: Optional[CryptoAdapter] = None
_default_lock = threading.Lock()


def get_adapter() -> CryptoAdapter:
    global _default_adapter
    if _default_adapter is None:
        with _default_lock:
            if _default_adapter is None:
                _default_adapter = CryptoAdapter(AdapterConfig.from_env())
    return _default_adapter


def configure_adapter(config: Optional[AdapterConfig] = None, source: Optional[RandomSource] = None) -> CryptoAdapter:
    """Replace the default adapter. Meant for process setup and tests."""
    global _default_adapter
    adapter = CryptoAdapter(config, source=source)
    with _default_lock:
        _default_adapter = adapter
    return adapter


def get_crypto_implementation() -> str:
    return get_adapter().implementation


def is_native_crypto_enabled() -> bool:
    return get_adapter().implementation == NATIVE
