"""Cryptographic primitives for data chunks.

This package provides a small, stateless surface for:
- random key and nonce generation
- XChaCha20-Poly1305 chunk encryption/decryption
- BLAKE3 content hashing and keyed hashing
- BLAKE3 context-separated key derivation

Every operation is a pure function over byte buffers. Chunking, storage and
key management belong to the host application.
"""

from chunkcrypt.core.exceptions import (
    ChunkCryptError,
    InvalidArgument,
    EncryptionFailure,
    DecryptionFailure,
)
from chunkcrypt.core.hashing import hash_chunk, hash_chunk_keyed
from chunkcrypt.core.validation import KEY_SIZE, NONCE_SIZE, TAG_SIZE, DIGEST_SIZE, MAX_CHUNK_SIZE
from .entropy import generate_key, generate_nonce, SystemRandomSource, SeededRandomSource
from .crypto import encrypt_chunk, decrypt_chunk
from .kdf import derive_key
from .adapter import (
    AdapterConfig,
    CryptoAdapter,
    get_adapter,
    configure_adapter,
    get_crypto_implementation,
    is_native_crypto_enabled,
)

__all__ = [
    "generate_key",
    "generate_nonce",
    "encrypt_chunk",
    "decrypt_chunk",
    "hash_chunk",
    "hash_chunk_keyed",
    "derive_key",
    "SystemRandomSource",
    "SeededRandomSource",
    "AdapterConfig",
    "CryptoAdapter",
    "get_adapter",
    "configure_adapter",
    "get_crypto_implementation",
    "is_native_crypto_enabled",
    "ChunkCryptError",
    "InvalidArgument",
    "EncryptionFailure",
    "DecryptionFailure",
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "DIGEST_SIZE",
    "MAX_CHUNK_SIZE",
]
