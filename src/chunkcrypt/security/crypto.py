"""XChaCha20-Poly1305 chunk encryption.

Ciphertext layout: ``ENC(key, nonce, plaintext) || tag`` where the tag is the
16-byte Poly1305 authenticator. No associated data is bound. The 24-byte
extended nonce is large enough to be drawn at random for every chunk, so
callers need no shared nonce counter; reusing a (key, nonce) pair is still
the caller's mistake to avoid.
"""
from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
)
from nacl.exceptions import CryptoError

from chunkcrypt.core.exceptions import DecryptionFailure, EncryptionFailure
from chunkcrypt.core.validation import (
    TAG_SIZE,
    as_bytes,
    require_chunk,
    require_key,
    require_nonce,
)


def encrypt_chunk(plaintext, key, nonce) -> bytes:
    """Encrypt ``plaintext`` and return ciphertext with the tag appended.

    Args:
        plaintext: bytes-like data of any length up to ``MAX_CHUNK_SIZE``
        key: 32-byte secret key
        nonce: 24-byte nonce, unique for every encryption under ``key``

    Returns:
        ``len(plaintext) + 16`` bytes.

    Raises:
        InvalidArgument: wrong key/nonce length or over-size plaintext
        EncryptionFailure: the cipher reported an error
    """
    key = require_key(key)
    nonce = require_nonce(nonce)
    plaintext = require_chunk(plaintext)

    try:
        return crypto_aead_xchacha20poly1305_ietf_encrypt(plaintext, None, nonce, key)
    except CryptoError as e:
        raise EncryptionFailure(str(e)) from e


def decrypt_chunk(ciphertext, key, nonce) -> bytes:
    """Verify the trailing tag and return the original plaintext.

    Nothing is returned unless the tag verifies. Short input, a wrong key or
    nonce and tampered bytes all raise the same :class:`DecryptionFailure`.
    """
    key = require_key(key)
    nonce = require_nonce(nonce)
    ciphertext = as_bytes(ciphertext, "ciphertext")

    if len(ciphertext) < TAG_SIZE:
        raise DecryptionFailure()

    try:
        return crypto_aead_xchacha20poly1305_ietf_decrypt(ciphertext, None, nonce, key)
    except CryptoError:
        raise DecryptionFailure() from None
