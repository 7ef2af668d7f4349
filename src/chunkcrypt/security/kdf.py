from blake3 import blake3

from chunkcrypt.core.validation import KEY_SIZE, as_bytes, as_text


def derive_key(password: str, salt: bytes, context: str) -> bytes:
    """
    Derive a 32-byte key from a password using BLAKE3's derive-key mode.

    ``context`` keys the hasher and separates derivations made for different
    purposes. The salt is absorbed before the password. Same inputs always
    give the same key; no input has a length limit.
    """
    password = as_text(password, "password")
    context = as_text(context, "context")
    salt = as_bytes(salt, "salt")

    hasher = blake3(derive_key_context=context)
    hasher.update(salt)
    hasher.update(password.encode("utf-8"))
    return hasher.digest(length=KEY_SIZE)
