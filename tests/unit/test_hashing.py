"""Unit tests for hashing functionality."""

import pytest
from blake3 import blake3

from chunkcrypt.core import hashing
from chunkcrypt.core.exceptions import InvalidArgument


def test_hash_chunk_empty_vector() -> None:
    """BLAKE3 of empty input is the published test vector."""
    assert hashing.hash_chunk(b"").hex() == (
        "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
    )


def test_hash_chunk_matches_blake3() -> None:
    data = b"hello world"
    assert hashing.hash_chunk(data) == blake3(data).digest()


def test_hash_chunk_length() -> None:
    assert len(hashing.hash_chunk(b"x" * 10_000)) == 32


def test_hash_consistency() -> None:
    """Hashing the same bytes twice should yield identical results."""
    data = b"consistenthopefully"
    assert hashing.hash_chunk(data) == hashing.hash_chunk(data)


def test_hash_differs_for_different_data() -> None:
    assert hashing.hash_chunk(b"chunk-1") != hashing.hash_chunk(b"chunk-2")


def test_hash_accepts_bytearray_and_memoryview() -> None:
    data = b"buffer types"
    expected = hashing.hash_chunk(data)
    assert hashing.hash_chunk(bytearray(data)) == expected
    assert hashing.hash_chunk(memoryview(data)) == expected


def test_hash_large_input() -> None:
    """Inputs spanning many BLAKE3 chunks still hash deterministically."""
    data = b"itreallydoesntmatterwhatgoeshere123" * (10**5)
    assert hashing.hash_chunk(data) == blake3(data).digest()


def test_hash_rejects_text() -> None:
    with pytest.raises(InvalidArgument):
        hashing.hash_chunk("text")


# ==============================================================================
# Keyed hashing
# ==============================================================================

def test_keyed_hash_matches_blake3_keyed_mode() -> None:
    key = bytes(range(32))
    data = b"authenticated content"
    assert hashing.hash_chunk_keyed(data, key) == blake3(data, key=key).digest()


def test_keyed_hash_deterministic() -> None:
    key = b"\x42" * 32
    assert hashing.hash_chunk_keyed(b"Test data", key) == hashing.hash_chunk_keyed(b"Test data", key)
    assert len(hashing.hash_chunk_keyed(b"Test data", key)) == 32


def test_keyed_hash_key_sensitivity() -> None:
    data = b"Test data"
    assert hashing.hash_chunk_keyed(data, b"\x01" * 32) != hashing.hash_chunk_keyed(data, b"\x02" * 32)


def test_keyed_hash_differs_from_unkeyed() -> None:
    data = b"Test data"
    assert hashing.hash_chunk_keyed(data, b"\x00" * 32) != hashing.hash_chunk(data)


@pytest.mark.parametrize("bad_len", [0, 16, 31, 33])
def test_keyed_hash_rejects_bad_key(monkeypatch, bad_len) -> None:
    def boom(*args, **kwargs):
        raise AssertionError("hash must not run for invalid key")

    monkeypatch.setattr(hashing, "blake3", boom)
    with pytest.raises(InvalidArgument, match="key must be exactly 32 bytes") as exc:
        hashing.hash_chunk_keyed(b"data", b"k" * bad_len)
    assert exc.value.actual == bad_len
