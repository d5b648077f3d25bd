"""Digests for cache keys and stored template checksums.

xxhash64 keys the generation cache (fast, per process). SHA256 checksums
saved template blobs, where the value outlives the process.
"""

from typing import Protocol
from enum import Enum
import hashlib

import xxhash


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"  # cache keys
    SHA256 = "sha256"      # template checksums


class Hasher(Protocol):
    def digest(self, data: bytes) -> str:
        """Hex digest of data."""
        ...


class XXHasher:
    def digest(self, data: bytes) -> str:
        return xxhash.xxh64(data).hexdigest()


class SHA256Hasher:
    def digest(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()


_HASHERS: dict[Algorithm, Hasher] = {
    Algorithm.XXHASH64: XXHasher(),
    Algorithm.SHA256: SHA256Hasher(),
}


def create_hasher(algorithm: Algorithm = Algorithm.XXHASH64) -> Hasher:
    """
    Hasher for an algorithm (instances are stateless and shared).

    Raises:
        ValueError: If the algorithm is unknown
    """
    try:
        return _HASHERS[Algorithm(algorithm)]
    except ValueError:
        raise ValueError(f"Unknown algorithm: {algorithm}") from None


def hash_string(text: str, algorithm: Algorithm = Algorithm.XXHASH64, truncate: int | None = None) -> str:
    """
    Hash string to hex digest.

    Examples:
        >>> len(hash_string("test", Algorithm.SHA256, truncate=16))
        16
    """
    digest = create_hasher(algorithm).digest(text.encode("utf-8"))
    return digest[:truncate] if truncate else digest


def hash_fields(*fields: str, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """Hash several fields as one key; the null separator keeps ("ab", "c") and ("a", "bc") apart."""
    return hash_string("\x00".join(fields), algorithm)


def checksum(blob: str) -> str:
    """Short SHA256 checksum of a serialized document."""
    return hash_string(blob, Algorithm.SHA256, truncate=16)


__all__ = [
    "Algorithm",
    "Hasher",
    "checksum",
    "create_hasher",
    "hash_string",
    "hash_fields",
]
