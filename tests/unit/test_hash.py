"""Tests for hash module."""

import pytest
from hypothesis import given, strategies as st

from core.hash import Algorithm, checksum, create_hasher, hash_fields, hash_string


def test_cache_key_digest():
    """xxhash64 keys are 16 hex chars and stable."""
    key = hash_string('{"nodes":[]}')
    assert len(key) == 16
    assert int(key, 16) >= 0
    assert hash_string('{"nodes":[]}') == key


def test_sha256_truncate():
    full = hash_string("template", Algorithm.SHA256)
    assert len(full) == 64
    assert hash_string("template", Algorithm.SHA256, truncate=16) == full[:16]


def test_checksum():
    assert checksum("blob") == hash_string("blob", Algorithm.SHA256)[:16]
    assert checksum("blob") != checksum("blob ")


def test_hash_fields_separates_fields():
    assert hash_fields("ab", "c") != hash_fields("a", "bc")
    assert hash_fields("document", "options") != hash_fields("options", "document")


def test_create_hasher():
    assert create_hasher("sha256") is create_hasher(Algorithm.SHA256)
    with pytest.raises(ValueError):
        create_hasher("md5")


@given(st.text(), st.sampled_from(list(Algorithm)))
def test_hash_deterministic(text, algorithm):
    """Same input always yields the same digest."""
    assert hash_string(text, algorithm) == hash_string(text, algorithm)
