"""Tests for caching."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, strategies as st

from codegen.cache import GenerationCache
from codegen.types import GeneratedCode, GeneratedFile, FileKind
from core import cache as cache_module
from core.cache import LRUCache


def test_basic_operations():
    """Test set, get and membership."""
    cache = LRUCache[str](max_size=2)
    cache.set("a", "1")
    assert cache.get("a") == "1"
    assert "a" in cache
    assert cache.get("missing") is None
    assert len(cache) == 1


def test_invalid_size():
    with pytest.raises(ValueError):
        LRUCache(max_size=0)


def test_eviction_order():
    """Least recently used entry goes first."""
    cache = LRUCache[int](max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    assert cache.stats.evictions == 1


def test_ttl_expiry(monkeypatch):
    now = [100.0]
    monkeypatch.setattr(cache_module.time, "monotonic", lambda: now[0])

    cache = LRUCache[str](max_size=4, ttl_seconds=10)
    cache.set("a", "1")
    now[0] = 109.0
    assert cache.get("a") == "1"
    now[0] = 110.0
    assert cache.get("a") is None
    assert len(cache) == 0


def test_stats():
    cache = LRUCache[int](max_size=4)
    cache.set("a", 1)
    cache.get("a")
    cache.get("b")

    stats = cache.stats.to_dict()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 0.5
    assert stats["size"] == 1


def test_clear():
    cache = LRUCache[int](max_size=4)
    cache.set("a", 1)
    cache.clear()
    assert len(cache) == 0
    assert cache.stats.size == 0


def test_generation_cache_copies():
    """Mutating a returned bundle never touches the stored one."""
    cache = GenerationCache(max_size=2)
    code = GeneratedCode(
        files=[GeneratedFile(path="app.json", content="{}", kind=FileKind.CONFIG)],
        dependencies=["react"],
        instructions=[],
    )
    cache.set("key", code)
    code.dependencies.append("mutated")

    first = cache.get("key")
    assert first.dependencies == ["react"]
    first.files.clear()
    assert len(cache.get("key").files) == 1
    assert cache.stats.hits == 2


def test_concurrent_get_and_set():
    """Eviction racing with lookups never surfaces an error."""
    cache = LRUCache[int](max_size=2)

    def churn(worker: int) -> int:
        hits = 0
        for i in range(2000):
            key = f"k{(worker + i) % 5}"
            cache.set(key, i)
            if cache.get(key) is not None:
                hits += 1
        return hits

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(churn, range(8)))

    assert len(results) == 8
    assert len(cache) <= 2
    stats = cache.stats
    assert stats.hits + stats.misses == 8 * 2000


@given(st.lists(st.text(min_size=1), min_size=1, max_size=50))
def test_size_never_exceeds_max(keys):
    cache = LRUCache[int](max_size=8)
    for i, key in enumerate(keys):
        cache.set(key, i)
    assert len(cache) <= 8
    assert cache.get(keys[-1]) == len(keys) - 1
