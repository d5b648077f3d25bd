"""Generation Cache - lightweight wrapper around generic LRU cache."""

from canvas.model import Document
from core import LRUCache, dumps_compact, hash_fields
from .types import ExportOptions, GeneratedCode


def fingerprint(document: Document, options: ExportOptions) -> str:
    """Stable digest of a (document, options) pair."""
    return hash_fields(
        dumps_compact(document.model_dump(mode="json"), sort_keys=True),
        dumps_compact(options.model_dump(mode="json"), sort_keys=True),
    )


class GenerationCache:
    """
    Type-safe LRU cache for export bundles.

    Hands out deep copies so callers can never mutate a cached bundle.
    """

    def __init__(self, max_size: int = 32, ttl_seconds: int | None = 600) -> None:
        self._cache: LRUCache[GeneratedCode] = LRUCache(max_size=max_size, ttl_seconds=ttl_seconds)

    def get(self, key: str) -> GeneratedCode | None:
        cached = self._cache.get(key)
        return cached.model_copy(deep=True) if cached is not None else None

    def set(self, key: str, code: GeneratedCode) -> None:
        self._cache.set(key, code.model_copy(deep=True))

    def clear(self) -> None:
        self._cache.clear()

    @property
    def stats(self):
        """Get cache statistics."""
        return self._cache.stats


__all__ = ["GenerationCache", "fingerprint"]
