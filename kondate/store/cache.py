from __future__ import annotations

import threading
import time
from typing import Any

from ..meals.models import Genre, Recipe
from .base import RecipeStore

_DEFAULT_TTL = 300  # 5 minutes


class CachedRecipeStore:
    """
    Per-genre TTL cache in front of another recipe store.

    Shared across request threads; the lock covers the cache dict and the
    counters, not the inner fetch. Failed fetches are not cached. Callers get
    a fresh list each time so the cached pool cannot be reordered from outside.
    """

    def __init__(self, inner: RecipeStore, ttl_seconds: float = _DEFAULT_TTL) -> None:
        self.inner = inner
        self.ttl_seconds = ttl_seconds
        self._cache: dict[Genre, dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    def fetch_recipes_by_genre(self, genre: Genre) -> list[Recipe]:
        with self._lock:
            entry = self._cache.get(genre)
            if entry and time.time() - entry["created_at"] < self.ttl_seconds:
                self._hits += 1
                return list(entry["value"])
            self._cache.pop(genre, None)
            self._misses += 1

        recipes = self.inner.fetch_recipes_by_genre(genre)
        with self._lock:
            self._cache[genre] = {"value": tuple(recipes), "created_at": time.time()}
        return list(recipes)

    def stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
