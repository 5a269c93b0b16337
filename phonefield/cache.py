"""
In-memory memoization for dial-code matching.

Entries are keyed on `(prefix, catalog version, default iso2)`. The cache holds no
state anything depends on for correctness: clearing it, or a miss, only means
recomputing.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

V = TypeVar("V")

_MISSING = object()


def make_cache_key(prefix: str, catalog_version: int, default_iso2: str | None) -> tuple[str, int, str]:
    return (prefix, catalog_version, default_iso2 or "")


@dataclass(frozen=True, slots=True)
class CacheStats:
    hits: int = 0
    misses: int = 0
    size: int = 0


class MemoCache(Generic[V]):
    """Bounded LRU mapping; `None` is a valid cached value."""

    def __init__(self, max_entries: int = 4096) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max = max_entries
        self._data: OrderedDict[Hashable, V | None] = OrderedDict()
        self._hits = 0
        self._misses = 0

    def lookup(self, key: Hashable) -> tuple[bool, V | None]:
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            self._misses += 1
            return False, None
        self._hits += 1
        self._data.move_to_end(key)
        return True, value  # type: ignore[return-value]

    def store(self, key: Hashable, value: V | None) -> None:
        self._data[key] = value
        self._data.move_to_end(key)
        while len(self._data) > self._max:
            self._data.popitem(last=False)

    def discard_stale(self, catalog_version: int) -> int:
        """Drop entries computed against other catalog versions."""

        stale = [k for k in self._data if isinstance(k, tuple) and k[1] != catalog_version]
        for k in stale:
            del self._data[k]
        return len(stale)

    def clear(self) -> None:
        self._data.clear()

    def stats(self) -> CacheStats:
        return CacheStats(hits=self._hits, misses=self._misses, size=len(self._data))
