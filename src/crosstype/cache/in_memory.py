# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lock-guarded memo of inheritance query results."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Final, TypeAlias

PairKey: TypeAlias = tuple[str, str]


@dataclass(frozen=True, slots=True)
class CacheInfo:
    """Use this container to describe cache state metadata.

    Attributes:
        current_size: Number of cached entries currently stored.
        hits: Number of lookups answered from the cache.
        misses: Number of lookups that found no entry.
    """

    current_size: int
    hits: int
    misses: int


class InheritanceCache:
    """Map ordered ``(child, parent)`` pairs to inheritance results.

    Keys are directional: ``(A, B)`` and ``(B, A)`` are independent entries.
    Every read and write holds the lock, so the cache may be shared between
    host callback threads.
    """

    def __init__(self) -> None:
        self._store: dict[PairKey, bool] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, child: str, parent: str) -> bool | None:
        """Return the cached result for ``(child, parent)`` when present."""

        with self._lock:
            value = self._store.get((child, parent))
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def set(self, child: str, parent: str, value: bool) -> None:
        """Store ``value`` for ``(child, parent)``, replacing any previous entry."""

        with self._lock:
            self._store[(child, parent)] = value

    def invalidate(self, child: str | None = None, parent: str | None = None) -> int:
        """Drop the entries matching ``child`` and/or ``parent``.

        Args:
            child: Child name to match, ``None`` matches any child.
            parent: Parent name to match, ``None`` matches any parent.

        Returns:
            int: Number of entries removed.
        """

        with self._lock:
            doomed = [
                key
                for key in self._store
                if (child is None or key[0] == child) and (parent is None or key[1] == parent)
            ]
            for key in doomed:
                del self._store[key]
            return len(doomed)

    def clear(self) -> None:
        """Reset cached entries and hit tracking."""

        with self._lock:
            self._store.clear()
            self._hits = 0
            self._misses = 0

    def cache_info(self) -> CacheInfo:
        """Return the current size and hit/miss counters."""

        with self._lock:
            return CacheInfo(current_size=len(self._store), hits=self._hits, misses=self._misses)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store


__all__: Final = ["CacheInfo", "InheritanceCache", "PairKey"]
