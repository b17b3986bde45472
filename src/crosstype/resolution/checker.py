# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Name-based inheritance checks with an optional result cache."""

from __future__ import annotations

from ..cache.in_memory import InheritanceCache
from ..errors import NotFoundError
from .resolver import ChainResolver


class InheritanceChecker:
    """Answer "does ``child`` extend ``parent``?" for catalogued class names."""

    def __init__(
        self,
        resolver: ChainResolver,
        cache: InheritanceCache | None = None,
        *,
        use_cache: bool = True,
    ) -> None:
        self._resolver = resolver
        self._cache = cache if cache is not None else InheritanceCache()
        self._use_cache = use_cache

    @property
    def cache(self) -> InheritanceCache:
        """Return the cache backing the checker."""

        return self._cache

    def inherit_from(self, child: str, parent: str, use_cache: bool | None = None) -> bool:
        """Return ``True`` when ``child`` equals or descends from ``parent``.

        Args:
            child: Name of the candidate descendant.
            parent: Name of the candidate ancestor.
            use_cache: Consult the cache first; ``False`` recomputes and
                overwrites the cached entry. ``None`` uses the checker default.

        Returns:
            bool: Whether ``parent`` appears in the ancestor chain of ``child``.

        Raises:
            NotFoundError: If either name resolves in no partition.
        """

        catalog = self._resolver.catalog
        for name in (child, parent):
            if not catalog.contains(name):
                raise NotFoundError(name)
        if child == parent:
            return True
        consult = self._use_cache if use_cache is None else use_cache
        if consult:
            cached = self._cache.get(child, parent)
            if cached is not None:
                return cached
        result = parent in self._resolver.chain_for_name(child, readable_names=True)
        self._cache.set(child, parent, result)
        return result


__all__ = ["InheritanceChecker"]
