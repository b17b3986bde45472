# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Ancestor chain resolution spanning scripted and native hierarchies."""

from __future__ import annotations

import logging
from typing import TypeAlias

from ..catalog.model_catalog import ClassCatalog
from ..errors import NotFoundError
from ..host.protocol import HostRuntime
from ..models import SCRIPTED_ORIGINS, ClassDescriptor

LOGGER = logging.getLogger(__name__)

AncestorEntry: TypeAlias = ClassDescriptor | str
AncestorChain: TypeAlias = tuple[AncestorEntry, ...]


class ChainResolver:
    """Compute leaf-to-root ancestor chains against a frozen catalog.

    Chains are computed eagerly on every call and never memoized here. Scripted
    ancestors always precede native ones, and the universal native root is the
    last entry whenever a native class could be resolved.
    """

    def __init__(self, catalog: ClassCatalog, host: HostRuntime, *, nil_name: str = "Nil") -> None:
        self._catalog = catalog
        self._host = host
        self._nil_name = nil_name

    @property
    def catalog(self) -> ClassCatalog:
        """Return the catalog chains are resolved against."""

        return self._catalog

    def extending_from(self, obj: object, readable_names: bool = False) -> AncestorChain:
        """Return the ancestor chain of ``obj``.

        The scripted class attached to ``obj`` is resolved in scripted A, then
        scripted B, and walked to the boundary; the object's native class is then
        walked to the root. A scripted name found in neither partition is
        skipped and resolution continues with the native class.

        Args:
            obj: Host object handle.
            readable_names: Emit class names instead of descriptors.

        Returns:
            AncestorChain: Leaf-first chain, or ``(nil_name,)`` when nothing
            about ``obj`` resolves.
        """

        scripted: list[ClassDescriptor] = []
        script_name = self._host.get_declared_script_name(obj)
        if script_name:
            leaf = self._resolve_scripted(script_name)
            if leaf is None:
                LOGGER.debug("script class '%s' is not catalogued; using the native class only", script_name)
            else:
                scripted = self._scripted_chain(leaf)
        boundary = scripted[-1].native_base if scripted else ""
        runtime_name = self._host.get_runtime_class_name(obj) or boundary
        return self._emit([*scripted, *self._native_chain(runtime_name)], readable_names)

    def chain_for_name(self, name: str, readable_names: bool = False) -> AncestorChain:
        """Return the ancestor chain of the class called ``name``.

        Args:
            name: Scripted or native class name; scripted partitions are
                searched first.
            readable_names: Emit class names instead of descriptors.

        Returns:
            AncestorChain: Leaf-first chain starting with ``name`` itself.

        Raises:
            NotFoundError: If ``name`` resolves in no partition.
        """

        origin = self._catalog.origin_of(name)
        if origin is None:
            raise NotFoundError(name)
        descriptor = self._catalog.lookup(origin, name)
        if not origin.is_scripted:
            return self._emit(self._native_chain(name), readable_names)
        scripted = self._scripted_chain(descriptor)
        return self._emit([*scripted, *self._native_chain(scripted[-1].native_base)], readable_names)

    def _resolve_scripted(self, name: str) -> ClassDescriptor | None:
        for origin in SCRIPTED_ORIGINS:
            descriptor = self._catalog.find(origin, name)
            if descriptor is not None:
                return descriptor
        return None

    def _scripted_chain(self, leaf: ClassDescriptor) -> list[ClassDescriptor]:
        partition = self._catalog.partition(leaf.origin)
        chain = [leaf]
        current = partition.get(leaf.base_name) if leaf.base_name else None
        while current is not None and current not in chain:
            chain.append(current)
            current = partition.get(current.base_name) if current.base_name else None
        return chain

    def _native_chain(self, name: str) -> list[ClassDescriptor]:
        if not name:
            return []
        chain: list[ClassDescriptor] = []
        current = self._catalog.nearest_native(name)
        while current is not None and current not in chain:
            chain.append(current)
            current = self._catalog.native.get(current.base_name) if current.base_name else None
        return chain

    def _emit(self, chain: list[ClassDescriptor], readable_names: bool) -> AncestorChain:
        if not chain:
            return (self._nil_name,)
        if readable_names:
            return tuple(descriptor.name for descriptor in chain)
        return tuple(chain)


__all__ = ["AncestorChain", "AncestorEntry", "ChainResolver"]
