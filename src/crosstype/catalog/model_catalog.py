# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Frozen, partitioned class catalog produced by :class:`CatalogBuilder`."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import NotFoundError
from ..models import SCRIPTED_ORIGINS, CatalogDiagnostic, ClassDescriptor, ClassOrigin, DiagnosticKind


@dataclass(frozen=True, slots=True)
class ClassCatalog:
    """Name-keyed class descriptors, one read-only partition per origin kind.

    Partitions are independent namespaces: a name excluded from the native
    partition may still be declared by a scripted runtime. The catalog is not
    rebuilt when the host's class set changes afterwards.

    Attributes:
        native: Native partition, already filtered and exclusion-free.
        scripted_a: First scripted partition.
        scripted_b: Second scripted partition.
        excluded_names: Native names removed at build time.
        anchor: Scripted class that supplied the exclusion set.
        native_lineage: Declared base of every enumerated native class,
            including the ones filtered out of :attr:`native`.
        diagnostics: Non-fatal findings recorded while building.
    """

    native: Mapping[str, ClassDescriptor]
    scripted_a: Mapping[str, ClassDescriptor]
    scripted_b: Mapping[str, ClassDescriptor]
    excluded_names: frozenset[str]
    anchor: ClassDescriptor
    native_lineage: Mapping[str, str]
    diagnostics: tuple[CatalogDiagnostic, ...] = ()

    def partition(self, origin: ClassOrigin) -> Mapping[str, ClassDescriptor]:
        """Return the partition holding classes declared by ``origin``."""

        if origin is ClassOrigin.NATIVE:
            return self.native
        if origin is ClassOrigin.SCRIPTED_A:
            return self.scripted_a
        return self.scripted_b

    def lookup(self, origin: ClassOrigin, name: str) -> ClassDescriptor:
        """Return the descriptor registered as ``name`` in ``origin``.

        Args:
            origin: Partition to search.
            name: Class name to resolve.

        Returns:
            ClassDescriptor: Matching descriptor.

        Raises:
            NotFoundError: If ``name`` is absent from that partition.
        """

        try:
            return self.partition(origin)[name]
        except KeyError as exc:
            raise NotFoundError(name, origin) from exc

    def find(self, origin: ClassOrigin, name: str) -> ClassDescriptor | None:
        """Return the descriptor for ``name`` in ``origin`` or ``None``."""

        return self.partition(origin).get(name)

    def origin_of(self, name: str) -> ClassOrigin | None:
        """Return the partition ``name`` resolves in, scripted partitions first.

        Scripted A wins over scripted B when both declare ``name``; such names
        are reported as :attr:`DiagnosticKind.AMBIGUOUS_NAME` at build time.
        """

        for origin in SCRIPTED_ORIGINS:
            if name in self.partition(origin):
                return origin
        if name in self.native:
            return ClassOrigin.NATIVE
        return None

    def contains(self, name: str) -> bool:
        """Return ``True`` when ``name`` resolves in any partition."""

        return self.origin_of(name) is not None

    def nearest_native(self, name: str) -> ClassDescriptor | None:
        """Return the first catalogued native class at or above ``name``.

        Walks the raw native lineage so that a runtime class filtered out of
        the native partition still resolves to its closest visible ancestor.

        Args:
            name: Native class name reported by the host.

        Returns:
            ClassDescriptor | None: Closest catalogued class, ``None`` if the
            name is unknown or its lineage never reaches a catalogued class.
        """

        seen: set[str] = set()
        current = name
        while current and current not in seen:
            descriptor = self.native.get(current)
            if descriptor is not None:
                return descriptor
            seen.add(current)
            current = self.native_lineage.get(current, "")
        return None

    def diagnostics_of(self, kind: DiagnosticKind) -> tuple[CatalogDiagnostic, ...]:
        """Return the build diagnostics of ``kind``."""

        return tuple(diagnostic for diagnostic in self.diagnostics if diagnostic.kind is kind)

    @property
    def ambiguous_names(self) -> frozenset[str]:
        """Return names declared by both scripted partitions."""

        return frozenset(self.scripted_a.keys() & self.scripted_b.keys())

    def counts(self) -> dict[ClassOrigin, int]:
        """Return the number of descriptors held by each partition."""

        return {origin: len(self.partition(origin)) for origin in ClassOrigin}


__all__ = ["ClassCatalog"]
