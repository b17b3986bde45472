# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build a :class:`ClassCatalog` from the host's reflection primitives."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from ..config import RegistrySettings
from ..errors import CatalogIntegrityError, InitializationError, LoadFailure
from ..host.protocol import HostRuntime
from ..models import (
    SCRIPTED_ORIGINS,
    CatalogDiagnostic,
    ClassDeclaration,
    ClassDescriptor,
    ClassOrigin,
    DiagnosticKind,
    LoadedScript,
    NativeClassInfo,
)
from .model_catalog import ClassCatalog

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _LoadedEntry:
    """Scripted class that loaded successfully, with its reconciled base."""

    origin: ClassOrigin
    declaration: ClassDeclaration
    script: LoadedScript
    base: str


@dataclass(slots=True)
class CatalogBuilder:
    """Partition host classes into a frozen catalog.

    A builder is single use: :meth:`build` runs once, on one thread, before any
    query is served.
    """

    host: HostRuntime
    settings: RegistrySettings = field(default_factory=RegistrySettings)
    _diagnostics: list[CatalogDiagnostic] = field(init=False, default_factory=list, repr=False)

    def build(self) -> ClassCatalog:
        """Enumerate, load, filter, and freeze the host's classes.

        Returns:
            ClassCatalog: Immutable catalog of all loadable classes.

        Raises:
            InitializationError: If the anchor class is missing.
            CatalogIntegrityError: If the anchor's exclusion property is malformed.
        """

        self._diagnostics.clear()
        declarations = tuple(self.host.enumerate_declared_classes())
        path_to_name = {declaration.load_path: declaration.name for declaration in declarations}
        entries = self._load_scripts(declarations, path_to_name)
        anchor_entry = self._find_anchor(entries)
        excluded = self._excluded_names(anchor_entry)

        native_infos = tuple(self.host.enumerate_native_classes())
        lineage = {info.name: info.base_name for info in native_infos}
        native = self._build_native(native_infos, lineage, excluded)

        declared_bases = _declared_bases(declarations, path_to_name, self.settings)
        scripted = {
            origin: self._build_scripted(
                [entry for entry in entries if entry.origin is origin],
                declared_bases.get(origin, {}),
                lineage,
            )
            for origin in SCRIPTED_ORIGINS
        }
        self._flag_ambiguous(scripted)

        anchor = scripted[anchor_entry.origin].get(anchor_entry.declaration.name)
        if anchor is None:
            raise InitializationError(f"anchor class '{self.settings.anchor_name}' has a broken ancestry")
        return ClassCatalog(
            native=MappingProxyType(native),
            scripted_a=MappingProxyType(scripted[ClassOrigin.SCRIPTED_A]),
            scripted_b=MappingProxyType(scripted[ClassOrigin.SCRIPTED_B]),
            excluded_names=excluded,
            anchor=anchor,
            native_lineage=MappingProxyType(lineage),
            diagnostics=tuple(self._diagnostics),
        )

    def _record(self, kind: DiagnosticKind, subject: str, message: str) -> None:
        """Store a build diagnostic and log it once."""

        diagnostic = CatalogDiagnostic(kind=kind, subject=subject, message=message)
        self._diagnostics.append(diagnostic)
        LOGGER.warning("catalog build: %s", diagnostic)

    def _load_scripts(
        self,
        declarations: Sequence[ClassDeclaration],
        path_to_name: Mapping[str, str],
    ) -> list[_LoadedEntry]:
        """Load every declared scripted class, isolating per-class failures.

        The first declaration of a name claims it even when its load fails, so
        later declarations of that name are reported as duplicates.

        Args:
            declarations: Host enumeration of scripted classes.
            path_to_name: Load path to class name map used to reconcile bases.

        Returns:
            list[_LoadedEntry]: Successfully loaded classes in declaration order.
        """

        entries: list[_LoadedEntry] = []
        seen: dict[ClassOrigin, set[str]] = {origin: set() for origin in SCRIPTED_ORIGINS}
        for declaration in declarations:
            origin = self.settings.origin_for_hint(declaration.origin_hint)
            if origin is None:
                self._record(
                    DiagnosticKind.UNKNOWN_ORIGIN,
                    declaration.name,
                    f"unrecognised origin hint '{declaration.origin_hint}'",
                )
                continue
            if declaration.name in seen[origin]:
                self._record(
                    DiagnosticKind.DUPLICATE_NAME,
                    declaration.name,
                    f"already declared in the {origin.value} partition; {declaration.load_path} ignored",
                )
                continue
            seen[origin].add(declaration.name)
            try:
                script = self.host.load_scripted_descriptor(declaration.load_path)
                if script is None:
                    raise LoadFailure(declaration.load_path)
            except LoadFailure as exc:
                self._record(DiagnosticKind.LOAD_FAILURE, declaration.name, str(exc))
                continue
            except OSError as exc:
                self._record(DiagnosticKind.LOAD_FAILURE, declaration.name, f"{declaration.load_path}: {exc}")
                continue
            raw_base = script.base_name or declaration.base_path_or_name
            entries.append(
                _LoadedEntry(
                    origin=origin,
                    declaration=declaration,
                    script=script,
                    base=path_to_name.get(raw_base, raw_base),
                ),
            )
        return entries

    def _find_anchor(self, entries: Iterable[_LoadedEntry]) -> _LoadedEntry:
        """Return the loaded anchor class.

        Raises:
            InitializationError: If no loaded class matches the anchor name and base.
        """

        candidates = {entry.origin: entry for entry in entries if entry.declaration.name == self.settings.anchor_name}
        for origin in SCRIPTED_ORIGINS:
            entry = candidates.get(origin)
            if entry is not None and entry.base == self.settings.anchor_base:
                return entry
        if candidates:
            bases = ", ".join(sorted({entry.base or "<none>" for entry in candidates.values()}))
            raise InitializationError(
                f"anchor class '{self.settings.anchor_name}' extends {bases}, "
                f"expected '{self.settings.anchor_base}'",
            )
        raise InitializationError(
            f"anchor class '{self.settings.anchor_name}' is not declared or failed to load",
        )

    def _excluded_names(self, anchor: _LoadedEntry) -> frozenset[str]:
        """Return the native names the anchor asks to exclude.

        Raises:
            CatalogIntegrityError: If the property is not a collection of strings.
        """

        raw = anchor.script.properties.get(self.settings.exclusion_property)
        if raw is None:
            return frozenset()
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
            raise CatalogIntegrityError(
                f"{anchor.declaration.load_path}: expected '{self.settings.exclusion_property}' to be a list of names",
            )
        names = tuple(raw)
        if not all(isinstance(name, str) for name in names):
            raise CatalogIntegrityError(
                f"{anchor.declaration.load_path}: '{self.settings.exclusion_property}' must only contain strings",
            )
        return frozenset(names)

    def _build_native(
        self,
        infos: Sequence[NativeClassInfo],
        lineage: Mapping[str, str],
        excluded: frozenset[str],
    ) -> dict[str, ClassDescriptor]:
        """Filter native classes and link each one to its nearest kept ancestor.

        Classes that are neither instantiable nor expose members are left out,
        as are excluded names and classes whose lineage is unknown or cyclic.
        """

        broken = self._broken_native_lineage(lineage)
        kept = {
            info.name: info
            for info in infos
            if info.name not in broken
            and info.name not in excluded
            and (info.instantiable or info.member_count > 0)
        }
        native: dict[str, ClassDescriptor] = {}
        for name, info in kept.items():
            base = info.base_name
            while base and base not in kept:
                base = lineage.get(base, "")
            native[name] = ClassDescriptor(
                name=name,
                origin=ClassOrigin.NATIVE,
                base_name=base,
                instantiable=info.instantiable,
                declared_member_count=info.member_count,
            )
        return native

    def _broken_native_lineage(self, lineage: Mapping[str, str]) -> set[str]:
        """Return native names whose ancestry is dangling or loops."""

        broken: set[str] = set()
        for name in lineage:
            path: list[str] = [name]
            current = lineage[name]
            problem: str | None = None
            while current:
                if current not in lineage:
                    problem = f"base '{current}' is not a known native class"
                    break
                if current in path:
                    problem = f"inheritance cycle through '{current}'"
                    break
                path.append(current)
                current = lineage[current]
            if problem is not None:
                broken.add(name)
                self._record(DiagnosticKind.BROKEN_ANCESTRY, name, problem)
        return broken

    def _build_scripted(
        self,
        entries: Sequence[_LoadedEntry],
        declared_bases: Mapping[str, str],
        lineage: Mapping[str, str],
    ) -> dict[str, ClassDescriptor]:
        """Create the descriptors of one scripted partition.

        A base that is another loaded class of the partition becomes
        ``base_name``; anything else marks the boundary, and ``native_base`` is
        found by following declared bases until a native name is reached.
        """

        bases = {entry.declaration.name: entry.base for entry in entries}
        cyclic = self._cyclic_scripted(bases)
        partition: dict[str, ClassDescriptor] = {}
        for entry in entries:
            name = entry.declaration.name
            if name in cyclic:
                continue
            in_partition = entry.base in bases and entry.base not in cyclic
            partition[name] = ClassDescriptor(
                name=name,
                origin=entry.origin,
                base_name=entry.base if in_partition else "",
                instantiable=entry.script.instantiable,
                declared_member_count=entry.script.member_count,
                native_base=_native_boundary(entry.base, declared_bases, lineage),
                load_path=entry.declaration.load_path,
                properties=MappingProxyType(dict(entry.script.properties)),
            )
        return partition

    def _cyclic_scripted(self, bases: Mapping[str, str]) -> set[str]:
        """Return scripted names that take part in an inheritance cycle."""

        cyclic: set[str] = set()
        for name in bases:
            path: list[str] = []
            current = name
            while current in bases and current not in path:
                path.append(current)
                current = bases[current]
            if current in path:
                members = path[path.index(current) :]
                for member in members:
                    if member not in cyclic:
                        cyclic.add(member)
                        self._record(
                            DiagnosticKind.BROKEN_ANCESTRY,
                            member,
                            "scripted inheritance cycle: " + " -> ".join((*members, current)),
                        )
        return cyclic

    def _flag_ambiguous(self, scripted: Mapping[ClassOrigin, Mapping[str, ClassDescriptor]]) -> None:
        """Record names declared by both scripted partitions."""

        first, second = SCRIPTED_ORIGINS
        for name in sorted(scripted[first].keys() & scripted[second].keys()):
            self._record(
                DiagnosticKind.AMBIGUOUS_NAME,
                name,
                f"declared in both {first.value} and {second.value}; {first.value} takes precedence",
            )


def _declared_bases(
    declarations: Iterable[ClassDeclaration],
    path_to_name: Mapping[str, str],
    settings: RegistrySettings,
) -> dict[ClassOrigin, dict[str, str]]:
    """Return declared bases per scripted origin, including unloadable classes."""

    bases: dict[ClassOrigin, dict[str, str]] = {}
    for declaration in declarations:
        origin = settings.origin_for_hint(declaration.origin_hint)
        if origin is None:
            continue
        raw = declaration.base_path_or_name
        bases.setdefault(origin, {}).setdefault(declaration.name, path_to_name.get(raw, raw))
    return bases


def _native_boundary(base: str, declared_bases: Mapping[str, str], lineage: Mapping[str, str]) -> str:
    """Follow scripted bases from ``base`` until a native class name is reached."""

    seen: set[str] = set()
    current = base
    while current in declared_bases and current not in seen:
        seen.add(current)
        current = declared_bases[current]
    return current if current in lineage else ""


def build_catalog(host: HostRuntime, settings: RegistrySettings | None = None) -> ClassCatalog:
    """Build a catalog from ``host`` using ``settings`` or the defaults."""

    return CatalogBuilder(host, settings or RegistrySettings()).build()


__all__ = ["CatalogBuilder", "build_catalog"]
