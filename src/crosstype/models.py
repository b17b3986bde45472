# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Value objects shared by the catalog, the resolver, and host adapters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Final


class ClassOrigin(str, Enum):
    """Enumerate the type systems that may declare a class."""

    NATIVE = "native"
    SCRIPTED_A = "scripted_a"
    SCRIPTED_B = "scripted_b"

    @property
    def is_scripted(self) -> bool:
        """Return ``True`` for the scripted origin kinds."""

        return self is not ClassOrigin.NATIVE


SCRIPTED_ORIGINS: Final[tuple[ClassOrigin, ...]] = (ClassOrigin.SCRIPTED_A, ClassOrigin.SCRIPTED_B)

_EMPTY_PROPERTIES: Final[Mapping[str, Any]] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ClassDescriptor:
    """Describe one declared class regardless of the type system it came from.

    Only ``origin`` and ``name`` take part in equality and hashing, so a
    descriptor can be compared directly against ancestor chain entries.

    Attributes:
        name: Identifier unique within ``origin``.
        origin: Type system that declared the class.
        base_name: Immediate ancestor within the same origin, ``""`` for roots
            and for scripted classes sitting on the native boundary.
        instantiable: Whether the host can construct the class directly.
        declared_member_count: Number of members the class exposes.
        native_base: Native class a scripted hierarchy falls through to.
        load_path: Host path the scripted descriptor was loaded from.
        properties: Read-only class constants exposed by scripted classes.
    """

    name: str
    origin: ClassOrigin
    base_name: str = field(default="", compare=False)
    instantiable: bool = field(default=True, compare=False)
    declared_member_count: int = field(default=0, compare=False)
    native_base: str = field(default="", compare=False)
    load_path: str = field(default="", compare=False)
    properties: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_PROPERTIES, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """Entry of the host's global scripted-class enumeration."""

    name: str
    origin_hint: str
    base_path_or_name: str
    load_path: str


@dataclass(frozen=True, slots=True)
class NativeClassInfo:
    """Entry of the host's native class enumeration."""

    name: str
    instantiable: bool
    member_count: int
    base_name: str = ""


@dataclass(frozen=True, slots=True)
class LoadedScript:
    """Scripted class payload returned by the host's descriptor loader."""

    name: str
    base_name: str = ""
    instantiable: bool = True
    member_count: int = 0
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class HostObject:
    """Object handle understood by the bundled reference hosts."""

    class_name: str | None
    script_name: str | None = None


class DiagnosticKind(str, Enum):
    """Enumerate the non-fatal conditions recorded while building a catalog."""

    LOAD_FAILURE = "load_failure"
    UNKNOWN_ORIGIN = "unknown_origin"
    DUPLICATE_NAME = "duplicate_name"
    AMBIGUOUS_NAME = "ambiguous_name"
    BROKEN_ANCESTRY = "broken_ancestry"


@dataclass(frozen=True, slots=True)
class CatalogDiagnostic:
    """Non-fatal build finding attached to the catalog it was produced for."""

    kind: DiagnosticKind
    subject: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.subject}: {self.message}"


__all__ = [
    "SCRIPTED_ORIGINS",
    "CatalogDiagnostic",
    "ClassDeclaration",
    "ClassDescriptor",
    "ClassOrigin",
    "DiagnosticKind",
    "HostObject",
    "LoadedScript",
    "NativeClassInfo",
]
