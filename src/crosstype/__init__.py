# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Ancestry queries across native and scripted class hierarchies."""

from __future__ import annotations

from typing import Final

from .cache import CacheInfo, InheritanceCache
from .catalog import CatalogBuilder, ClassCatalog, build_catalog
from .config import ConfigError, RegistrySettings, load_settings
from .errors import (
    CatalogIntegrityError,
    CatalogValidationError,
    CrossTypeError,
    InitializationError,
    LoadFailure,
    NotFoundError,
)
from .host import DirectoryHost, HostRuntime, InMemoryHost
from .models import (
    CatalogDiagnostic,
    ClassDeclaration,
    ClassDescriptor,
    ClassOrigin,
    DiagnosticKind,
    HostObject,
    LoadedScript,
    NativeClassInfo,
)
from .registry import TypeRegistry
from .resolution import AncestorChain, ChainResolver, InheritanceChecker

__version__: Final[str] = "0.1.0"

__all__: Final[tuple[str, ...]] = (
    "AncestorChain",
    "CacheInfo",
    "CatalogBuilder",
    "CatalogDiagnostic",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "ChainResolver",
    "ClassCatalog",
    "ClassDeclaration",
    "ClassDescriptor",
    "ClassOrigin",
    "ConfigError",
    "CrossTypeError",
    "DiagnosticKind",
    "DirectoryHost",
    "HostObject",
    "HostRuntime",
    "InMemoryHost",
    "InheritanceCache",
    "InheritanceChecker",
    "InitializationError",
    "LoadFailure",
    "LoadedScript",
    "NativeClassInfo",
    "NotFoundError",
    "RegistrySettings",
    "TypeRegistry",
    "build_catalog",
    "load_settings",
)
