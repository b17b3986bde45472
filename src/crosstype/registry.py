# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public entry point tying the catalog, resolver, checker, and cache together."""

from __future__ import annotations

import logging
from threading import Lock
from typing import TypeVar

from .cache.in_memory import InheritanceCache
from .catalog.builder import CatalogBuilder
from .catalog.model_catalog import ClassCatalog
from .config import RegistrySettings
from .errors import CatalogIntegrityError, InitializationError
from .host.protocol import HostRuntime
from .models import CatalogDiagnostic, ClassDescriptor, ClassOrigin
from .resolution.checker import InheritanceChecker
from .resolution.resolver import AncestorChain, ChainResolver

LOGGER = logging.getLogger(__name__)

ComponentT = TypeVar("ComponentT")


class TypeRegistry:
    """Own the lifecycle of one catalog and serve ancestry queries against it.

    The registry is constructed explicitly and injected wherever queries are
    needed. :meth:`initialize` builds the catalog exactly once; if the build
    fails, the failure is logged once and every later query raises
    :class:`InitializationError` chained to the underlying cause. Queries issued
    before :meth:`initialize` raise :class:`InitializationError` as well.
    """

    def __init__(self, host: HostRuntime, settings: RegistrySettings | None = None) -> None:
        self._host = host
        self._settings = settings or RegistrySettings()
        self._lock = Lock()
        self._catalog: ClassCatalog | None = None
        self._resolver: ChainResolver | None = None
        self._checker: InheritanceChecker | None = None
        self._failure: InitializationError | None = None
        self._cache = InheritanceCache()

    @classmethod
    def from_catalog(
        cls,
        catalog: ClassCatalog,
        host: HostRuntime,
        settings: RegistrySettings | None = None,
    ) -> TypeRegistry:
        """Return a ready registry serving a catalog built elsewhere."""

        registry = cls(host, settings)
        with registry._lock:
            registry._install(catalog)
        return registry

    @property
    def settings(self) -> RegistrySettings:
        """Return the settings the registry was created with."""

        return self._settings

    @property
    def cache(self) -> InheritanceCache:
        """Return the inheritance cache shared by all checks."""

        return self._cache

    @property
    def is_ready(self) -> bool:
        """Return ``True`` once a catalog was built successfully."""

        return self._catalog is not None

    @property
    def catalog(self) -> ClassCatalog:
        """Return the frozen catalog.

        Raises:
            InitializationError: If the catalog is not available.
        """

        return self._require(self._catalog)

    @property
    def diagnostics(self) -> tuple[CatalogDiagnostic, ...]:
        """Return the non-fatal findings recorded while building the catalog."""

        return self.catalog.diagnostics

    def initialize(self) -> ClassCatalog:
        """Build the catalog on first call and return it.

        Returns:
            ClassCatalog: The frozen catalog.

        Raises:
            InitializationError: If the build failed, now or on an earlier call.
        """

        with self._lock:
            if self._catalog is None and self._failure is None:
                try:
                    catalog = CatalogBuilder(self._host, self._settings).build()
                except InitializationError as exc:
                    self._fail(exc)
                except (CatalogIntegrityError, OSError) as exc:
                    error = InitializationError(f"catalog unusable: {exc}")
                    error.__cause__ = exc
                    self._fail(error)
                else:
                    self._install(catalog)
        return self.catalog

    def extending_from(self, obj: object, readable_names: bool = False) -> AncestorChain:
        """Return the ancestor chain of ``obj``; see :meth:`ChainResolver.extending_from`."""

        return self._require(self._resolver).extending_from(obj, readable_names)

    def inherit_from(self, child: str, parent: str, use_cache: bool | None = None) -> bool:
        """Return whether ``child`` extends ``parent``; see :meth:`InheritanceChecker.inherit_from`."""

        return self._require(self._checker).inherit_from(child, parent, use_cache)

    def get_native_descriptor(self, name: str, check_exists: bool = True) -> ClassDescriptor | None:
        """Return the native descriptor called ``name``.

        Descriptors are meant for comparison against chain entries only.

        Args:
            name: Native class name.
            check_exists: Raise on a miss instead of returning ``None``.

        Returns:
            ClassDescriptor | None: Matching descriptor, ``None`` on a miss
            when ``check_exists`` is ``False``.

        Raises:
            NotFoundError: If ``name`` is not catalogued and ``check_exists`` is set.
        """

        return self._descriptor(ClassOrigin.NATIVE, name, check_exists)

    def get_scripted_descriptor(
        self,
        origin: ClassOrigin,
        name: str,
        check_exists: bool = True,
    ) -> ClassDescriptor | None:
        """Return the scripted descriptor called ``name`` from ``origin``.

        Args:
            origin: Scripted partition to search.
            name: Scripted class name.
            check_exists: Raise on a miss instead of returning ``None``.

        Returns:
            ClassDescriptor | None: Matching descriptor, ``None`` on a miss
            when ``check_exists`` is ``False``.

        Raises:
            ValueError: If ``origin`` is the native partition.
            NotFoundError: If ``name`` is not catalogued and ``check_exists`` is set.
        """

        if not origin.is_scripted:
            raise ValueError("use get_native_descriptor() for native classes")
        return self._descriptor(origin, name, check_exists)

    def _descriptor(self, origin: ClassOrigin, name: str, check_exists: bool) -> ClassDescriptor | None:
        catalog = self.catalog
        if check_exists:
            return catalog.lookup(origin, name)
        return catalog.find(origin, name)

    def _install(self, catalog: ClassCatalog) -> None:
        resolver = ChainResolver(catalog, self._host, nil_name=self._settings.nil_name)
        self._resolver = resolver
        self._checker = InheritanceChecker(resolver, self._cache, use_cache=self._settings.use_cache)
        self._catalog = catalog

    def _fail(self, error: InitializationError) -> None:
        self._failure = error
        LOGGER.error("type catalog initialization failed: %s", error)

    def _require(self, component: ComponentT | None) -> ComponentT:
        if self._failure is not None:
            raise InitializationError(str(self._failure)) from self._failure
        if component is None:
            raise InitializationError("type catalog has not been initialized")
        return component


__all__ = ["TypeRegistry"]
