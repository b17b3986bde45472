# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory host implementation backed by plain Python records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from threading import RLock

from ..errors import LoadFailure
from ..models import ClassDeclaration, HostObject, LoadedScript, NativeClassInfo


class InMemoryHost:
    """Provide host reflection primitives from records held in memory.

    Objects are expected to be :class:`~crosstype.models.HostObject` instances;
    other handles report no class at all.
    """

    def __init__(
        self,
        *,
        native_classes: Iterable[NativeClassInfo] = (),
        declarations: Iterable[ClassDeclaration] = (),
        scripts: Mapping[str, LoadedScript] | None = None,
        failing_paths: Iterable[str] = (),
    ) -> None:
        self._native_classes = list(native_classes)
        self._declarations = list(declarations)
        self._scripts: dict[str, LoadedScript] = dict(scripts or {})
        self._failing_paths = frozenset(failing_paths)
        self._load_calls: dict[str, int] = {}
        self._lock = RLock()

    def add_script(self, declaration: ClassDeclaration, script: LoadedScript | None) -> None:
        """Declare a scripted class and register its loadable payload.

        Args:
            declaration: Enumeration record for the class.
            script: Payload returned on load, ``None`` to simulate a missing file.
        """

        with self._lock:
            self._declarations.append(declaration)
            if script is not None:
                self._scripts[declaration.load_path] = script

    def enumerate_declared_classes(self) -> Sequence[ClassDeclaration]:
        """Return a snapshot of the declared scripted classes."""

        with self._lock:
            return tuple(self._declarations)

    def enumerate_native_classes(self) -> Sequence[NativeClassInfo]:
        """Return a snapshot of the native class records."""

        with self._lock:
            return tuple(self._native_classes)

    def load_scripted_descriptor(self, path: str) -> LoadedScript | None:
        """Return the payload stored for ``path``.

        Args:
            path: Load path of the scripted class.

        Returns:
            LoadedScript | None: Stored payload or ``None`` when unknown.

        Raises:
            LoadFailure: If ``path`` was registered as failing.
        """

        with self._lock:
            self._load_calls[path] = self._load_calls.get(path, 0) + 1
            if path in self._failing_paths:
                raise LoadFailure(path, "simulated load failure")
            return self._scripts.get(path)

    def load_count(self, path: str) -> int:
        """Return how many times ``path`` was loaded."""

        with self._lock:
            return self._load_calls.get(path, 0)

    def get_runtime_class_name(self, obj: object) -> str | None:
        if isinstance(obj, HostObject):
            return obj.class_name
        return None

    def get_declared_script_name(self, obj: object) -> str | None:
        if isinstance(obj, HostObject):
            return obj.script_name
        return None


__all__ = ["InMemoryHost"]
