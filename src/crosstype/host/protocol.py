# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contract implemented by the host process exposing its reflection primitives."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..models import ClassDeclaration, LoadedScript, NativeClassInfo


@runtime_checkable
class HostRuntime(Protocol):
    """Define the synchronous reflection primitives consumed by the catalog.

    Every primitive is treated as a blocking call. ``load_scripted_descriptor``
    may either raise or return ``None`` to signal a per-class load failure; the
    object primitives accept whatever handle type the host uses.
    """

    @abstractmethod
    def enumerate_declared_classes(self) -> Sequence[ClassDeclaration]:
        """Return every scripted class declared to the host.

        Returns:
            Sequence[ClassDeclaration]: Declarations, possibly partial.
        """
        raise NotImplementedError

    @abstractmethod
    def enumerate_native_classes(self) -> Sequence[NativeClassInfo]:
        """Return every native class known to the host.

        Returns:
            Sequence[NativeClassInfo]: Native class records.
        """
        raise NotImplementedError

    @abstractmethod
    def load_scripted_descriptor(self, path: str) -> LoadedScript | None:
        """Load the scripted class stored at ``path``.

        Args:
            path: Host load path taken from a :class:`ClassDeclaration`.

        Returns:
            LoadedScript | None: Loaded payload, ``None`` when loading failed.
        """
        raise NotImplementedError

    @abstractmethod
    def get_runtime_class_name(self, obj: object) -> str | None:
        """Return the native class name of ``obj`` when it has one."""
        raise NotImplementedError

    @abstractmethod
    def get_declared_script_name(self, obj: object) -> str | None:
        """Return the scripted class name attached to ``obj`` when present."""
        raise NotImplementedError


__all__ = ["HostRuntime"]
