# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by type catalog and ancestry operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ClassOrigin


class CrossTypeError(Exception):
    """Base class for every error raised by :mod:`crosstype`."""


class InitializationError(CrossTypeError):
    """Raised when the catalog is unusable or queried before it was built."""


class NotFoundError(CrossTypeError, LookupError):
    """Raised when a class name is absent from the partition(s) searched."""

    def __init__(self, name: str, origin: ClassOrigin | None = None) -> None:
        """Record the missing ``name`` and the ``origin`` that was searched.

        Args:
            name: Class name that could not be resolved.
            origin: Partition that was searched, ``None`` when every partition was.
        """

        self.name = name
        self.origin = origin
        where = f"{origin.value} partition" if origin is not None else "any partition"
        super().__init__(f"class '{name}' not found in {where}")


class LoadFailure(CrossTypeError):
    """Raised when a single scripted class descriptor cannot be loaded."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason or "loader returned no descriptor"
        super().__init__(f"{path}: {self.reason}")


class CatalogIntegrityError(CrossTypeError):
    """Raised when host-provided class data violates catalog invariants."""


class CatalogValidationError(CatalogIntegrityError):
    """Raised when a class document fails structural schema validation."""


__all__ = (
    "CatalogIntegrityError",
    "CatalogValidationError",
    "CrossTypeError",
    "InitializationError",
    "LoadFailure",
    "NotFoundError",
)
