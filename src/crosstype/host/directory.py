# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host implementation that reads a reflection snapshot from a directory.

The snapshot layout mirrors what an engine exports for offline tooling::

    <root>/native_classes.json   # {"classes": [{"name", "base", "instantiable", "memberCount"}]}
    <root>/global_classes.json   # {"classes": [{"class", "language", "base", "path"}]}
    <root>/<path>.json           # one scripted class per document, addressed as "res://<path>.json"

Every document is validated against the schemas bundled in ``crosstype/schema``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, cast

from ..errors import CatalogIntegrityError, LoadFailure
from ..models import ClassDeclaration, HostObject, LoadedScript, NativeClassInfo
from .io import JSONValue, load_json_object
from .schema import SchemaRepository, validate_document

RESOURCE_PREFIX: Final[str] = "res://"
NATIVE_DOCUMENT: Final[str] = "native_classes.json"
DECLARATIONS_DOCUMENT: Final[str] = "global_classes.json"


@dataclass(slots=True)
class DirectoryHost:
    """Serve host reflection primitives from JSON documents under ``root``."""

    root: Path
    schema_root: Path | None = None
    _schemas: SchemaRepository = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Load the schema validators once per host."""

        self._schemas = SchemaRepository.load(self.schema_root)

    def enumerate_native_classes(self) -> Sequence[NativeClassInfo]:
        """Return native class records from ``native_classes.json``.

        Returns:
            Sequence[NativeClassInfo]: Records in document order.

        Raises:
            CatalogIntegrityError: If the document is missing or unreadable.
            CatalogValidationError: If the document fails schema validation.
        """

        path = self.root / NATIVE_DOCUMENT
        document = _read_catalog_document(path)
        validate_document(self._schemas.native_validator, document, path=path)
        entries = cast(Sequence[Mapping[str, JSONValue]], document["classes"])
        return tuple(
            NativeClassInfo(
                name=cast(str, entry["name"]),
                base_name=cast(str, entry.get("base", "")),
                instantiable=cast(bool, entry.get("instantiable", True)),
                member_count=cast(int, entry.get("memberCount", 0)),
            )
            for entry in entries
        )

    def enumerate_declared_classes(self) -> Sequence[ClassDeclaration]:
        """Return scripted class declarations from ``global_classes.json``.

        A missing declarations document means the project declares no scripts.

        Returns:
            Sequence[ClassDeclaration]: Declarations in document order.

        Raises:
            CatalogIntegrityError: If the document is unreadable.
            CatalogValidationError: If the document fails schema validation.
        """

        path = self.root / DECLARATIONS_DOCUMENT
        if not path.is_file():
            return ()
        document = _read_catalog_document(path)
        validate_document(self._schemas.declarations_validator, document, path=path)
        entries = cast(Sequence[Mapping[str, JSONValue]], document["classes"])
        return tuple(
            ClassDeclaration(
                name=cast(str, entry["class"]),
                origin_hint=cast(str, entry["language"]),
                base_path_or_name=cast(str, entry.get("base", "")),
                load_path=cast(str, entry["path"]),
            )
            for entry in entries
        )

    def load_scripted_descriptor(self, path: str) -> LoadedScript:
        """Load and validate the scripted class document addressed by ``path``.

        Args:
            path: ``res://`` path of the scripted class document.

        Returns:
            LoadedScript: Payload extracted from the document.

        Raises:
            LoadFailure: If the document is missing, unparsable, or invalid.
        """

        document_path = self.resolve_path(path)
        try:
            document = load_json_object(document_path)
            validate_document(self._schemas.script_validator, document, path=document_path)
        except FileNotFoundError as exc:
            raise LoadFailure(path, "document not found") from exc
        except CatalogIntegrityError as exc:
            raise LoadFailure(path, str(exc)) from exc
        properties = cast(Mapping[str, JSONValue], document.get("properties", {}))
        return LoadedScript(
            name=cast(str, document["name"]),
            base_name=cast(str, document.get("base", "")),
            instantiable=cast(bool, document.get("instantiable", True)),
            member_count=cast(int, document.get("memberCount", 0)),
            properties=dict(properties),
        )

    def resolve_path(self, path: str) -> Path:
        """Translate a ``res://`` path into a filesystem path below ``root``.

        Args:
            path: Host load path.

        Returns:
            Path: Absolute filesystem path.

        Raises:
            LoadFailure: If ``path`` is not a resource path or escapes ``root``.
        """

        if not path.startswith(RESOURCE_PREFIX):
            raise LoadFailure(path, f"expected a '{RESOURCE_PREFIX}' path")
        root = self.root.resolve()
        candidate = (root / path.removeprefix(RESOURCE_PREFIX)).resolve()
        if candidate != root and root not in candidate.parents:
            raise LoadFailure(path, "path escapes the snapshot root")
        return candidate

    def get_runtime_class_name(self, obj: object) -> str | None:
        if isinstance(obj, HostObject):
            return obj.class_name
        return None

    def get_declared_script_name(self, obj: object) -> str | None:
        if isinstance(obj, HostObject):
            return obj.script_name
        return None


def _read_catalog_document(path: Path) -> Mapping[str, JSONValue]:
    """Read an enumeration document the whole catalog depends on."""

    try:
        return load_json_object(path)
    except FileNotFoundError as exc:
        raise CatalogIntegrityError(f"{path}: snapshot document not found") from exc
    except OSError as exc:
        raise CatalogIntegrityError(f"{path}: cannot read snapshot document ({exc})") from exc


__all__ = ["DECLARATIONS_DOCUMENT", "NATIVE_DOCUMENT", "RESOURCE_PREFIX", "DirectoryHost"]
