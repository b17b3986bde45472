# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""JSON schema validators for host snapshot documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from ..errors import CatalogValidationError
from .io import JSONValue, load_json_object

SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent.parent / "schema"
NATIVE_SCHEMA: Final[str] = "native_classes.schema.json"
DECLARATIONS_SCHEMA: Final[str] = "global_classes.schema.json"
SCRIPT_SCHEMA: Final[str] = "scripted_class.schema.json"


@dataclass(frozen=True, slots=True)
class SchemaRepository:
    """Hold validators for the three snapshot document kinds."""

    schema_root: Path
    native_validator: Draft202012Validator
    declarations_validator: Draft202012Validator
    script_validator: Draft202012Validator

    @classmethod
    def load(cls, schema_root: Path | None = None) -> SchemaRepository:
        """Load schema validators from disk.

        Args:
            schema_root: Optional override for the bundled schema directory.

        Returns:
            SchemaRepository: Repository configured with all validators.
        """
        resolved_root = schema_root or SCHEMA_ROOT
        return cls(
            schema_root=resolved_root,
            native_validator=Draft202012Validator(load_json_object(resolved_root / NATIVE_SCHEMA)),
            declarations_validator=Draft202012Validator(load_json_object(resolved_root / DECLARATIONS_SCHEMA)),
            script_validator=Draft202012Validator(load_json_object(resolved_root / SCRIPT_SCHEMA)),
        )


def validate_document(
    validator: Draft202012Validator,
    document: Mapping[str, JSONValue],
    *,
    path: Path,
) -> None:
    """Validate ``document`` and translate schema errors.

    Args:
        validator: Validator matching the document kind.
        document: Parsed JSON payload.
        path: Filesystem path used in error reporting.

    Raises:
        CatalogValidationError: When the document fails schema validation.
    """
    try:
        validator.validate(document)
    except JsonSchemaValidationError as exc:
        raise CatalogValidationError(f"{path}: {exc.message}") from exc


__all__ = ["SCHEMA_ROOT", "SchemaRepository", "validate_document"]
