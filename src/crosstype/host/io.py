# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading host snapshot JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, TypeAlias, cast

from ..errors import CatalogIntegrityError

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]


def load_json_object(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON document from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the document does not exist.
        CatalogIntegrityError: If the document is not UTF-8, cannot be parsed,
            or is not an object.
    """
    if not path.is_file():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(Any, json.load(stream))
        except UnicodeDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse JSON ({exc.msg})") from exc
    if not isinstance(payload, Mapping):
        raise CatalogIntegrityError(f"{path}: expected a JSON object")
    return cast(Mapping[str, JSONValue], payload)


__all__ = ["JSONPrimitive", "JSONValue", "load_json_object"]
