# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry settings and ``pyproject.toml`` loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import ClassOrigin

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "crosstype"

_DEFAULT_ORIGIN_HINTS: Final[dict[str, ClassOrigin]] = {
    "GDScript": ClassOrigin.SCRIPTED_A,
    "CSharpScript": ClassOrigin.SCRIPTED_B,
    ClassOrigin.SCRIPTED_A.value: ClassOrigin.SCRIPTED_A,
    ClassOrigin.SCRIPTED_B.value: ClassOrigin.SCRIPTED_B,
}


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class RegistrySettings(BaseModel):
    """Settings controlling how a catalog is built and queried.

    Attributes:
        anchor_name: Name of the scripted class that bootstraps the catalog.
        anchor_base: Base the anchor class must declare to be recognised.
        exclusion_property: Anchor property listing native names to exclude.
        nil_name: Sentinel emitted for objects with no resolvable class.
        origin_hints: Mapping of host origin hints to scripted partitions.
        use_cache: Default cache policy for inheritance checks.
    """

    model_config = ConfigDict(frozen=True)

    anchor_name: str = "Type"
    anchor_base: str = "RefCounted"
    exclusion_property: str = "excluded_classes"
    nil_name: str = "Nil"
    origin_hints: Mapping[str, ClassOrigin] = Field(default_factory=lambda: dict(_DEFAULT_ORIGIN_HINTS))
    use_cache: bool = True

    @field_validator("origin_hints")
    @classmethod
    def _reject_native_hints(cls, value: Mapping[str, ClassOrigin]) -> Mapping[str, ClassOrigin]:
        """Ensure every hint maps onto a scripted partition.

        Args:
            value: Candidate hint mapping.

        Returns:
            Mapping[str, ClassOrigin]: The validated mapping.

        Raises:
            ValueError: If a hint targets the native partition.
        """

        for hint, origin in value.items():
            if not origin.is_scripted:
                raise ValueError(f"origin hint '{hint}' must map to a scripted partition")
        return value

    def origin_for_hint(self, hint: str) -> ClassOrigin | None:
        """Return the scripted partition registered for ``hint``."""

        return self.origin_hints.get(hint)


def settings_from_mapping(data: Mapping[str, Any]) -> RegistrySettings:
    """Validate ``data`` into :class:`RegistrySettings`.

    Args:
        data: Raw mapping, typically the ``[tool.crosstype]`` table.

    Returns:
        RegistrySettings: Validated settings.

    Raises:
        ConfigError: If ``data`` contains invalid values.
    """

    try:
        return RegistrySettings.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"invalid crosstype settings: {exc}") from exc


def load_settings(project_root: Path) -> RegistrySettings:
    """Load settings from ``[tool.crosstype]`` in ``project_root/pyproject.toml``.

    Missing files or sections yield the default settings.

    Args:
        project_root: Directory expected to contain ``pyproject.toml``.

    Returns:
        RegistrySettings: Settings resolved for the project.

    Raises:
        ConfigError: If the document cannot be parsed or holds invalid values.
    """

    path = project_root / PYPROJECT_FILENAME
    if not path.is_file():
        return RegistrySettings()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: failed to parse TOML") from exc
    section = document.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY)
    if section is None:
        return RegistrySettings()
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [tool.crosstype] must be a table")
    return settings_from_mapping(section)


__all__ = ["ConfigError", "RegistrySettings", "load_settings", "settings_from_mapping"]
