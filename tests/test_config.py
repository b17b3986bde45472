# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from pathlib import Path

import pytest

from crosstype import ClassOrigin, ConfigError, RegistrySettings, load_settings
from crosstype.config import settings_from_mapping


def test_defaults() -> None:
    settings = RegistrySettings()
    assert settings.anchor_name == "Type"
    assert settings.nil_name == "Nil"
    assert settings.origin_for_hint("GDScript") is ClassOrigin.SCRIPTED_A
    assert settings.origin_for_hint("CSharpScript") is ClassOrigin.SCRIPTED_B
    assert settings.origin_for_hint("VisualScript") is None


def test_settings_are_frozen() -> None:
    settings = RegistrySettings()
    with pytest.raises(ValueError):
        settings.anchor_name = "Other"  # type: ignore[misc]


def test_native_origin_hint_is_rejected() -> None:
    with pytest.raises(ConfigError, match="scripted partition"):
        settings_from_mapping({"origin_hints": {"Native": "native"}})


def test_load_settings_from_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.crosstype]\nanchor_name = "Registry"\nuse_cache = false\n'
        '[tool.crosstype.origin_hints]\nLua = "scripted_b"\n',
        encoding="utf-8",
    )
    settings = load_settings(tmp_path)
    assert settings.anchor_name == "Registry"
    assert settings.use_cache is False
    assert settings.origin_for_hint("Lua") is ClassOrigin.SCRIPTED_B
    assert settings.origin_for_hint("GDScript") is None


def test_load_settings_without_section(tmp_path: Path) -> None:
    assert load_settings(tmp_path) == RegistrySettings()
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "game"\n', encoding="utf-8")
    assert load_settings(tmp_path) == RegistrySettings()


def test_load_settings_rejects_bad_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.crosstype\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="TOML"):
        load_settings(tmp_path)


def test_load_settings_rejects_bad_values(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.crosstype]\nuse_cache = "sometimes"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(tmp_path)
