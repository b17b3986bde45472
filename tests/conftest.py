# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from crosstype import (
    ClassCatalog,
    ClassDeclaration,
    InMemoryHost,
    LoadedScript,
    NativeClassInfo,
    TypeRegistry,
    build_catalog,
)

NATIVE_CLASSES: tuple[NativeClassInfo, ...] = (
    NativeClassInfo("Object", instantiable=True, member_count=12),
    NativeClassInfo("RefCounted", instantiable=True, member_count=3, base_name="Object"),
    NativeClassInfo("Node", instantiable=True, member_count=40, base_name="Object"),
    NativeClassInfo("CanvasItem", instantiable=False, member_count=30, base_name="Node"),
    NativeClassInfo("Node2D", instantiable=True, member_count=12, base_name="CanvasItem"),
    NativeClassInfo("CollisionObject2D", instantiable=False, member_count=8, base_name="Node2D"),
    NativeClassInfo("Area2D", instantiable=True, member_count=9, base_name="CollisionObject2D"),
    NativeClassInfo("Node3D", instantiable=True, member_count=20, base_name="Node"),
    NativeClassInfo("MarkerBase", instantiable=False, member_count=0, base_name="Object"),
    NativeClassInfo("EditorPlugin", instantiable=True, member_count=15, base_name="Node"),
    NativeClassInfo("EditorDock", instantiable=True, member_count=2, base_name="EditorPlugin"),
)

ANCHOR_PATH = "res://Type.gd"


def gdscript(name: str, base: str, path: str) -> ClassDeclaration:
    return ClassDeclaration(name=name, origin_hint="GDScript", base_path_or_name=base, load_path=path)


def csharp(name: str, base: str, path: str) -> ClassDeclaration:
    return ClassDeclaration(name=name, origin_hint="CSharpScript", base_path_or_name=base, load_path=path)


def make_host(
    *,
    excluded: tuple[str, ...] = ("EditorPlugin",),
    include_anchor: bool = True,
    extra: tuple[tuple[ClassDeclaration, LoadedScript | None], ...] = (),
) -> InMemoryHost:
    """Build a host resembling a small game project."""

    host = InMemoryHost(native_classes=NATIVE_CLASSES, failing_paths=("res://broken.gd",))
    if include_anchor:
        host.add_script(
            gdscript("Type", "RefCounted", ANCHOR_PATH),
            LoadedScript("Type", base_name="RefCounted", properties={"excluded_classes": list(excluded)}),
        )
    host.add_script(
        gdscript("TestParent", "Node", "res://test_parent.gd"),
        LoadedScript("TestParent", base_name="Node", member_count=2),
    )
    host.add_script(
        gdscript("TestTypeMatcher", "res://test_parent.gd", "res://test_type_matcher.gd"),
        LoadedScript("TestTypeMatcher", member_count=1),
    )
    host.add_script(
        gdscript("Player", "Area2D", "res://player.gd"),
        LoadedScript("Player", base_name="Area2D", member_count=6),
    )
    host.add_script(gdscript("BrokenScript", "Node2D", "res://broken.gd"), None)
    host.add_script(
        gdscript("OrphanScript", "BrokenScript", "res://orphan.gd"),
        LoadedScript("OrphanScript", base_name="BrokenScript"),
    )
    host.add_script(
        csharp("TestParentCSharp", "Node", "res://TestParentCSharp.cs"),
        LoadedScript("TestParentCSharp", base_name="Node", member_count=1),
    )
    host.add_script(
        csharp("TestChildCSharp", "TestParentCSharp", "res://TestChildCSharp.cs"),
        LoadedScript("TestChildCSharp", base_name="TestParentCSharp", member_count=1),
    )
    for declaration, script in extra:
        host.add_script(declaration, script)
    return host


@pytest.fixture
def host() -> InMemoryHost:
    """Return the default project host."""

    return make_host()


@pytest.fixture
def host_factory() -> Callable[..., InMemoryHost]:
    """Return the host factory so tests can tweak the project."""

    return make_host


@pytest.fixture
def catalog(host: InMemoryHost) -> ClassCatalog:
    """Return a catalog built from the default host."""

    return build_catalog(host)


@pytest.fixture
def registry(host: InMemoryHost) -> TypeRegistry:
    """Return an initialized registry over the default host."""

    registry = TypeRegistry(host)
    registry.initialize()
    return registry
