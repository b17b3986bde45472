# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests covering catalog construction from host enumerations."""

from __future__ import annotations

import pytest

from crosstype import (
    CatalogIntegrityError,
    ClassDeclaration,
    ClassOrigin,
    DiagnosticKind,
    InitializationError,
    InMemoryHost,
    LoadedScript,
    NativeClassInfo,
    NotFoundError,
    RegistrySettings,
    build_catalog,
)


def test_partitions_are_populated(catalog) -> None:
    assert set(catalog.native) == {
        "Object",
        "RefCounted",
        "Node",
        "CanvasItem",
        "Node2D",
        "CollisionObject2D",
        "Area2D",
        "Node3D",
        "EditorDock",
    }
    assert set(catalog.scripted_a) == {"Type", "TestParent", "TestTypeMatcher", "Player", "OrphanScript"}
    assert set(catalog.scripted_b) == {"TestParentCSharp", "TestChildCSharp"}


def test_abstract_marker_classes_are_skipped(catalog) -> None:
    assert "MarkerBase" not in catalog.native
    # abstract classes exposing members stay visible
    assert catalog.native["CanvasItem"].instantiable is False


def test_excluded_names_come_from_anchor(catalog) -> None:
    assert catalog.anchor.name == "Type"
    assert catalog.excluded_names == frozenset({"EditorPlugin"})
    assert "EditorPlugin" not in catalog.native


def test_descendant_of_excluded_class_links_to_nearest_kept_ancestor(catalog) -> None:
    assert catalog.native["EditorDock"].base_name == "Node"
    assert catalog.native_lineage["EditorDock"] == "EditorPlugin"


def test_nearest_native_skips_filtered_classes(catalog) -> None:
    assert catalog.nearest_native("EditorPlugin").name == "Node"
    assert catalog.nearest_native("MarkerBase").name == "Object"
    assert catalog.nearest_native("Unheard") is None


def test_base_given_as_load_path_is_reconciled(catalog) -> None:
    matcher = catalog.lookup(ClassOrigin.SCRIPTED_A, "TestTypeMatcher")
    assert matcher.base_name == "TestParent"
    assert matcher.native_base == "Node"


def test_scripted_boundary_records_native_base(catalog) -> None:
    parent = catalog.lookup(ClassOrigin.SCRIPTED_A, "TestParent")
    assert parent.base_name == ""
    assert parent.native_base == "Node"
    assert parent.load_path == "res://test_parent.gd"


def test_load_failure_is_isolated(host, catalog) -> None:
    failures = catalog.diagnostics_of(DiagnosticKind.LOAD_FAILURE)
    assert [diagnostic.subject for diagnostic in failures] == ["BrokenScript"]
    assert "BrokenScript" not in catalog.scripted_a
    assert host.load_count("res://broken.gd") == 1


def test_child_of_unloadable_script_falls_through_to_declared_native_base(catalog) -> None:
    orphan = catalog.lookup(ClassOrigin.SCRIPTED_A, "OrphanScript")
    assert orphan.base_name == ""
    assert orphan.native_base == "Node2D"


def test_lookup_unknown_name_raises(catalog) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        catalog.lookup(ClassOrigin.NATIVE, "DoesNotExist")
    assert excinfo.value.origin is ClassOrigin.NATIVE
    assert excinfo.value.name == "DoesNotExist"


def test_excluded_name_may_still_be_scripted(host_factory) -> None:
    host = host_factory(
        extra=(
            (
                ClassDeclaration("EditorPlugin", "GDScript", "Node", "res://editor_plugin.gd"),
                LoadedScript("EditorPlugin", base_name="Node"),
            ),
        ),
    )
    catalog = build_catalog(host)
    assert "EditorPlugin" not in catalog.native
    assert catalog.origin_of("EditorPlugin") is ClassOrigin.SCRIPTED_A


def test_catalog_is_read_only(catalog) -> None:
    with pytest.raises(TypeError):
        catalog.native["Fake"] = catalog.native["Node"]  # type: ignore[index]


def test_missing_anchor_is_fatal(host_factory) -> None:
    with pytest.raises(InitializationError, match="Type"):
        build_catalog(host_factory(include_anchor=False))


def test_anchor_with_wrong_base_is_rejected(host_factory) -> None:
    with pytest.raises(InitializationError, match="expected 'Node'"):
        build_catalog(host_factory(), RegistrySettings(anchor_base="Node"))


def test_malformed_exclusion_property_is_an_integrity_error() -> None:
    host = InMemoryHost(
        native_classes=(NativeClassInfo("Object", True, 1), NativeClassInfo("RefCounted", True, 1, "Object")),
    )
    host.add_script(
        ClassDeclaration("Type", "GDScript", "RefCounted", "res://Type.gd"),
        LoadedScript("Type", base_name="RefCounted", properties={"excluded_classes": "Node"}),
    )
    with pytest.raises(CatalogIntegrityError, match="excluded_classes"):
        build_catalog(host)


def test_duplicate_scripted_name_keeps_first(host_factory) -> None:
    host = host_factory(
        extra=(
            (
                ClassDeclaration("Player", "GDScript", "Node3D", "res://player_copy.gd"),
                LoadedScript("Player", base_name="Node3D"),
            ),
        ),
    )
    catalog = build_catalog(host)
    assert catalog.scripted_a["Player"].native_base == "Area2D"
    assert [d.subject for d in catalog.diagnostics_of(DiagnosticKind.DUPLICATE_NAME)] == ["Player"]
    assert host.load_count("res://player_copy.gd") == 0


def test_name_in_both_scripted_partitions_is_reported(host_factory) -> None:
    host = host_factory(
        extra=(
            (
                ClassDeclaration("Player", "CSharpScript", "Node3D", "res://Player.cs"),
                LoadedScript("Player", base_name="Node3D"),
            ),
        ),
    )
    catalog = build_catalog(host)
    assert catalog.ambiguous_names == frozenset({"Player"})
    assert [d.subject for d in catalog.diagnostics_of(DiagnosticKind.AMBIGUOUS_NAME)] == ["Player"]
    assert catalog.origin_of("Player") is ClassOrigin.SCRIPTED_A


def test_unknown_origin_hint_is_reported(host_factory) -> None:
    host = host_factory(
        extra=((ClassDeclaration("Shader", "VisualScript", "Node", "res://shader.vs"), LoadedScript("Shader")),),
    )
    catalog = build_catalog(host)
    assert not catalog.contains("Shader")
    assert [d.subject for d in catalog.diagnostics_of(DiagnosticKind.UNKNOWN_ORIGIN)] == ["Shader"]


def test_dangling_native_base_is_dropped(host_factory) -> None:
    project = host_factory()
    host = InMemoryHost(
        native_classes=(*project.enumerate_native_classes(), NativeClassInfo("Ghost", True, 1, "Phantom")),
        declarations=project.enumerate_declared_classes()[:1],
        scripts={"res://Type.gd": LoadedScript("Type", base_name="RefCounted")},
    )
    catalog = build_catalog(host)
    assert "Ghost" not in catalog.native
    assert [d.subject for d in catalog.diagnostics_of(DiagnosticKind.BROKEN_ANCESTRY)] == ["Ghost"]


def test_scripted_cycle_is_dropped(host_factory) -> None:
    host = host_factory(
        extra=(
            (ClassDeclaration("Ping", "GDScript", "Pong", "res://ping.gd"), LoadedScript("Ping", base_name="Pong")),
            (ClassDeclaration("Pong", "GDScript", "Ping", "res://pong.gd"), LoadedScript("Pong", base_name="Ping")),
        ),
    )
    catalog = build_catalog(host)
    assert not catalog.contains("Ping")
    assert not catalog.contains("Pong")
    assert {d.subject for d in catalog.diagnostics_of(DiagnosticKind.BROKEN_ANCESTRY)} == {"Ping", "Pong"}


def test_descriptor_equality_uses_origin_and_name(catalog) -> None:
    node = catalog.native["Node"]
    twin = type(node)(name="Node", origin=ClassOrigin.NATIVE, declared_member_count=0)
    assert node == twin
    assert hash(node) == hash(twin)
    assert node != type(node)(name="Node", origin=ClassOrigin.SCRIPTED_A)


def test_failed_first_declaration_still_claims_its_name(host_factory) -> None:
    host = host_factory(
        extra=(
            (ClassDeclaration("Ghost", "GDScript", "Node3D", "res://ghost.gd"), None),
            (ClassDeclaration("Ghost", "GDScript", "Area2D", "res://ghost_copy.gd"), LoadedScript("Ghost")),
            (
                ClassDeclaration("Minion", "GDScript", "Ghost", "res://minion.gd"),
                LoadedScript("Minion", base_name="Ghost"),
            ),
        ),
    )
    catalog = build_catalog(host)
    assert not catalog.contains("Ghost")
    assert host.load_count("res://ghost_copy.gd") == 0
    assert [d.subject for d in catalog.diagnostics_of(DiagnosticKind.DUPLICATE_NAME)] == ["Ghost"]
    assert catalog.scripted_a["Minion"].native_base == "Node3D"
