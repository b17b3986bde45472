# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderings of catalog contents and build diagnostics."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .catalog.model_catalog import ClassCatalog
from .models import ClassOrigin, DiagnosticKind
from .resolution.resolver import AncestorChain

_DIAGNOSTIC_STYLES = {
    DiagnosticKind.LOAD_FAILURE: "red",
    DiagnosticKind.BROKEN_ANCESTRY: "red",
    DiagnosticKind.AMBIGUOUS_NAME: "yellow",
    DiagnosticKind.DUPLICATE_NAME: "yellow",
    DiagnosticKind.UNKNOWN_ORIGIN: "yellow",
}


def create_summary_table(catalog: ClassCatalog, *, color: bool = True) -> Table:
    """Create a table listing partition sizes and the exclusion set.

    Args:
        catalog: Catalog to summarise.
        color: Whether to style labels and values.

    Returns:
        Table: Two-column Rich table.
    """

    table = Table(show_header=False, box=box.SIMPLE_HEAVY if color else box.SIMPLE, pad_edge=False)
    table.add_column(style="yellow" if color else None, justify="left", no_wrap=True)
    table.add_column(style="orange1" if color else None, justify="right")
    counts = catalog.counts()
    for origin in ClassOrigin:
        table.add_row(f"{origin.value} classes", str(counts[origin]))
    table.add_row("anchor", f"{catalog.anchor.name} ({catalog.anchor.origin.value})")
    table.add_row("excluded", ", ".join(sorted(catalog.excluded_names)) or "-")
    table.add_row("diagnostics", str(len(catalog.diagnostics)))
    return table


def create_diagnostics_table(catalog: ClassCatalog, *, color: bool = True) -> Table:
    """Create a table with one row per build diagnostic."""

    table = Table(box=box.SIMPLE_HEAVY if color else box.SIMPLE, title="Catalog diagnostics")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Class", no_wrap=True)
    table.add_column("Detail")
    for diagnostic in catalog.diagnostics:
        style = _DIAGNOSTIC_STYLES[diagnostic.kind] if color else None
        table.add_row(Text(diagnostic.kind.value, style=style or ""), diagnostic.subject, diagnostic.message)
    return table


def format_chain(chain: AncestorChain) -> str:
    """Return ``chain`` as ``"Leaf -> ... -> Root"``."""

    return " -> ".join(entry if isinstance(entry, str) else entry.name for entry in chain)


def render_catalog_summary(catalog: ClassCatalog, console: Console, *, color: bool = True) -> None:
    """Print the summary table and, when present, the diagnostics table."""

    console.print(create_summary_table(catalog, color=color))
    if catalog.diagnostics:
        console.print(create_diagnostics_table(catalog, color=color))


__all__ = ["create_diagnostics_table", "create_summary_table", "format_chain", "render_catalog_summary"]
