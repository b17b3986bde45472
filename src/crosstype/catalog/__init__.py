# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Partitioned class catalog and the builder that materialises it."""

from __future__ import annotations

from .builder import CatalogBuilder, build_catalog
from .model_catalog import ClassCatalog

__all__ = ["CatalogBuilder", "ClassCatalog", "build_catalog"]
