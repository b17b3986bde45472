# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Provide the inheritance result cache."""

from __future__ import annotations

from .in_memory import CacheInfo, InheritanceCache, PairKey

__all__ = ["CacheInfo", "InheritanceCache", "PairKey"]
