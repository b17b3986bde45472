# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Ancestor chain resolution and inheritance checks."""

from __future__ import annotations

from .checker import InheritanceChecker
from .resolver import AncestorChain, AncestorEntry, ChainResolver

__all__ = ["AncestorChain", "AncestorEntry", "ChainResolver", "InheritanceChecker"]
