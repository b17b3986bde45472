# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host reflection contract and the bundled reference hosts."""

from __future__ import annotations

from .directory import DirectoryHost
from .memory import InMemoryHost
from .protocol import HostRuntime

__all__ = ["DirectoryHost", "HostRuntime", "InMemoryHost"]
