#!/usr/bin/env python3
# easyconsole/boot/__init__.py
from __future__ import annotations

from .boot import BootState, boot_sequence

__all__ = ["BootState", "boot_sequence"]
