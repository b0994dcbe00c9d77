#!/usr/bin/env python3
# easyconsole/config/__init__.py
from __future__ import annotations

"""
Package for console configuration.

Provides the layered configuration loader (`load_config`) and its result
type (`AppConfig`).
"""


from .config import DEFAULTS, AppConfig, load_config

__all__ = [
    "AppConfig",
    "DEFAULTS",
    "load_config",
]
