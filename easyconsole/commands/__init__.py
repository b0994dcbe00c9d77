#!/usr/bin/env python3
# easyconsole/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`Command`, `FunctionCommand`, `LogLevel`, `OutputHandler`).
- Thread-safe registry and decorators (`CommandRegistry`, `REGISTRY`, `command`, `register_command`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


# Re-export from submodules (command_types first: errors.py depends on it)
from .command_types import BlockingOutput, Command, CommandCallback, FunctionCommand, LogLevel, OutputHandler
from .commands import REGISTRY, CommandRegistry, command, is_subsequence, register_command

__all__ = [
    "BlockingOutput",
    "Command",
    "CommandCallback",
    "FunctionCommand",
    "LogLevel",
    "OutputHandler",
    "CommandRegistry",
    "REGISTRY",
    "command",
    "is_subsequence",
    "register_command",
]
