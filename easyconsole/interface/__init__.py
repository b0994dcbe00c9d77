#!/usr/bin/env python3
# easyconsole/interface/__init__.py
from __future__ import annotations

"""
Package for the console's input side and command dispatch.

Provides:
- Tokenizer for quoted console input.
- Bounded history ring with a navigation cursor.
- The dispatch engine (ConsoleController).
- Subsequence-based completion for prompt_toolkit.
- Dynamic command loader for the plugins package.
- CLI frontends and the REPL loop.
"""


# Parser and history FIRST (handler depends on them)
from .parser import tokenize
from .history import HistoryRing, RingHistory

# Dispatch engine
from .handler import ConsoleController, DEFAULT_MAX_HISTORY_SIZE, HELP_COMMAND

# Completion / loader
from .completion import CommandCompleter, suggest
from .loader import load_commands

# CLI frontends (after the controller is available)
from .cli import (
    BaseCLI,
    PlainCLI,
    PromptToolkitCLI,
    make_cli,
    repl,
    run_console,
)

__all__ = [
    # parser
    "tokenize",
    # history
    "HistoryRing",
    "RingHistory",
    # handler
    "ConsoleController",
    "DEFAULT_MAX_HISTORY_SIZE",
    "HELP_COMMAND",
    # completion
    "CommandCompleter",
    "suggest",
    # loader
    "load_commands",
    # cli
    "BaseCLI",
    "PlainCLI",
    "PromptToolkitCLI",
    "make_cli",
    "repl",
    "run_console",
]
