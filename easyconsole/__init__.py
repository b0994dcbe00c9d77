#!/usr/bin/env python3
# easyconsole/__init__.py
from __future__ import annotations
"""
Embeddable interactive command console.

Typical embedding:

    registry = CommandRegistry()
    console = ConsoleController(registry, ConsoleOutputHandler())
    await console.initialize()
    await console.process_input('hello')
"""

from easyconsole.commands import (
    REGISTRY,
    Command,
    CommandRegistry,
    FunctionCommand,
    LogLevel,
    OutputHandler,
    command,
    register_command,
)
from easyconsole.errors import (
    ConfigurationError,
    ConsoleError,
    HandlerExecutionError,
    UnknownCommandError,
    ValidationError,
)
from easyconsole.interface import ConsoleController, HistoryRing, tokenize
from easyconsole.ui import BufferedOutputHandler, ConsoleOutputHandler, LoggingOutputHandler

__version__ = "0.1.0"

__all__ = [
    "REGISTRY",
    "Command",
    "CommandRegistry",
    "FunctionCommand",
    "LogLevel",
    "OutputHandler",
    "command",
    "register_command",
    "ConsoleError",
    "ConfigurationError",
    "HandlerExecutionError",
    "UnknownCommandError",
    "ValidationError",
    "ConsoleController",
    "HistoryRing",
    "tokenize",
    "BufferedOutputHandler",
    "ConsoleOutputHandler",
    "LoggingOutputHandler",
]
