#!/usr/bin/env python3
# easyconsole/errors.py
from __future__ import annotations

"""
Error taxonomy for the console.

Per-invocation errors (ValidationError, UnknownCommandError,
HandlerExecutionError) are raised inside the dispatch engine and reported
through the output handler at their `level`. ConfigurationError is fatal and
propagates to whoever built the console.
"""

from easyconsole.commands.command_types import LogLevel


class ConsoleError(Exception):
    """Base class for every console error."""

    level: LogLevel = LogLevel.ERROR


class ValidationError(ConsoleError):
    """Input was rejected before it reached the registry."""

    level = LogLevel.WARNING

    def __init__(self, message: str = "Command rejected: input is empty or whitespace only.") -> None:
        super().__init__(message)


class UnknownCommandError(ConsoleError, LookupError):
    """No command is registered under the parsed name."""

    def __init__(self, name: str, help_command: str = "help") -> None:
        self.name = name
        super().__init__(
            f"Unknown command '{name}'. Type '{help_command}' to list available commands.")


class HandlerExecutionError(ConsoleError):
    """A command handler raised while running."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Command '{name}' failed: {cause}")


class ConfigurationError(ConsoleError, ValueError):
    """Invalid construction parameter, setting, or console usage."""
