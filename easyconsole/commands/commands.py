#!/usr/bin/env python3
# easyconsole/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: thread-safe in-memory registry keyed by lowercase name.
- command: decorator to register functions as commands with metadata.
- register_command: explicit API to register pre-built Command objects.
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterator, Optional

from easyconsole.commands.command_types import Command, FunctionCommand
from easyconsole.errors import ConfigurationError

logger = logging.getLogger(__name__)

COMMAND_ATTRIBUTE = "__console_command__"


def is_subsequence(query: str, candidate: str) -> bool:
    """
    True when every character of `query` appears in `candidate` in order.

    Two-pointer scan: the candidate pointer moves on every step, the query
    pointer only on a case-insensitive match.
    """
    if not query or not candidate:
        return False

    query_index = 0
    candidate_index = 0
    while query_index < len(query) and candidate_index < len(candidate):
        if query[query_index].lower() == candidate[candidate_index].lower():
            query_index += 1
        candidate_index += 1
    return query_index == len(query)


class CommandRegistry:
    """Holds all command definitions and provides lookup utilities."""

    def __init__(self) -> None:
        # Lowercase name -> Command
        self._commands_by_name: Dict[str, Command] = {}
        self._lock = threading.Lock()

    # ---------------- Registration ----------------

    def register(self, command_obj: Command) -> bool:
        """
        Register a command under its lowercase name.

        Returns False (and keeps the existing entry) when the name is taken.
        """
        if command_obj is None:
            raise ConfigurationError("Cannot register None as a command.")
        name = getattr(command_obj, "name", "")
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Command name must be a non-empty string.")

        key = name.lower()
        with self._lock:
            if key in self._commands_by_name:
                return False
            self._commands_by_name[key] = command_obj
        return True

    # ---------------- Lookup ----------------

    def lookup(self, name: str) -> Optional[Command]:
        """Return the command registered under `name` (any case), or None."""
        with self._lock:
            return self._commands_by_name.get(name.lower())

    def all(self) -> list[Command]:
        """Return every registered command in name order."""
        with self._lock:
            return [self._commands_by_name[k] for k in sorted(self._commands_by_name)]

    def names(self) -> list[str]:
        """Return all registered (lowercase) names, sorted."""
        with self._lock:
            return sorted(self._commands_by_name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands_by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[Command]:
        return iter(self.all())

    # ---------------- Modules ----------------

    def grouped(self) -> dict[str, list[Command]]:
        """Group commands by module; modules and commands both sorted by name."""
        grouped: dict[str, list[Command]] = {}
        for command_obj in self.all():
            grouped.setdefault(command_obj.module, []).append(command_obj)
        return {
            module: sorted(commands, key=lambda c: c.name.lower())
            for module, commands in sorted(grouped.items())
        }

    # ---------------- Suggestions ----------------

    def suggest(self, text: str) -> list[str]:
        """
        Suggest command names for raw input.

        Only the first whitespace-delimited token is considered; a name
        matches when that token is an ordered subsequence of it.
        """
        if not text or text.isspace():
            return []
        query = text.split()[0].lower()
        return [name for name in self.names() if is_subsequence(query, name)]


# Global registry used by the decorator and the plugin loader
REGISTRY = CommandRegistry()


def _target(registry: CommandRegistry | None) -> CommandRegistry:
    # An empty registry is falsy (__len__), so test for None explicitly.
    return REGISTRY if registry is None else registry


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    module: str | None = None,
    registry: CommandRegistry | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to register `func(args, output)` as a console command.

    - Function name is transformed from snake_case to kebab-case for `name` if not provided.
    - The docstring is used as the description if none is given.
    """

    def wrapper(func: Callable[..., Any]) -> Callable[..., Any]:
        command_obj = FunctionCommand(
            name=(name or func.__name__).replace("_", "-"),
            description=(description or (func.__doc__ or "")).strip(),
            callback=func,
            module=module or "general",
        )
        if not _target(registry).register(command_obj):
            logger.warning("Command '%s' already registered; keeping the existing one.",
                           command_obj.name)
        # Lets the plugin loader register the same object into other registries.
        setattr(func, COMMAND_ATTRIBUTE, command_obj)
        return func

    return wrapper


def register_command(command_obj: Command, registry: CommandRegistry | None = None) -> bool:
    """Explicit API for modules that construct Command objects directly."""
    return _target(registry).register(command_obj)
