#!/usr/bin/env python3
# easyconsole/interface/handler.py
from __future__ import annotations

"""
Command dispatch engine.

One submission runs, in this order:
  1) reject blank input (warning, nothing recorded)
  2) echo the input and record it in history
  3) tokenize; the first token (lowercased) names the command
  4) look the command up and invoke it with the remaining tokens
  5) report success, an unknown command, or the handler's failure

Errors from a single submission are reported through the output handler
and never escape `process_input`.
"""

import asyncio
import logging
from collections import deque

from easyconsole.commands import Command, CommandRegistry, LogLevel, OutputHandler
from easyconsole.commands.builtins import default_commands
from easyconsole.errors import (
    ConfigurationError,
    ConsoleError,
    HandlerExecutionError,
    UnknownCommandError,
    ValidationError,
)
from easyconsole.interface.history import HistoryRing
from easyconsole.interface.parser import tokenize
from easyconsole.ui.output import format_message

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY_SIZE = 100
DEFAULT_MAX_OUTPUT_LINES = 1000
HELP_COMMAND = "help"


class _TranscriptOutput:
    """Pass messages through to the real sink, keeping a copy of the newest lines."""

    def __init__(self, sink: OutputHandler, max_lines: int) -> None:
        self._sink = sink
        self.lines: deque[str] = deque(maxlen=max_lines)

    async def write(self, message: str, level: LogLevel) -> None:
        self.lines.append(format_message(message, level))
        await self._sink.write(message, level)


class ConsoleController:
    """Owns the history ring and its cursor, and dispatches input to the registry."""

    def __init__(
        self,
        registry: CommandRegistry,
        output: OutputHandler,
        max_history_size: int = DEFAULT_MAX_HISTORY_SIZE,
        *,
        register_defaults: bool = True,
        max_output_lines: int = DEFAULT_MAX_OUTPUT_LINES,
    ) -> None:
        if registry is None:
            raise ConfigurationError("A command registry is required.")
        if output is None:
            raise ConfigurationError("An output handler is required.")

        if isinstance(max_output_lines, bool) or not isinstance(max_output_lines, int) \
                or max_output_lines <= 0:
            raise ConfigurationError(
                f"max_output_lines must be a positive integer, got {max_output_lines!r}")

        self._registry = registry
        self._output = _TranscriptOutput(output, max_output_lines)
        self._history = HistoryRing(max_history_size)
        self._register_defaults = register_defaults
        self._initialized = False
        self._pending: set[asyncio.Task[None]] = set()
        self._init_lock = asyncio.Lock()

    # ---------------- Properties ----------------

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def history(self) -> HistoryRing:
        return self._history

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ---------------- Lifecycle ----------------

    async def initialize(self) -> None:
        """Register the default commands; must complete before input is accepted."""
        async with self._init_lock:
            if self._initialized:
                return

            await self._output.write("Console initializing...", LogLevel.INFO)
            if self._register_defaults:
                for command_obj in default_commands(self):
                    if not self._registry.register(command_obj):
                        logger.debug("Default command '%s' already registered; skipped.",
                                     command_obj.name)
            self._initialized = True
            await self._output.write("Console ready.", LogLevel.INFO)

    async def cleanup(self) -> None:
        """Tear down: clear history and output. Commands stay registered."""
        await self._output.write("Console shutting down...", LogLevel.INFO)
        self.clear()
        await self._output.write("Console data cleared.", LogLevel.INFO)

    def clear(self) -> None:
        self._history.clear()
        self._output.lines.clear()

    # ---------------- Input ----------------

    async def process_input(self, text: str) -> None:
        """Run one submission through the dispatch pipeline."""
        if not self._initialized:
            raise ConfigurationError(
                "Console is not initialized; await initialize() first.")
        try:
            await self._dispatch(text)
        except ConsoleError as exc:
            await self._output.write(str(exc), exc.level)

    def submit(self, text: str) -> asyncio.Task[None]:
        """Schedule `process_input(text)` as a task and return it."""
        task = asyncio.create_task(self.process_input(text))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def join(self) -> None:
        """Wait for every submitted task that is still running."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def _dispatch(self, text: str) -> None:
        if text is None or not text.strip():
            raise ValidationError()

        await self._output.write(f"> {text}", LogLevel.INFO)
        self._history.append(text)

        tokens = tokenize(text)
        name = tokens[0].lower() if tokens else ""
        command_obj = self._registry.lookup(name)
        if command_obj is None:
            raise UnknownCommandError(name, HELP_COMMAND)

        try:
            await command_obj.invoke(tokens[1:], self._output)
        except Exception as exc:
            logger.debug("Command '%s' raised.", name, exc_info=True)
            raise HandlerExecutionError(name, exc) from exc

        await self._output.write(f"Command '{name}' executed successfully.", LogLevel.INFO)

    # ---------------- Queries ----------------

    def previous_history(self) -> str:
        return self._history.previous()

    def next_history(self) -> str:
        return self._history.next()

    def suggestions(self, text: str) -> list[str]:
        return self._registry.suggest(text)

    def grouped_commands(self) -> dict[str, list[Command]]:
        return self._registry.grouped()

    def get_output(self) -> str:
        """
        Snapshot of the lines written through this console since the last clear.

        Only the newest `max_output_lines` lines are kept.
        """
        return "\n".join(self._output.lines)
