#!/usr/bin/env python3
# easyconsole/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- LogLevel: severity attached to every console message.
- OutputHandler: the sink protocol the console writes into.
- Command: the capability every registered command exposes.
- FunctionCommand: a Command built around a plain or async function.
"""

import asyncio
import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Protocol, Sequence, runtime_checkable


class LogLevel(Enum):
    """Severity of a console message."""

    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class OutputHandler(Protocol):
    """Sink for console messages (terminal, logger, buffer, ...)."""

    async def write(self, message: str, level: LogLevel) -> None:  # pragma: no cover - signature only
        ...


@runtime_checkable
class Command(Protocol):
    """
    Capability every registered command exposes.

    `invoke` completing normally means success; raising means failure.
    """

    name: str
    description: str
    module: str

    async def invoke(self, args: Sequence[str], output: OutputHandler) -> None:  # pragma: no cover - signature only
        ...


CommandCallback = Callable[[list[str], OutputHandler], Any]


class BlockingOutput:
    """
    Synchronous view of an OutputHandler for callbacks running in a worker thread.

    `write` schedules the real write on the event loop and waits for it, so
    lines keep their order relative to the console's own messages.
    """

    def __init__(self, output: OutputHandler, loop: asyncio.AbstractEventLoop) -> None:
        self._output = output
        self._loop = loop

    def write(self, message: str, level: LogLevel) -> Awaitable[None] | None:
        pending = self._output.write(message, level)
        try:
            on_loop = asyncio.get_running_loop() is self._loop
        except RuntimeError:
            on_loop = False
        if on_loop:
            # Called from a coroutine the callback returned: let it await.
            return pending
        asyncio.run_coroutine_threadsafe(pending, self._loop).result()
        return None


@dataclass(frozen=True, slots=True)
class FunctionCommand:
    """
    A command implemented by a single function.

    Important fields:
        name: Unique command name (matched case-insensitively).
        description: Short, user-facing description.
        callback: `callback(args, output)`; may be a coroutine function.
            Plain functions receive a BlockingOutput whose `write` is synchronous.
        module: Grouping label used by help listings.
    """

    name: str
    description: str
    callback: CommandCallback
    module: str = "general"

    async def invoke(self, args: Sequence[str], output: OutputHandler) -> None:
        """Run the callback; plain functions are moved off the event loop."""
        arguments = list(args)
        if inspect.iscoroutinefunction(self.callback):
            result = await self.callback(arguments, output)
        else:
            bridge = BlockingOutput(output, asyncio.get_running_loop())
            result = await asyncio.to_thread(self.callback, arguments, bridge)
            if inspect.isawaitable(result):
                result = await result
        if result is not None:
            await output.write(str(result), LogLevel.INFO)
