#!/usr/bin/env python3
# easyconsole/ui/output.py
from __future__ import annotations

"""
Output handlers: where console messages end up.

- ConsoleOutputHandler: colored `[Level] message` lines on a stream.
- LoggingOutputHandler: forwards to a `logging.Logger`.
- BufferedOutputHandler: keeps records in memory (embedding, tests).
"""

import asyncio
import logging
import sys
import threading
from dataclasses import dataclass
from typing import TextIO

from easyconsole.commands.command_types import LogLevel
from easyconsole.ui.utils import colorize, print_line, stream_supports_color

_LEVEL_STYLES: dict[LogLevel, tuple[str, ...]] = {
    LogLevel.INFO: (),
    LogLevel.WARNING: ("yellow",),
    LogLevel.ERROR: ("red", "bold"),
}

_LOGGING_LEVELS: dict[LogLevel, int] = {
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def format_message(message: str, level: LogLevel) -> str:
    return f"[{level}] {message}"


class ConsoleOutputHandler:
    """
    Print each message on its own line; the write runs in a worker thread.

    Color defaults to on only when the stream is a terminal.
    """

    def __init__(self, stream: TextIO | None = None, *, color: bool | None = None) -> None:
        self._stream = stream
        target = sys.stdout if stream is None else stream
        self._color = stream_supports_color(target) if color is None else color

    async def write(self, message: str, level: LogLevel) -> None:
        text = format_message(message, level)
        if self._color:
            text = colorize(text, *_LEVEL_STYLES[level])
        await asyncio.to_thread(print_line, text, file=self._stream, flush=True)


class LoggingOutputHandler:
    """Send console messages to a logger at the matching level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("easyconsole.output")

    async def write(self, message: str, level: LogLevel) -> None:
        self._logger.log(_LOGGING_LEVELS[level], message)


@dataclass(frozen=True, slots=True)
class OutputRecord:
    message: str
    level: LogLevel


class BufferedOutputHandler:
    """Collect messages in memory, in arrival order."""

    def __init__(self) -> None:
        self._records: list[OutputRecord] = []
        self._lock = threading.Lock()

    async def write(self, message: str, level: LogLevel) -> None:
        with self._lock:
            self._records.append(OutputRecord(message, level))

    @property
    def records(self) -> list[OutputRecord]:
        with self._lock:
            return list(self._records)

    def messages(self, level: LogLevel | None = None) -> list[str]:
        """Messages written so far, optionally only those at `level`."""
        return [r.message for r in self.records if level is None or r.level is level]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
