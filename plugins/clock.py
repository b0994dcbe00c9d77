# plugins/clock.py
from __future__ import annotations

"""
Time helpers, exported as a COMMANDS list instead of via the decorator.
"""

import asyncio
from datetime import datetime, timezone

from easyconsole.commands import FunctionCommand, LogLevel, OutputHandler


async def _now(args: list[str], output: OutputHandler) -> None:
    stamp = datetime.now(timezone.utc) if args[:1] == ["utc"] else datetime.now()
    await output.write(stamp.isoformat(timespec="seconds"), LogLevel.INFO)


async def _sleep(args: list[str], output: OutputHandler) -> None:
    seconds = float(args[0]) if args else 1.0
    if seconds < 0:
        raise ValueError("seconds must be >= 0")
    await asyncio.sleep(seconds)
    await output.write(f"Slept {seconds:g}s", LogLevel.INFO)


COMMANDS = [
    FunctionCommand(
        name="now",
        description="Print the current time. Usage: now [utc]",
        callback=_now,
        module="Clock",
    ),
    FunctionCommand(
        name="sleep",
        description="Wait without blocking the console. Usage: sleep [seconds]",
        callback=_sleep,
        module="Clock",
    ),
]
