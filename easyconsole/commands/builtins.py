#!/usr/bin/env python3
# easyconsole/commands/builtins.py
from __future__ import annotations

"""
Default commands registered by every console: hello, clear, help.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from easyconsole.commands.command_types import Command, LogLevel, OutputHandler
from easyconsole.ui import format_table, get_terminal_columns

if TYPE_CHECKING:
    from easyconsole.commands.commands import CommandRegistry
    from easyconsole.interface.handler import ConsoleController

BUILTIN_MODULE = "System"


def format_command_listing(registry: CommandRegistry) -> str:
    """Render every command, one table per module."""
    grouped = registry.grouped()
    if not grouped:
        return "No commands registered."

    sections = ["Available commands:"]
    for module, commands in grouped.items():
        rows = [[c.name, c.description or "-"] for c in commands]
        sections.append(f"\n{module} module:")
        sections.append(format_table(rows, headers=["Command", "Description"],
                                     max_width=get_terminal_columns()))
    return "\n".join(sections)


def format_command_help(command_obj: Command) -> str:
    """Render the detail block for a single command."""
    lines = [
        f"Name:        {command_obj.name}",
        f"Module:      {command_obj.module}",
        f"Description: {command_obj.description or '(none)'}",
    ]
    return "\n".join(lines)


@dataclass(frozen=True)
class HelloCommand:
    name: str = "hello"
    description: str = "Print a greeting. Usage: hello"
    module: str = BUILTIN_MODULE

    async def invoke(self, args: Sequence[str], output: OutputHandler) -> None:
        await output.write("Hello, world!", LogLevel.INFO)


@dataclass(frozen=True)
class ClearCommand:
    controller: ConsoleController = field(repr=False)
    name: str = "clear"
    description: str = "Clear console output and history. Usage: clear"
    module: str = BUILTIN_MODULE

    async def invoke(self, args: Sequence[str], output: OutputHandler) -> None:
        self.controller.clear()
        await output.write("Console cleared.", LogLevel.INFO)


@dataclass(frozen=True)
class HelpCommand:
    registry: CommandRegistry = field(repr=False)
    name: str = "help"
    description: str = "List available commands, or describe one. Usage: help [command]"
    module: str = BUILTIN_MODULE

    async def invoke(self, args: Sequence[str], output: OutputHandler) -> None:
        if not args:
            await output.write(format_command_listing(self.registry), LogLevel.INFO)
            return

        command_obj = self.registry.lookup(args[0])
        if command_obj is None:
            raise LookupError(f"No such command: {args[0]}")
        await output.write(format_command_help(command_obj), LogLevel.INFO)


def default_commands(controller: ConsoleController) -> list[Command]:
    """Build the default command set bound to `controller`."""
    return [
        HelloCommand(),
        ClearCommand(controller),
        HelpCommand(controller.registry),
    ]
