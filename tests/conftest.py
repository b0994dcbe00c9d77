"""Shared fixtures: an isolated registry, a buffered output and a ready console."""

import pytest

from easyconsole.commands import CommandRegistry, FunctionCommand, LogLevel
from easyconsole.interface import ConsoleController
from easyconsole.ui import BufferedOutputHandler


@pytest.fixture
def registry() -> CommandRegistry:
    """Return a fresh registry so tests never touch the global one."""
    return CommandRegistry()


@pytest.fixture
def output() -> BufferedOutputHandler:
    """Return an in-memory output handler."""
    return BufferedOutputHandler()


@pytest.fixture
async def console(registry: CommandRegistry, output: BufferedOutputHandler) -> ConsoleController:
    """Return an initialized console with the start-up lines discarded."""
    controller = ConsoleController(registry, output, max_history_size=10)
    await controller.initialize()
    controller.clear()
    output.clear()
    return controller


def make_command(name: str, *, module: str = "general", reply: str | None = None,
                 error: Exception | None = None) -> FunctionCommand:
    """Build a command that writes `reply` or raises `error`."""

    async def callback(args, out):
        if error is not None:
            raise error
        if reply is not None:
            await out.write(reply, LogLevel.INFO)

    return FunctionCommand(name=name, description=f"{name} command", callback=callback, module=module)
