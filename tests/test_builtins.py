"""Tests for the default commands: hello, clear and help."""

from conftest import make_command

from easyconsole.commands import CommandRegistry, LogLevel
from easyconsole.interface import ConsoleController
from easyconsole.ui import BufferedOutputHandler


class TestHello:
    """Verify the greeting command."""

    async def test_hello(self, console: ConsoleController, output: BufferedOutputHandler) -> None:
        """hello writes a greeting at Info level."""
        await console.process_input("hello")
        assert output.messages(LogLevel.INFO)[1] == "Hello, world!"


class TestClear:
    """Verify the clear command."""

    async def test_clear_empties_history_and_transcript(self, console: ConsoleController) -> None:
        """After clear only its own confirmation lines remain."""
        await console.process_input("hello")
        await console.process_input("clear")

        assert len(console.history) == 0
        assert console.get_output().splitlines() == [
            "[Info] Console cleared.",
            "[Info] Command 'clear' executed successfully.",
        ]


class TestHelp:
    """Verify the help listing."""

    async def test_help_lists_modules_in_order(self, registry: CommandRegistry,
                                               console: ConsoleController,
                                               output: BufferedOutputHandler) -> None:
        """Modules appear sorted, each with its commands."""
        registry.register(make_command("deploy", module="Admin"))
        await console.process_input("help")

        listing = output.messages()[1]
        assert listing.startswith("Available commands:")
        assert listing.index("Admin module:") < listing.index("System module:")
        for name in ("deploy", "clear", "hello", "help"):
            assert name in listing

    async def test_help_for_one_command(self, console: ConsoleController,
                                        output: BufferedOutputHandler) -> None:
        """help <name> shows that command's details."""
        await console.process_input("help HELLO")
        detail = output.messages()[1]
        assert "Name:        hello" in detail
        assert "Module:      System" in detail

    async def test_help_for_unknown_command_fails(self, console: ConsoleController,
                                                  output: BufferedOutputHandler) -> None:
        """An unknown name is reported as a handler failure."""
        await console.process_input("help nothing")
        errors = output.messages(LogLevel.ERROR)
        assert len(errors) == 1
        assert "No such command: nothing" in errors[0]

    async def test_custom_command_wins_over_default(self, registry: CommandRegistry,
                                                    output: BufferedOutputHandler) -> None:
        """A command registered before initialize() keeps its name."""
        registry.register(make_command("hello", reply="custom"))
        controller = ConsoleController(registry, output)
        await controller.initialize()
        output.clear()

        await controller.process_input("hello")
        assert output.messages()[1] == "custom"
