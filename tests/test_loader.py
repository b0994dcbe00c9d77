"""Tests for the plugin loader."""

import textwrap

import pytest

from easyconsole.commands import CommandRegistry, LogLevel
from easyconsole.errors import ConfigurationError
from easyconsole.interface import ConsoleController, load_commands
from easyconsole.ui import BufferedOutputHandler


def _write_package(root, name: str) -> None:
    """Create a throwaway plugin package under `root`."""
    package = root / name
    (package / "tools").mkdir(parents=True)
    (package / "__init__.py").write_text("")
    (package / "_private.py").write_text("raise RuntimeError('must not be imported')\n")
    (package / "single.py").write_text(textwrap.dedent("""
        from easyconsole.commands import FunctionCommand, LogLevel

        async def _ping(args, output):
            await output.write("pong", LogLevel.INFO)

        COMMAND = FunctionCommand("ping", "Reply with pong.", _ping, module="Net")
    """))
    (package / "tools" / "__init__.py").write_text("")
    (package / "tools" / "entrypoint.py").write_text(textwrap.dedent("""
        from easyconsole.commands import CommandRegistry, command

        _SCRATCH = CommandRegistry()

        @command(name="shout", module="Tools", registry=_SCRATCH)
        def shout(args, output):
            return " ".join(args).upper()
    """))


class TestLoadCommands:
    """Verify module discovery and registration."""

    def test_loads_modules_and_entrypoints(self, tmp_path, monkeypatch) -> None:
        """COMMAND exports and decorated functions both land in the registry."""
        _write_package(tmp_path, "fakeplugins_a")
        monkeypatch.syspath_prepend(str(tmp_path))
        registry = CommandRegistry()

        loaded = load_commands("fakeplugins_a", registry)

        assert loaded == 2
        assert registry.names() == ["ping", "shout"]
        assert registry.lookup("ping").module == "Net"

    def test_missing_package(self) -> None:
        """An unimportable package is a configuration error."""
        with pytest.raises(ConfigurationError):
            load_commands("no_such_package_anywhere", CommandRegistry())

    def test_module_is_not_a_package(self) -> None:
        """A plain module cannot hold plugins."""
        with pytest.raises(ConfigurationError):
            load_commands("textwrap", CommandRegistry())

    async def test_bundled_plugins(self) -> None:
        """The shipped plugins register and run through a console."""
        registry = CommandRegistry()
        output = BufferedOutputHandler()
        load_commands("plugins", registry)
        assert {"echo", "upper", "count", "now", "sleep"} <= set(registry.names())

        console = ConsoleController(registry, output)
        await console.initialize()
        output.clear()
        await console.process_input('upper "quiet voice"')
        await console.process_input("upper")
        await console.process_input("count a bc")

        assert output.messages()[1] == "QUIET VOICE"
        assert "2 argument(s), 3 character(s)" in output.messages()
        assert "needs at least one argument" in output.messages(LogLevel.ERROR)[0]
