"""Tests for prompt_toolkit completion.

The logic is pure (buffer text in, candidates out), so it is tested
without a terminal.
"""

from conftest import make_command
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from easyconsole.commands import CommandRegistry
from easyconsole.interface import CommandCompleter, suggest


def _registry(*names: str) -> CommandRegistry:
    registry = CommandRegistry()
    for name in names:
        registry.register(make_command(name))
    return registry


class TestSuggest:
    """Verify buffer-based suggestions."""

    def test_first_token_uses_subsequence(self) -> None:
        """The first word is matched as a subsequence."""
        assert suggest(_registry("hello", "help", "clear"), "hp") == ["help"]

    def test_empty_buffer(self) -> None:
        """Nothing typed yet suggests nothing."""
        assert suggest(_registry("hello"), "") == []

    def test_arguments_get_no_suggestions(self) -> None:
        """After the command name, arguments are free-form."""
        assert suggest(_registry("hello"), "hello wor") == []

    def test_help_argument_completes_names(self) -> None:
        """The argument of help is a command name."""
        registry = _registry("hello", "help", "clear")
        assert suggest(registry, "help cl") == ["clear"]
        assert suggest(registry, "help ") == ["clear", "hello", "help"]


class TestCommandCompleter:
    """Verify prompt_toolkit Completion objects."""

    def test_replaces_current_token(self) -> None:
        """Each completion replaces exactly the typed prefix."""
        completer = CommandCompleter(_registry("hello", "help"))
        completions = list(completer.get_completions(Document("hl"), CompleteEvent()))
        assert [c.text for c in completions] == ["hello", "help"]
        assert all(c.start_position == -2 for c in completions)
