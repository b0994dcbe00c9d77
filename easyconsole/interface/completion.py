#!/usr/bin/env python3
# easyconsole/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Suggestions come from the registry's subsequence matcher:
- First token: every command name the typed text is a subsequence of.
- 'help <partial>': command names for the second token.
- Anything else: no suggestions (arguments are free-form).
"""

from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from easyconsole.commands import CommandRegistry
from easyconsole.interface.parser import tokenize


def _split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix).

    Trailing whitespace appends an empty token to signal that a new one
    has started.
    """
    if not raw_input:
        return [], ""

    parts = tokenize(raw_input)
    if raw_input[-1].isspace():
        parts.append("")
    current_prefix = parts[-1] if parts else ""
    return parts, current_prefix


def suggest(registry: CommandRegistry, text_before_cursor: str) -> list[str]:
    """Produce suggestions for the buffer content before the cursor."""
    parts, current_prefix = _split_current_token(text_before_cursor.lstrip())

    if len(parts) <= 1:
        return registry.suggest(current_prefix)

    if parts[0].lower() == "help" and len(parts) == 2:
        if not current_prefix:
            return registry.names()
        return registry.suggest(current_prefix)

    return []


class CommandCompleter(Completer):
    """prompt_toolkit completer that replaces exactly the token being typed."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        _, current_prefix = _split_current_token(text_before_cursor.lstrip())
        replace_len = len(current_prefix)
        for word in suggest(self._registry, text_before_cursor):
            yield Completion(word, start_position=-replace_len)
