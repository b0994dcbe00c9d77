#!/usr/bin/env python3
# easyconsole/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends and the REPL loop.

Selection order:
    1) prompt_toolkit (completion, history suggestions, Up/Down navigation)
    2) plain input() in a worker thread (non-interactive stdin)
"""

import asyncio
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.document import Document
from prompt_toolkit.filters import has_completions
from prompt_toolkit.key_binding import KeyBindings

from easyconsole.config import AppConfig
from easyconsole.interface.completion import CommandCompleter
from easyconsole.interface.handler import ConsoleController
from easyconsole.interface.history import RingHistory
from easyconsole.ui import print_line

DEFAULT_PROMPT = "> "
EXIT_WORDS = frozenset({"exit", "quit"})

BANNER = "easyconsole - type 'help' for commands, 'exit' to quit."


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses implement `get_line()`; `setup()` / `teardown()` are optional.
    Context manager support guarantees teardown.
    """

    def setup(self) -> None:
        pass

    async def get_line(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def teardown(self) -> None:
        pass

    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


def build_key_bindings(controller: ConsoleController) -> KeyBindings:
    """
    Up/Down walk the console's own history cursor.

    While the completion menu is open the keys are left to prompt_toolkit,
    which moves through the candidates instead.
    """
    kb = KeyBindings()
    browsing_history = ~has_completions

    @kb.add("up", filter=browsing_history)
    def _(event):
        entry = controller.previous_history()
        # "" means the oldest entry is already shown: keep the buffer.
        if entry:
            event.app.current_buffer.document = Document(entry, cursor_position=len(entry))

    @kb.add("down", filter=browsing_history)
    def _(event):
        if controller.history.cursor == -1:
            return
        entry = controller.next_history()
        event.app.current_buffer.document = Document(entry, cursor_position=len(entry))

    return kb


class PromptToolkitCLI(BaseCLI):
    """Rich line editor with live completion and history navigation."""

    def __init__(self, controller: ConsoleController, *, prompt: str = DEFAULT_PROMPT,
                 enable_completion: bool = True) -> None:
        self.prompt = prompt
        self._session: PromptSession[str] = PromptSession(
            history=RingHistory(controller.history),
            completer=CommandCompleter(controller.registry) if enable_completion else None,
            complete_while_typing=enable_completion,
            auto_suggest=AutoSuggestFromHistory(),
            key_bindings=build_key_bindings(controller),
        )

    async def get_line(self) -> str:
        return await self._session.prompt_async(self.prompt)


class PlainCLI(BaseCLI):
    """Fallback for pipes and dumb terminals: no completion, no editing."""

    def __init__(self, *, prompt: str = DEFAULT_PROMPT) -> None:
        self.prompt = prompt

    async def get_line(self) -> str:
        return await asyncio.to_thread(input, self.prompt)


def make_cli(controller: ConsoleController, config: AppConfig | None = None) -> BaseCLI:
    """Select the best frontend for the current terminal."""
    prompt = config.prompt if config is not None else DEFAULT_PROMPT
    if sys.stdin.isatty() and sys.stdout.isatty():
        enable_completion = config.enable_completion if config is not None else True
        return PromptToolkitCLI(controller, prompt=prompt, enable_completion=enable_completion)
    return PlainCLI(prompt=prompt)


async def repl(controller: ConsoleController, cli: BaseCLI) -> None:
    """Read lines and dispatch them until exit, EOF, or Ctrl+C."""
    with cli:
        while True:
            try:
                line = await cli.get_line()
            except EOFError:
                break
            except KeyboardInterrupt:
                print_line("Interrupted.")
                break

            if line.strip().lower() in EXIT_WORDS:
                break
            await controller.process_input(line)


async def run_console(config: AppConfig | None = None) -> None:
    """Boot, run the REPL, then tear the console down."""
    # Imported here: boot depends on this package.
    from easyconsole.boot import boot_sequence

    state = await boot_sequence(config)
    controller = state.controller
    if state.config.show_banner:
        print_line(BANNER)
    try:
        await repl(controller, make_cli(controller, state.config))
    finally:
        await controller.cleanup()
