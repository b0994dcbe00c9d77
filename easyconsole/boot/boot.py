#!/usr/bin/env python3
# easyconsole/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the console.

Each step prints a status line ([  OK  ] / [FAILED]). The controller is
fully initialized (default commands registered) before boot returns, so
no input can race the setup.
"""

import logging
import platform
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from easyconsole.commands import REGISTRY, CommandRegistry, OutputHandler
from easyconsole.config import AppConfig, load_config
from easyconsole.interface.handler import ConsoleController
from easyconsole.interface.loader import load_commands
from easyconsole.ui import ConsoleOutputHandler, colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    controller: ConsoleController
    loaded_count: int


def _report(label: str, failure: BaseException | None = None) -> None:
    if failure is None:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    else:
        print_line(colorize(f"[FAILED] {label} ({type(failure).__name__}: {failure})", "red"))


def _step(label: str, fn: Callable[[], Any]) -> Any:
    """Run one boot step and print its status line."""
    try:
        result = fn()
    except Exception as exc:
        _report(label, exc)
        raise
    _report(label)
    return result


async def _astep(label: str, fn: Callable[[], Awaitable[Any]]) -> Any:
    try:
        result = await fn()
    except Exception as exc:
        _report(label, exc)
        raise
    _report(label)
    return result


async def boot_sequence(
    config: AppConfig | None = None,
    *,
    output: OutputHandler | None = None,
    registry: CommandRegistry | None = None,
) -> BootState:
    # ---------- environment ----------
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
    )

    # ---------- config ----------
    if config is None:
        config = _step("Load configuration", load_config)
    else:
        _step("Use supplied configuration", lambda: None)

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "easyconsole",
            level=config.log_level,
            logfile=str(config.log_file_path) if config.log_file_path else None,
        ),
    )

    # ---------- commands ----------
    target = REGISTRY if registry is None else registry
    loaded_count = 0
    if config.commands_package:
        loaded_count = _step(
            f"Load commands package '{config.commands_package}'",
            lambda: load_commands(config.commands_package, target),
        )
    else:
        _step("Skip command plugins (config)", lambda: None)

    # ---------- controller ----------
    controller = _step(
        "Create console controller",
        lambda: ConsoleController(
            target,
            output or ConsoleOutputHandler(),
            config.max_history_size,
        ),
    )
    await _astep("Register default commands", controller.initialize)
    _step(f"Boot complete ({len(target)} commands)", lambda: None)

    return BootState(
        config=config,
        logger=logger,
        controller=controller,
        loaded_count=loaded_count,
    )
