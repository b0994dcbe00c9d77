#!/usr/bin/env python3
# easyconsole/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports all public modules under a given package (default: 'plugins').
- Supports 'entrypoint.py' inside a subpackage.
- Registers exported COMMAND / COMMANDS objects and every function
  decorated with @command found in the imported modules.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import Iterable

from easyconsole.commands import REGISTRY, Command, CommandRegistry
from easyconsole.commands.commands import COMMAND_ATTRIBUTE
from easyconsole.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _exported_commands(module: ModuleType) -> list[Command]:
    """Collect COMMAND, COMMANDS and decorated functions from a module."""
    found: list[Command] = []
    single = getattr(module, "COMMAND", None)
    if isinstance(single, Command):
        found.append(single)
    many = getattr(module, "COMMANDS", None)
    if isinstance(many, Iterable) and not isinstance(many, (str, bytes)):
        found.extend(item for item in many if isinstance(item, Command))
    for value in vars(module).values():
        decorated = getattr(value, COMMAND_ATTRIBUTE, None)
        if decorated is not None:
            found.append(decorated)
    return found


def _register_from_module(module: ModuleType, registry: CommandRegistry) -> int:
    registered_count = 0
    for command_obj in _exported_commands(module):
        if registry.register(command_obj):
            registered_count += 1
        elif registry.lookup(command_obj.name) is not command_obj:
            logger.warning("Command '%s' from %s collides with an existing command.",
                           command_obj.name, module.__name__)
    return registered_count


def load_commands(commands_package: str = "plugins", registry: CommandRegistry | None = None) -> int:
    """
    Import all modules under the given package (e.g., 'plugins').

    Supported layouts:
      1) Plain modules: plugins/foo.py  -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint

    Returns the number of modules imported.
    """
    target = REGISTRY if registry is None else registry
    try:
        package = importlib.import_module(commands_package)
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import commands package '{commands_package}': {exc}") from exc

    package_paths = [str(p) for p in getattr(package, "__path__", [])]
    if not package_paths:
        raise ConfigurationError(
            f"'{commands_package}' must be a package (folder) with modules.")

    loaded_count = 0
    registered_count = _register_from_module(package, target)

    for base_path in package_paths:
        for modinfo in pkgutil.iter_modules([base_path]):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            qualified = f"{commands_package}.{module_name}"
            if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                qualified = f"{qualified}.entrypoint"

            module = importlib.import_module(qualified)
            loaded_count += 1
            registered_count += _register_from_module(module, target)

    logger.debug("Loaded %d module(s) from '%s', %d new command(s).",
                 loaded_count, commands_package, registered_count)
    return loaded_count
