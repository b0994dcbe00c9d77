#!/usr/bin/env python3
# easyconsole/config/config.py
from __future__ import annotations

"""
Layered console configuration (stdlib-only).

Sources, lowest precedence first:
  1) DEFAULTS
  2) Files in the working directory, in order: .env, config.ini,
     config.json, config.toml (nested tables flatten to UPPER_SNAKE keys)
  3) EASYCONSOLE_* environment variables, prefix stripped

Keys:
  MAX_HISTORY_SIZE   int >= 1
  COMMANDS_PACKAGE   dotted package name, or none/empty to disable plugins
  LOG_LEVEL          DEBUG | INFO | WARNING | ERROR | CRITICAL
  LOG_FILE_PATH      optional path, relative to the working directory
  PROMPT             prompt string
  ENABLE_COMPLETION  bool
  SHOW_BANNER        bool
"""

import configparser
import json
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from easyconsole.errors import ConfigurationError

ENV_PREFIX = "EASYCONSOLE_"

DEFAULTS: dict[str, Any] = {
    "MAX_HISTORY_SIZE": 100,
    "COMMANDS_PACKAGE": "plugins",
    "LOG_LEVEL": "INFO",
    "LOG_FILE_PATH": None,
    "PROMPT": "> ",
    "ENABLE_COMPLETION": True,
    "SHOW_BANNER": True,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DOTTED_NAME = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*", re.ASCII)
_ENV_LINE = re.compile(r"(?:export\s+)?([A-Za-z_]\w*)\s*=\s*(.*)")
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class AppConfig:
    max_history_size: int
    commands_package: str | None
    log_level: str
    log_file_path: Path | None
    prompt: str
    enable_completion: bool
    show_banner: bool
    # Keys no field claims, kept for plugins that read their own settings.
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- readers ----------

def _read_env(path: Path) -> dict[str, Any]:
    """KEY=VALUE lines; '#' comments, optional `export` and matching quotes."""
    values: dict[str, Any] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        match = _ENV_LINE.fullmatch(line.strip())
        if match is None or line.lstrip().startswith("#"):
            continue
        key, value = match.group(1), match.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def _read_ini(path: Path) -> dict[str, Any]:
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(path.read_text(encoding="utf-8"), source=str(path))
    except configparser.Error as exc:
        raise ConfigurationError(f"Invalid INI config {path}: {exc}") from exc
    # Section names only group keys; they are not part of the key.
    return {key: value for section in parser.sections() for key, value in parser[section].items()}


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid JSON config {path}: top level must be an object")
    return _flatten(data)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return _flatten(tomllib.loads(path.read_text(encoding="utf-8")))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML config {path}: {exc}") from exc


def _flatten(tree: Mapping[str, Any], parent: str = "") -> dict[str, Any]:
    """{'log': {'level': 'debug'}} -> {'log_level': 'debug'}"""
    flat: dict[str, Any] = {}
    for key, value in tree.items():
        name = f"{parent}_{key}" if parent else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, name))
        else:
            flat[name] = value
    return flat


_FILE_READERS: tuple[tuple[str, Callable[[Path], dict[str, Any]]], ...] = (
    (".env", _read_env),
    ("config.ini", _read_ini),
    ("config.json", _read_json),
    ("config.toml", _read_toml),
)


# ---------- coercion ----------

def _to_bool(key: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    word = str(raw).strip().lower()
    if word in _TRUTHY:
        return True
    if word in _FALSY:
        return False
    raise ConfigurationError(f"{key}: expected a boolean, got {raw!r}")


def _to_history_size(key: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ConfigurationError(f"{key}: expected an integer, got {raw!r}")
    try:
        size = int(str(raw).strip()) if not isinstance(raw, int) else raw
    except ValueError as exc:
        raise ConfigurationError(f"{key}: expected an integer, got {raw!r}") from exc
    if size < 1:
        raise ConfigurationError(f"{key} must be >= 1, got {size}")
    return size


def _to_optional(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return None if text.lower() in ("", "none") else text


def _to_package(key: str, raw: Any) -> str | None:
    name = _to_optional(raw)
    if name is not None and not _DOTTED_NAME.fullmatch(name):
        raise ConfigurationError(f"{key} must be a dotted module name, got {name!r}")
    return name


def _to_log_level(key: str, raw: Any) -> str:
    level = (_to_optional(raw) or DEFAULTS["LOG_LEVEL"]).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"{key} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


# ---------- assembly ----------

def _collect(cwd: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged = dict(DEFAULTS)
    for filename, reader in _FILE_READERS:
        path = cwd / filename
        if path.is_file():
            merged.update({str(k).upper(): v for k, v in reader(path).items()})
    merged.update({
        key[len(ENV_PREFIX):].upper(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX) and key != ENV_PREFIX
    })
    return merged


def _build(values: dict[str, Any], cwd: Path) -> AppConfig:
    log_file = _to_optional(values["LOG_FILE_PATH"])
    log_file_path = None
    if log_file is not None:
        log_file_path = Path(os.path.expandvars(os.path.expanduser(log_file)))
        if not log_file_path.is_absolute():
            log_file_path = (cwd / log_file_path).resolve()

    prompt = values["PROMPT"]
    return AppConfig(
        max_history_size=_to_history_size("MAX_HISTORY_SIZE", values["MAX_HISTORY_SIZE"]),
        commands_package=_to_package("COMMANDS_PACKAGE", values["COMMANDS_PACKAGE"]),
        log_level=_to_log_level("LOG_LEVEL", values["LOG_LEVEL"]),
        log_file_path=log_file_path,
        prompt=DEFAULTS["PROMPT"] if prompt is None else str(prompt),
        enable_completion=_to_bool("ENABLE_COMPLETION", values["ENABLE_COMPLETION"]),
        show_banner=_to_bool("SHOW_BANNER", values["SHOW_BANNER"]),
        extra={k: v for k, v in values.items() if k not in DEFAULTS},
    )


def load_config(*, cwd: Path | str | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Merge every configuration source and validate the result."""
    base = Path.cwd() if cwd is None else Path(cwd)
    return _build(_collect(base, os.environ if environ is None else environ), base)
