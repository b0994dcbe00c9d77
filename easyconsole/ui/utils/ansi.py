#!/usr/bin/env python3
# easyconsole/ui/utils/ansi.py
from __future__ import annotations

import ctypes
import functools
import os
import re

# SGR parameters by style name.
_SGR_CODES = {
    "reset": 0,
    "bold": 1,
    "dim": 2,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "magenta": 35,
    "cyan": 36,
    "bright_black": 90,
}

ANSI = {name: f"\x1b[{code}m" for name, code in _SGR_CODES.items()}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_ANSI_TERMINAL_HINTS = ("WT_SESSION", "ANSICON")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def _windows_console_accepts_vt() -> bool:
    enable_vt_processing = 0x0004
    std_output_handle = -11
    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        handle = kernel32.GetStdHandle(std_output_handle)
        mode = ctypes.c_uint()
        if handle in (0, -1) or not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            return False
        return bool(kernel32.SetConsoleMode(handle, mode.value | enable_vt_processing))
    except (AttributeError, OSError):
        return False


@functools.lru_cache(maxsize=None)
def enable_windows_vt() -> bool:
    """
    Return True when escape sequences will render on stdout.

    POSIX terminals always qualify. On Windows, known ANSI hosts qualify
    and otherwise VT processing is switched on for the console, once.
    """
    if os.name != "nt":
        return True
    if any(os.environ.get(hint) for hint in _ANSI_TERMINAL_HINTS):
        return True
    return _windows_console_accepts_vt()


def stream_supports_color(stream) -> bool:
    """True when `stream` is a terminal that will render escape sequences."""
    isatty = getattr(stream, "isatty", None)
    try:
        is_terminal = bool(isatty()) if callable(isatty) else False
    except (OSError, ValueError):
        # Closed or detached stream.
        is_terminal = False
    return is_terminal and enable_windows_vt()


def colorize(text: str, *styles: str) -> str:
    """Wrap text in the named styles; unknown names are ignored."""
    codes = [str(_SGR_CODES[s]) for s in styles if s in _SGR_CODES]
    if not codes:
        return text
    return "".join(f"\x1b[{c}m" for c in codes) + text + ANSI["reset"]
