#!/usr/bin/env python3
# easyconsole/ui/utils/console.py
from __future__ import annotations

import shutil
import sys
import threading

# Single shared print mutex for all UI output (console writes and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    stream = sys.stdout if file is None else file
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def get_terminal_columns(default: int = 80) -> int:
    """Return current terminal column width with a sensible default."""
    try:
        return shutil.get_terminal_size((default, 20)).columns
    except (OSError, ValueError):
        return default
