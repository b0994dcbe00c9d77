#!/usr/bin/env python3
# easyconsole/ui/static/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from easyconsole.ui.utils import PRINT_MUTEX, colorize, strip_ansi, stream_supports_color

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 2_000_000
LOG_FILE_BACKUPS = 3


class ColorizingStreamHandler(logging.StreamHandler):
    """
    StreamHandler that colors records by level when ANSI is available.

    Writes happen under PRINT_MUTEX so log lines never interleave with
    console output.
    """

    level_styles: dict[int, tuple[str, ...]] = {
        logging.DEBUG: ("bright_black",),
        logging.WARNING: ("yellow",),
        logging.ERROR: ("red",),
        logging.CRITICAL: ("magenta", "bold"),
    }

    def __init__(self, stream=None, *, color: Optional[bool] = None) -> None:
        super().__init__(stream)
        self.color = stream_supports_color(self.stream) if color is None else color

    def render(self, record: logging.LogRecord) -> str:
        text = self.format(record)
        if not self.color:
            return strip_ansi(text)
        return colorize(text, *self.level_styles.get(record.levelno, ()))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self.render(record)
            with PRINT_MUTEX:
                self.stream.write(text + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter whose output never carries escape sequences (log files)."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def _file_handler(path: str | Path) -> RotatingFileHandler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(PlainFormatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def init_logger(
    name: str = "easyconsole",
    level: int | str = logging.INFO,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger; safe to call more than once.

    Console records go to stderr (colored when possible). With `logfile` a
    rotating UTF-8 file receives the same records without color.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    console = next((h for h in logger.handlers if isinstance(h, ColorizingStreamHandler)), None)
    if console is None:
        console = ColorizingStreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console)
    console.setLevel(level)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        logger.addHandler(_file_handler(logfile))

    return logger
