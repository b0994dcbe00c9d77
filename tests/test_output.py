"""Tests for output handlers and logging setup."""

import io
import logging

from easyconsole.commands import LogLevel
from easyconsole.ui import (
    BufferedOutputHandler,
    ColorizingStreamHandler,
    ConsoleOutputHandler,
    LoggingOutputHandler,
    PlainFormatter,
    enable_windows_vt,
    format_table,
    init_logger,
    stream_supports_color,
    strip_ansi,
)


class TestConsoleOutputHandler:
    """Verify terminal output."""

    async def test_plain_line(self) -> None:
        """Without color each message is one '[Level] message' line."""
        stream = io.StringIO()
        handler = ConsoleOutputHandler(stream, color=False)
        await handler.write("ready", LogLevel.INFO)
        await handler.write("careful", LogLevel.WARNING)
        assert stream.getvalue() == "[Info] ready\n[Warning] careful\n"

    async def test_colored_error(self) -> None:
        """With color the text is wrapped in ANSI codes."""
        stream = io.StringIO()
        await ConsoleOutputHandler(stream, color=True).write("bad", LogLevel.ERROR)
        value = stream.getvalue()
        assert "\x1b[31m" in value
        assert strip_ansi(value) == "[Error] bad\n"

    async def test_no_color_by_default_on_non_terminal(self) -> None:
        """A stream that is not a tty gets plain text unless color is forced."""
        stream = io.StringIO()
        await ConsoleOutputHandler(stream).write("bad", LogLevel.ERROR)
        assert stream.getvalue() == "[Error] bad\n"

    def test_stream_supports_color(self) -> None:
        """Only terminals qualify; closed streams do not raise."""

        class FakeTerminal(io.StringIO):
            def isatty(self) -> bool:
                return True

        closed = io.StringIO()
        closed.close()
        assert stream_supports_color(FakeTerminal()) is enable_windows_vt()
        assert stream_supports_color(io.StringIO()) is False
        assert stream_supports_color(closed) is False
        assert stream_supports_color(object()) is False


class TestLoggingOutputHandler:
    """Verify logger forwarding."""

    async def test_levels_map(self, caplog) -> None:
        """Console levels map to logging levels."""
        logger = logging.getLogger("easyconsole.test.output")
        handler = LoggingOutputHandler(logger)
        with caplog.at_level(logging.INFO, logger="easyconsole.test.output"):
            await handler.write("a", LogLevel.INFO)
            await handler.write("b", LogLevel.WARNING)
            await handler.write("c", LogLevel.ERROR)
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "a"),
            (logging.WARNING, "b"),
            (logging.ERROR, "c"),
        ]


class TestBufferedOutputHandler:
    """Verify in-memory capture."""

    async def test_records_and_filter(self) -> None:
        """Messages are kept in order and can be filtered by level."""
        handler = BufferedOutputHandler()
        await handler.write("one", LogLevel.INFO)
        await handler.write("two", LogLevel.ERROR)
        assert handler.messages() == ["one", "two"]
        assert handler.messages(LogLevel.ERROR) == ["two"]
        handler.clear()
        assert handler.records == []


class TestInitLogger:
    """Verify logger initialization."""

    def test_handlers_added_once(self, tmp_path) -> None:
        """Calling init_logger twice does not duplicate handlers."""
        logfile = tmp_path / "console.log"
        logger = init_logger("easyconsole.test.init", logging.DEBUG, str(logfile))
        init_logger("easyconsole.test.init", logging.DEBUG, str(logfile))
        try:
            kinds = [type(h) for h in logger.handlers]
            assert kinds.count(ColorizingStreamHandler) == 1
            assert len(logger.handlers) == 2
            logger.info("\x1b[31mcolored\x1b[0m")
            for h in logger.handlers:
                h.flush()
            assert "colored" in logfile.read_text(encoding="utf-8")
            assert "\x1b[" not in logfile.read_text(encoding="utf-8")
        finally:
            for h in list(logger.handlers):
                h.close()
                logger.removeHandler(h)

    def test_stream_handler_plain_on_non_terminal(self) -> None:
        """Log lines written to a pipe or file carry no color."""
        stream = io.StringIO()
        handler = ColorizingStreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.emit(logging.LogRecord("x", logging.ERROR, __file__, 1, "oops", None, None))
        assert handler.color is False
        assert stream.getvalue() == "oops\n"

    def test_plain_formatter_strips_ansi(self) -> None:
        """PlainFormatter removes escape sequences."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "\x1b[32mok\x1b[0m", None, None)
        assert PlainFormatter("%(message)s").format(record) == "ok"


class TestFormatTable:
    """Verify table rendering."""

    def test_columns_align(self) -> None:
        """Cells are padded to the widest value, colors not counted."""
        table = format_table([["hello", "\x1b[32mGreets\x1b[0m"], ["help", "Lists"]],
                             headers=["Command", "Description"])
        lines = [strip_ansi(line) for line in table.splitlines()]
        assert len({len(line) for line in lines}) == 1
        assert lines[1] == "| Command | Description |"

    def test_last_column_wraps_to_width(self) -> None:
        """With max_width the description wraps onto continuation rows."""
        table = format_table([["a", "one two three"]], headers=["C", "Description"], max_width=20)
        lines = table.splitlines()
        assert all(len(line) <= 20 for line in lines)
        assert any(line.startswith("|   | three") for line in lines)
