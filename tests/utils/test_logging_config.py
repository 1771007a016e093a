"""Tests for the console logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from openmeteo_query.utils.logging_config import ColoredFormatter, LogColors, configure_logging


def _record(level: int = logging.INFO, msg: str = "hello %s", args: tuple = ("world",)) -> logging.LogRecord:
    return logging.LogRecord("openmeteo_query.builder", level, __file__, 1, msg, args, None)


class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_plain_format(self) -> None:
        """Without color the layout is [LEVEL] logger - message."""
        formatted = ColoredFormatter(use_color=False).format(_record())
        assert formatted == "[INFO] openmeteo_query.builder - hello world"

    def test_colored_format_wraps_level(self) -> None:
        """Level labels get their color and a reset."""
        formatted = ColoredFormatter(use_color=True).format(_record(logging.ERROR))
        assert formatted.startswith(f"{LogColors.ERROR}{LogColors.BOLD}[ERROR]{LogColors.RESET}")
        assert formatted.endswith("hello world")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_single_handler(self, restore_root_logger, monkeypatch) -> None:
        """Existing handlers are replaced by one console handler."""
        monkeypatch.setenv("NO_COLOR", "1")
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream)
        configure_logging(logging.DEBUG, stream=stream)

        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

        logging.getLogger("openmeteo_query.test").debug("request %s", "sent")
        assert stream.getvalue() == "[DEBUG] openmeteo_query.test - request sent\n"

    def test_force_color(self, restore_root_logger, monkeypatch) -> None:
        """FORCE_COLOR enables ANSI output on non-TTY streams."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger("openmeteo_query.test").info("colored")
        assert LogColors.INFO in stream.getvalue()

    def test_quiets_urllib3(self, restore_root_logger) -> None:
        configure_logging(stream=io.StringIO())
        assert logging.getLogger("urllib3").level == logging.WARNING
