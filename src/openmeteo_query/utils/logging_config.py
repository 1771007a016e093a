"""Console logging setup with colored level labels for scripts using the client."""
from __future__ import annotations
import logging
import os
import sys
from typing import Optional, TextIO


def _supports_ansi(stream: TextIO) -> bool:
    """Detect if ``stream`` should receive ANSI escape codes.

    Returns:
        True if ANSI codes are supported, False otherwise.
    """
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if sys.platform == "win32":
        return bool(
            os.environ.get("WT_SESSION")  # Windows Terminal
            or os.environ.get("ANSICON")
            or os.environ.get("ConEmuANSI") == "ON"
            or "TERM" in os.environ  # Git Bash, Cygwin
        )
    return True


class LogColors:
    """ANSI color codes for log level labels and logger names."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DEBUG = '\033[36m'      # Cyan
    INFO = '\033[32m'       # Green
    WARNING = '\033[33m'    # Yellow
    ERROR = '\033[31m'      # Red
    CRITICAL = '\033[35m'   # Magenta
    MODULE = '\033[94m'     # Blue


class ColoredFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] logger - message``, colored when enabled."""

    LEVEL_COLORS = {
        'DEBUG': LogColors.DEBUG,
        'INFO': LogColors.INFO,
        'WARNING': LogColors.WARNING,
        'ERROR': LogColors.ERROR,
        'CRITICAL': LogColors.CRITICAL,
    }

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return f"[{record.levelname}] {record.name} - {message}"
        level_color = self.LEVEL_COLORS.get(record.levelname, LogColors.RESET)
        colored_levelname = f"{level_color}{LogColors.BOLD}[{record.levelname}]{LogColors.RESET}"
        colored_module = f"{LogColors.MODULE}{record.name}{LogColors.RESET}"
        return f"{colored_levelname} {colored_module} - {message}"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging with the colored console formatter.

    Replaces existing root handlers and limits ``urllib3`` to WARNING.

    Args:
        level: Logging level (default: logging.INFO).
        stream: Output stream (default: sys.stdout).

    Example:
        >>> from openmeteo_query.utils.logging_config import configure_logging
        >>> configure_logging(logging.DEBUG)  # shows request URLs
    """
    stream = stream or sys.stdout
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_color=_supports_ansi(stream)))
    root_logger.addHandler(console_handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["LogColors", "ColoredFormatter", "configure_logging"]
