"""
Log formatters and color utilities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .records import Level, LogRecord

# =============================================================================
# ANSI Colors
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "red": "\033[31m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "cyan": "\033[36m",
    "gray": "\033[37m",
}

LEVEL_COLORS = {
    Level.ERROR: "red",
    Level.WARNING: "yellow",
    Level.INFO: "blue",
    Level.DEBUG: "cyan",
}

DEFAULT_COLOR = "gray"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


# =============================================================================
# Formatters
# =============================================================================


class BaseFormatter(ABC):
    """Renders a LogRecord into the bytes written to a sink."""

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> None:
        self.timestamp_format = timestamp_format

    def _format_timestamp(self, record: LogRecord) -> str:
        return record.timestamp.astimezone().strftime(self.timestamp_format)

    @abstractmethod
    def format(self, record: LogRecord) -> bytes: ...


class ConsoleFormatter(BaseFormatter):
    """
    Colored single-line format for terminal display.

    Example: [svc] \\033[34m[info]\\033[0m [2024-01-01 12:00:00] main.py:12 started
    """

    def __init__(self, tag: str = "xx", timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> None:
        super().__init__(timestamp_format)
        self.tag = tag

    @staticmethod
    def color_for(level: Level) -> str:
        return LEVEL_COLORS.get(level, DEFAULT_COLOR)

    def format(self, record: LogRecord) -> bytes:
        level_text = colorize(f"[{record.level_name}]", self.color_for(record.level))
        timestamp = self._format_timestamp(record)
        line = f"[{self.tag}] {level_text} [{timestamp}] {record.filename}:{record.lineno} {record.message}\n"
        return line.encode("utf-8")


class FileFormatter(BaseFormatter):
    """
    Plain format for log files.

    Example: [INFO] 2024-01-01 12:00:00 [main.py:12] started
    """

    def format(self, record: LogRecord) -> bytes:
        timestamp = self._format_timestamp(record)
        line = f"[{record.level_name.upper()}] {timestamp} [{record.filename}:{record.lineno}] {record.message}\n"
        return line.encode("utf-8")
