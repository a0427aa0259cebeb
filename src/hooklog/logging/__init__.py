"""
Hook-based logging for hooklog.

Records emitted through a ``Logger`` are dispatched to its hooks:
- ConsoleHook: colored lines on standard output
- FileHook: plain lines in one file
- LevelHook: a catch-all file plus one file per severity

Design Pattern: Strategy Pattern for formatter and sink abstraction.
Library: structlog (processor chain, call-site capture).
"""

from .core import HookBoundLogger, Logger, configure_logging, get_logger
from .exceptions import FormatterError, HookLogError, SinkOpenError, SinkWriteError
from .formatters import ConsoleFormatter, FileFormatter
from .hooks import BaseHook, ConsoleHook, FileHook, LevelHook
from .records import Level, LogRecord
from .router import DateLogConfig, LevelLogConfig
from .sinks import BaseSink, FileSink, StreamSink

__all__ = [
    "configure_logging",
    "get_logger",
    "Logger",
    "HookBoundLogger",
    "Level",
    "LogRecord",
    "ConsoleFormatter",
    "FileFormatter",
    "BaseSink",
    "StreamSink",
    "FileSink",
    "BaseHook",
    "ConsoleHook",
    "FileHook",
    "LevelHook",
    "DateLogConfig",
    "LevelLogConfig",
    "HookLogError",
    "FormatterError",
    "SinkWriteError",
    "SinkOpenError",
]
