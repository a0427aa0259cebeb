"""
Hooks: the dispatch units attached to a Logger.

A hook carries its own formatter and the sinks it writes to. The facility calls
``fire`` once per record; nothing outside the hook decides how it renders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from .exceptions import FormatterError, SinkWriteError
from .formatters import BaseFormatter, ConsoleFormatter, FileFormatter
from .records import ALL_LEVELS, Level, LogRecord
from .sinks import BaseSink, StreamSink


class BaseHook(ABC):
    """Binds one formatter to one primary sink."""

    def __init__(self, formatter: BaseFormatter, sink: BaseSink) -> None:
        self.formatter = formatter
        self.sink = sink

    def levels(self) -> tuple[Level, ...]:
        return ALL_LEVELS

    def render(self, record: LogRecord) -> bytes:
        try:
            return self.formatter.format(record)
        except Exception as exc:
            raise FormatterError(formatter=type(self.formatter).__name__, reason=str(exc)) from exc

    @abstractmethod
    def fire(self, record: LogRecord) -> None:
        """Format and write one record. Raises a HookLogError on failure."""
        ...

    def close(self) -> None:
        self.sink.close()


class ConsoleHook(BaseHook):
    """Colored output on standard output."""

    def __init__(self, formatter: BaseFormatter | None = None, sink: BaseSink | None = None) -> None:
        super().__init__(formatter or ConsoleFormatter(), sink or StreamSink())

    def fire(self, record: LogRecord) -> None:
        self.sink.write(self.render(record))


class FileHook(BaseHook):
    """Plain lines appended to one file."""

    def __init__(self, sink: BaseSink, formatter: BaseFormatter | None = None) -> None:
        super().__init__(formatter or FileFormatter(), sink)

    def fire(self, record: LogRecord) -> None:
        self.sink.write(self.render(record))


class LevelHook(BaseHook):
    """
    Catch-all sink plus one sink per severity.

    Every record goes to the catch-all sink. Records whose level has an entry in
    ``level_sinks`` are also written there; other levels (TRACE, FATAL) are not.
    Both writes are always attempted and the last failure is the one raised, so
    a record may end up in only one of the two files.
    """

    def __init__(
        self,
        sink: BaseSink,
        level_sinks: Mapping[Level, BaseSink],
        formatter: BaseFormatter | None = None,
    ) -> None:
        super().__init__(formatter or FileFormatter(), sink)
        self.level_sinks = dict(level_sinks)

    def fire(self, record: LogRecord) -> None:
        line = self.render(record)

        error = _try_write(self.sink, line)

        target = self.level_sinks.get(record.level)
        if target is not None:
            error = _try_write(target, line) or error

        if error is not None:
            raise error

    def close(self) -> None:
        super().close()
        for sink in self.level_sinks.values():
            sink.close()


def _try_write(sink: BaseSink, line: bytes) -> SinkWriteError | None:
    """Write one line, returning the failure instead of raising it."""
    try:
        sink.write(line)
    except SinkWriteError as exc:
        return exc
    except Exception as exc:
        error = SinkWriteError(sink=sink.name, reason=str(exc))
        error.__cause__ = exc
        return error
    return None
