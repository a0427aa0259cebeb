from __future__ import annotations

import threading
from datetime import datetime, timezone

import pytest

import hooklog.logging.core as core
from hooklog.logging.exceptions import SinkWriteError
from hooklog.logging.records import Level, LogRecord
from hooklog.logging.sinks import BaseSink


class MemorySink(BaseSink):
    """In-memory sink collecting every write."""

    def __init__(self, name: str = "memory") -> None:
        self._name = name
        self.writes: list[bytes] = []
        self.closed = False
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def write(self, data: bytes) -> None:
        with self._lock:
            self.writes.append(data)

    def close(self) -> None:
        self.closed = True

    @property
    def lines(self) -> list[str]:
        return [w.decode("utf-8") for w in self.writes]


class FailingSink(MemorySink):
    """Sink whose every write fails."""

    def write(self, data: bytes) -> None:
        raise SinkWriteError(sink=self.name, reason="disk full")


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def make_sink():
    """Factory for named in-memory sinks; ``failing=True`` builds one that always fails."""

    def _make(name: str = "memory", *, failing: bool = False) -> MemorySink:
        return FailingSink(name) if failing else MemorySink(name)

    return _make


@pytest.fixture
def make_record():
    """Factory for records with a fixed timestamp."""

    def _make(
        level: Level = Level.INFO,
        message: str = "hello",
        filename: str = "app.py",
        lineno: int = 42,
    ) -> LogRecord:
        return LogRecord(
            timestamp=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
            level=level,
            message=message,
            filename=filename,
            lineno=lineno,
        )

    return _make


@pytest.fixture(autouse=True)
def reset_global_logger(monkeypatch):
    """Every test starts without a configured global facility."""
    monkeypatch.setattr(core, "_logger", None)
    yield
    if core._logger is not None:
        core._logger.close()
