"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import os
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO

from .exceptions import SinkOpenError, SinkWriteError

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for append-only log sinks.

    Implementations serialize their own writes so a record written from one
    thread is never interleaved with a record written from another.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Append one rendered record."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StreamSink(BaseSink):
    """Text stream sink.

    Args:
        stream: Output stream. Defaults to whatever ``sys.stdout`` is at write time.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return getattr(self._target(), "name", "<stream>")

    def _target(self) -> Any:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, data: bytes) -> None:
        stream = self._target()
        try:
            with self._lock:
                stream.write(data.decode("utf-8", errors="replace"))
                stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(sink=self.name, reason=str(exc)) from exc

    def close(self) -> None:
        # The process owns stdout; only flush it.
        stream = self._target()
        if not getattr(stream, "closed", False):
            stream.flush()


def _private_opener(path: str, flags: int) -> int:
    return os.open(path, flags, 0o600)


class FileSink(BaseSink):
    """Local file sink opened in append-or-create mode."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        try:
            self._file = open(self._path, "ab", opener=_private_opener)
        except OSError as exc:
            raise SinkOpenError(path=str(self._path), reason=exc.strerror or str(exc)) from exc
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return str(self._path)

    def write(self, data: bytes) -> None:
        try:
            with self._lock:
                self._file.write(data)
                self._file.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(sink=self.name, reason=str(exc)) from exc

    def close(self) -> None:
        with self._lock:
            self._file.close()
