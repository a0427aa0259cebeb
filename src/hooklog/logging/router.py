"""
Router: assembles hooks for a destination mode.

- Date mode:  console + ``<path>/<date>/<name>.log``
- Level mode: ``<path>/<date>/<name>-{all,err,warn,info,debug}.log``

A destination that cannot be prepared ends the process. Running with silently
lost logs is not an option.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

from pydantic import BaseModel, ConfigDict, Field

from .core import Logger
from .exceptions import SinkOpenError
from .formatters import DEFAULT_TIMESTAMP_FORMAT, ConsoleFormatter, FileFormatter
from .hooks import ConsoleHook, FileHook, LevelHook
from .records import Level
from .sinks import BaseSink, FileSink

ALL_SUFFIX = "all"
LEVEL_SUFFIXES = {
    Level.ERROR: "err",
    Level.WARNING: "warn",
    Level.INFO: "info",
    Level.DEBUG: "debug",
}


class LogDestination(BaseModel):
    """Where log files live: ``<path>/<date>/<name>*.log``."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Root log directory")
    date: str = Field(description="Sub-directory, usually the start date")
    name: str = Field(min_length=1, description="File name stem")

    @property
    def directory(self) -> Path:
        return Path(self.path) / self.date

    def file_path(self, suffix: str | None = None) -> Path:
        stem = f"{self.name}-{suffix}" if suffix else self.name
        return self.directory / f"{stem}.log"

    def _new_logger(self, level: Level | int | str, report_caller: bool) -> Logger:
        return Logger(level=level, report_caller=report_caller)

    def _prepare_directory(self, log: Logger) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            _abort(log, SinkOpenError(path=str(self.directory), reason=exc.strerror or str(exc)), [])

    def _open_sinks(self, log: Logger, paths: list[Path]) -> list[FileSink]:
        opened: list[FileSink] = []
        for path in paths:
            try:
                opened.append(FileSink(path))
            except SinkOpenError as exc:
                _abort(log, exc, opened)
        return opened


class DateLogConfig(LogDestination):
    """One combined file per (path, date, name), plus colored console output."""

    def init(
        self,
        *,
        level: Level | int | str = Level.INFO,
        report_caller: bool = True,
        tag: str | None = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> Logger:
        log = self._new_logger(level, report_caller)
        log.add_hook(ConsoleHook(ConsoleFormatter(tag=tag or self.name, timestamp_format=timestamp_format)))

        self._prepare_directory(log)
        [file_sink] = self._open_sinks(log, [self.file_path()])
        log.add_hook(FileHook(file_sink, FileFormatter(timestamp_format=timestamp_format)))
        return log


class LevelLogConfig(LogDestination):
    """A catch-all file plus one file per severity. No console output."""

    def init(
        self,
        *,
        level: Level | int | str = Level.INFO,
        report_caller: bool = True,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> Logger:
        log = self._new_logger(level, report_caller)
        self._prepare_directory(log)

        levels = list(LEVEL_SUFFIXES)
        paths = [self.file_path(ALL_SUFFIX)] + [self.file_path(LEVEL_SUFFIXES[lvl]) for lvl in levels]
        all_sink, *level_sinks = self._open_sinks(log, paths)

        log.add_hook(
            LevelHook(
                all_sink,
                dict(zip(levels, level_sinks)),
                FileFormatter(timestamp_format=timestamp_format),
            )
        )
        return log


def _abort(log: Logger, exc: SinkOpenError, opened: list[BaseSink]) -> NoReturn:
    """Release what was opened, log the cause on the fatal path and exit."""
    for sink in opened:
        sink.close()
    if not log.hooks:
        sys.stderr.write(f"{exc}\n")
    log.fatal(str(exc))
