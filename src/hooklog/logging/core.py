"""
Core logging facility: structlog processor chain with hook dispatch.

The wrapped structlog logger discards everything it receives; hooks registered
on a ``Logger`` are the only output path.
"""

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Iterable, NoReturn, TextIO

import structlog
from structlog import stdlib
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from structlog.typing import EventDict, Processor, WrappedLogger

from .hooks import BaseHook
from .records import Level, LogRecord

if TYPE_CHECKING:
    from hooklog.config.logging import LoggingSettings

# =============================================================================
# Global State
# =============================================================================

_logger: Logger | None = None
_state_lock = threading.Lock()


def get_logger(**initial_context: Any) -> HookBoundLogger:
    """Get a bound logger from the configured facility.

    Before ``configure_logging`` runs, the facility has no hooks and records
    are discarded.
    """
    global _logger
    with _state_lock:
        if _logger is None:
            _logger = Logger()
        return _logger.get_logger(**initial_context)


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


# =============================================================================
# Bound Logger
# =============================================================================


class _DiscardLogger:
    """Wrapped logger at the end of the chain. Writes nowhere."""

    def msg(self, *args: Any, **kw: Any) -> None:
        pass

    log = trace = debug = info = warning = warn = error = fatal = msg


class HookBoundLogger(structlog.BoundLoggerBase):
    """Bound logger exposing one method per level.

    Positional arguments are %-interpolated into the message.
    """

    def _emit(self, level: Level, event: str, args: tuple[Any, ...], kw: dict[str, Any]) -> Any:
        if args:
            event = event % args
        return self._proxy_to_logger(level.label, event, **kw)

    def trace(self, event: str, *args: Any, **kw: Any) -> Any:
        return self._emit(Level.TRACE, event, args, kw)

    def debug(self, event: str, *args: Any, **kw: Any) -> Any:
        return self._emit(Level.DEBUG, event, args, kw)

    def info(self, event: str, *args: Any, **kw: Any) -> Any:
        return self._emit(Level.INFO, event, args, kw)

    def warning(self, event: str, *args: Any, **kw: Any) -> Any:
        return self._emit(Level.WARNING, event, args, kw)

    warn = warning

    def error(self, event: str, *args: Any, **kw: Any) -> Any:
        return self._emit(Level.ERROR, event, args, kw)

    def fatal(self, event: str, *args: Any, **kw: Any) -> NoReturn:
        """Dispatch at FATAL, then exit the process with status 1."""
        self._emit(Level.FATAL, event, args, kw)
        sys.exit(1)

    def log(self, level: Level | int | str, event: str, *args: Any, **kw: Any) -> Any:
        """Dispatch at an arbitrary level. Never exits, even at FATAL."""
        return self._emit(Level.from_value(level), event, args, kw)


# =============================================================================
# Facility
# =============================================================================


class Logger:
    """
    Hook registry plus the processor chain feeding it.

    Usage:
        log = Logger(level=Level.DEBUG, report_caller=True)
        log.add_hook(ConsoleHook())
        log.info("started %s", "svc")
    """

    def __init__(
        self,
        *,
        level: Level | int | str = Level.INFO,
        report_caller: bool = False,
        error_stream: TextIO | None = None,
    ) -> None:
        self._hooks: list[BaseHook] = []
        self._hooks_lock = threading.Lock()
        self._level = Level.from_value(level)
        self._report_caller = report_caller
        self._error_stream = error_stream
        self._stdlib_loggers: list[logging.Logger] = []
        self._callsite = CallsiteParameterAdder(
            parameters={CallsiteParameter.FILENAME, CallsiteParameter.LINENO},
            additional_ignores=["hooklog.logging"],
        )
        self._root = self.get_logger()

    # ── Configuration ─────────────────────────────────────────────

    @property
    def level(self) -> Level:
        return self._level

    def set_level(self, level: Level | int | str) -> None:
        """Change the threshold; intercepted stdlib loggers follow it."""
        self._level = Level.from_value(level)
        for std_logger in self._stdlib_loggers:
            std_logger.setLevel(int(self._level))

    def follow_level(self, std_logger: logging.Logger) -> None:
        """Keep a stdlib logger's level in step with this logger."""
        std_logger.setLevel(int(self._level))
        if std_logger not in self._stdlib_loggers:
            self._stdlib_loggers.append(std_logger)

    @property
    def report_caller(self) -> bool:
        return self._report_caller

    def set_report_caller(self, enabled: bool) -> None:
        self._report_caller = enabled

    def add_hook(self, hook: BaseHook) -> None:
        with self._hooks_lock:
            self._hooks.append(hook)

    @property
    def hooks(self) -> tuple[BaseHook, ...]:
        with self._hooks_lock:
            return tuple(self._hooks)

    # ── Processors ────────────────────────────────────────────────

    def _filter_level(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        if Level.from_name(method_name) < self._level:
            raise structlog.DropEvent
        return event_dict

    def _add_callsite(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        if not self._report_caller:
            return event_dict
        return self._callsite(logger, method_name, event_dict)

    def _dispatch_hooks(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        """Fire every hook in registration order. Returns empty to suppress default output."""
        record = LogRecord.from_event_dict(event_dict)
        for hook in self.hooks:
            if record.level not in hook.levels():
                continue
            try:
                hook.fire(record)
            except Exception as exc:
                self._report_hook_error(exc)
        return ""

    def _report_hook_error(self, exc: Exception) -> None:
        stream = self._error_stream if self._error_stream is not None else sys.stderr
        stream.write(f"Failed to fire hook: {exc}\n")
        stream.flush()

    def processors(self) -> Iterable[Processor]:
        return [
            self._filter_level,
            stdlib.add_log_level,
            add_timestamp,
            self._add_callsite,
            self._dispatch_hooks,
        ]

    # ── Loggers ───────────────────────────────────────────────────

    def get_logger(self, **initial_context: Any) -> HookBoundLogger:
        return HookBoundLogger(_DiscardLogger(), processors=self.processors(), context=dict(initial_context))

    def __getattr__(self, name: str) -> Any:
        # Proxy level methods (info, error, ...) to the root bound logger
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._root, name)

    # ── Cleanup ───────────────────────────────────────────────────

    def close(self) -> None:
        """Close every hook's sinks. Call during shutdown."""
        with self._hooks_lock:
            hooks, self._hooks = self._hooks, []
        for hook in hooks:
            hook.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


# =============================================================================
# Configuration Logic
# =============================================================================


def configure_logging(config: LoggingSettings | None = None) -> Logger:
    """
    Build the logger for the configured mode and make it the global facility.

    Args:
        config: Logging settings. Defaults to ``settings.logging``.
    """
    # Imported here to avoid circular imports
    from hooklog.config import settings
    from hooklog.config.logging import LogMode

    from .interceptors import intercept_stdlib
    from .router import DateLogConfig, LevelLogConfig

    global _logger
    config = config or settings.logging

    options: dict[str, Any] = {
        "level": config.level.value,
        "report_caller": config.report_caller,
        "timestamp_format": config.console_timestamp_format,
    }
    if config.mode == LogMode.LEVEL:
        destination = LevelLogConfig(path=config.path, date=config.resolved_date, name=config.name)
    else:
        destination = DateLogConfig(path=config.path, date=config.resolved_date, name=config.name)
        options["tag"] = config.console_tag or config.name
    logger = destination.init(**options)

    with _state_lock:
        previous, _logger = _logger, logger
    if previous is not None:
        previous.close()

    if config.capture_stdlib:
        intercept_stdlib(logger)

    return logger
