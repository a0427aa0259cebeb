"""
Hook unit tests.

LevelHook fan-out: the catch-all sink gets every record, the severity sink only
its own level, and TRACE/FATAL reach the catch-all only.
"""

from __future__ import annotations

import pytest

from hooklog.logging.exceptions import FormatterError, SinkWriteError
from hooklog.logging.formatters import BaseFormatter, ConsoleFormatter, FileFormatter
from hooklog.logging.hooks import ConsoleHook, FileHook, LevelHook
from hooklog.logging.records import ALL_LEVELS, Level, LogRecord
from hooklog.logging.sinks import BaseSink

ROUTED = [Level.ERROR, Level.WARNING, Level.INFO, Level.DEBUG]


class BrokenFormatter(BaseFormatter):
    def format(self, record: LogRecord) -> bytes:
        raise RuntimeError("bad template")


class UnreliableSink(BaseSink):
    """Custom sink raising something other than SinkWriteError."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def write(self, data: bytes) -> None:
        raise ConnectionResetError("socket reset")

    def close(self) -> None:
        pass


@pytest.fixture
def level_hook(make_sink):
    all_sink = make_sink("all")
    level_sinks = {level: make_sink(level.label) for level in ROUTED}
    return LevelHook(all_sink, level_sinks), all_sink, level_sinks


class TestSingleSinkHooks:
    """ConsoleHook and FileHook"""

    def test_hooks_declare_all_levels(self, memory_sink) -> None:
        assert ConsoleHook(sink=memory_sink).levels() == ALL_LEVELS
        assert FileHook(memory_sink).levels() == ALL_LEVELS

    def test_console_hook_uses_console_formatter(self, memory_sink, make_record) -> None:
        record = make_record(level=Level.ERROR)
        ConsoleHook(sink=memory_sink).fire(record)
        assert memory_sink.writes == [ConsoleFormatter().format(record)]

    def test_file_hook_uses_file_formatter(self, memory_sink, make_record) -> None:
        record = make_record()
        FileHook(memory_sink).fire(record)
        assert memory_sink.writes == [FileFormatter().format(record)]

    def test_formatter_failure_raises_formatter_error(self, memory_sink, make_record) -> None:
        with pytest.raises(FormatterError, match="bad template"):
            FileHook(memory_sink, BrokenFormatter()).fire(make_record())
        assert memory_sink.writes == []

    def test_write_failure_propagates(self, make_sink, make_record) -> None:
        with pytest.raises(SinkWriteError):
            FileHook(make_sink(failing=True)).fire(make_record())


class TestLevelHookRouting:
    """Severity fan-out"""

    @pytest.mark.parametrize("level", ROUTED)
    def test_routed_level_reaches_catch_all_and_own_sink(self, level_hook, make_record, level: Level) -> None:
        hook, all_sink, level_sinks = level_hook
        hook.fire(make_record(level=level, message="m"))

        assert len(all_sink.writes) == 1
        for other, sink in level_sinks.items():
            assert sink.writes == (all_sink.writes if other is level else [])

    @pytest.mark.parametrize("level", [Level.TRACE, Level.FATAL])
    def test_unrouted_level_reaches_catch_all_only(self, level_hook, make_record, level: Level) -> None:
        hook, all_sink, level_sinks = level_hook
        hook.fire(make_record(level=level))

        assert len(all_sink.writes) == 1
        assert all(sink.writes == [] for sink in level_sinks.values())

    def test_close_closes_every_sink(self, level_hook) -> None:
        hook, all_sink, level_sinks = level_hook
        hook.close()
        assert all_sink.closed
        assert all(sink.closed for sink in level_sinks.values())


class TestLevelHookErrors:
    """Both writes are attempted; the last failure is raised"""

    def test_primary_failure_still_writes_level_sink(self, make_sink, make_record) -> None:
        info_sink = make_sink("info")
        hook = LevelHook(make_sink("all", failing=True), {Level.INFO: info_sink})

        with pytest.raises(SinkWriteError) as exc_info:
            hook.fire(make_record(level=Level.INFO))

        assert exc_info.value.details["sink"] == "all"
        assert len(info_sink.writes) == 1

    def test_level_sink_failure_after_successful_primary(self, make_sink, make_record) -> None:
        all_sink = make_sink("all")
        hook = LevelHook(all_sink, {Level.ERROR: make_sink("err", failing=True)})

        with pytest.raises(SinkWriteError) as exc_info:
            hook.fire(make_record(level=Level.ERROR))

        assert exc_info.value.details["sink"] == "err"
        assert len(all_sink.writes) == 1

    def test_both_failing_reports_last(self, make_sink, make_record) -> None:
        hook = LevelHook(make_sink("all", failing=True), {Level.WARNING: make_sink("warn", failing=True)})

        with pytest.raises(SinkWriteError) as exc_info:
            hook.fire(make_record(level=Level.WARNING))

        assert exc_info.value.details["sink"] == "warn"

    def test_unexpected_sink_exception_is_wrapped_and_level_sink_still_written(
        self, make_sink, make_record
    ) -> None:
        info_sink = make_sink("info")
        hook = LevelHook(UnreliableSink("all"), {Level.INFO: info_sink})

        with pytest.raises(SinkWriteError) as exc_info:
            hook.fire(make_record(level=Level.INFO))

        assert exc_info.value.details == {"sink": "all", "reason": "socket reset"}
        assert isinstance(exc_info.value.__cause__, ConnectionResetError)
        assert len(info_sink.writes) == 1
