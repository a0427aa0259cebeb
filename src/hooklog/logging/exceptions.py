"""
Exception hierarchy for hook dispatch and sink setup.

Setup-time errors (``SinkOpenError``) end the process through the fatal path;
runtime errors (``FormatterError``, ``SinkWriteError``) are raised by a hook and
reported by the facility without affecting the other hooks.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class HookLogError(Exception):
    """Base class for every hooklog error."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class FormatterError(HookLogError):
    """A formatter could not render a record."""

    def __init__(self, *, formatter: str, reason: str) -> None:
        super().__init__(
            f"Formatter {formatter} failed: {reason}",
            code="formatter_failed",
            details={"formatter": formatter, "reason": reason},
        )


class SinkWriteError(HookLogError):
    """Writing a rendered record to a sink failed."""

    def __init__(self, *, sink: str, reason: str) -> None:
        super().__init__(
            f"Failed to write to {sink}: {reason}",
            code="sink_write_failed",
            details={"sink": sink, "reason": reason},
        )


class SinkOpenError(HookLogError):
    """A log directory or file could not be prepared."""

    def __init__(self, *, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to open log destination {path}: {reason}",
            code="sink_open_failed",
            details={"path": path, "reason": reason},
        )
