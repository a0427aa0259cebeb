"""
Log records and level definitions.

Levels share numeric values with the standard library so stdlib records can be
mapped onto them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Mapping

_ALIASES = {
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
    "EXCEPTION": "ERROR",
}


class Level(IntEnum):
    """Ordered severity levels."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50

    @property
    def label(self) -> str:
        """Display name, e.g. ``"warning"``."""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> Level:
        """Resolve level from string name, case-insensitive."""
        name_upper = name.strip().upper()
        name_upper = _ALIASES.get(name_upper, name_upper)
        try:
            return cls[name_upper]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{name}'. Valid levels: {', '.join(m.label for m in cls)}"
            ) from None

    @classmethod
    def from_value(cls, value: int | str | Level) -> Level:
        """Resolve level from a name, a member or any stdlib-style number."""
        if isinstance(value, Level):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int):
            for member in sorted(cls, reverse=True):
                if value >= member:
                    return member
            return cls.TRACE
        raise TypeError(f"Expected int or str, got {type(value).__name__}")


ALL_LEVELS: tuple[Level, ...] = tuple(Level)


def _parse_timestamp(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        return raw if raw.tzinfo else raw.replace(tzinfo=timezone.utc)
    if raw:
        try:
            dt = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
            return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
        except ValueError:
            pass
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable log record handed to hooks.

    ``filename`` and ``lineno`` are empty/zero when call-site capture is off.
    """

    timestamp: datetime
    level: Level
    message: str
    filename: str = ""
    lineno: int = 0

    @property
    def level_name(self) -> str:
        return self.level.label

    @classmethod
    def from_event_dict(cls, event_dict: Mapping[str, Any]) -> LogRecord:
        """Build a record from a processed structlog event dict."""
        return cls(
            timestamp=_parse_timestamp(event_dict.get("timestamp")),
            level=Level.from_name(str(event_dict.get("level", "info"))),
            message=str(event_dict.get("event", "")),
            filename=str(event_dict.get("filename") or ""),
            lineno=int(event_dict.get("lineno") or 0),
        )
