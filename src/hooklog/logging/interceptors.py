"""
Interceptors for capturing standard library and third-party logs.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .core import Logger
from .records import Level


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging records into a hooklog Logger.
    Third-party libraries logging through ``logging`` then reach the same hooks.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Skip structlog's own stdlib records to avoid loops
            if "structlog" in record.name:
                return

            msg = self.format(record)

            # The stdlib record carries the call-site; the callsite processor reads it from _record
            self._logger.log(Level.from_value(record.levelno), msg, _record=record)
        except Exception:
            self.handleError(record)


def intercept_stdlib(
    logger: Logger,
    *,
    names: Iterable[str] = ("",),
) -> list[logging.Logger]:
    """Route the given stdlib loggers (root by default) into ``logger``.

    Existing handlers are removed and levels follow ``logger.set_level``. Named
    loggers stop propagating so records are not delivered twice through the root.
    """
    intercepted = []
    for name in names:
        lg = logging.getLogger(name)
        lg.handlers = [RedirectStdLibHandler(logger)]
        logger.follow_level(lg)
        if name:
            lg.propagate = False
        intercepted.append(lg)
    return intercepted
