"""LogSink adapter onto the standard logging module."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .models import Severity
from .ports import LogSink

# logging has no NOTICE level; notices go out at INFO.
LEVELS = {
    Severity.NOTICE: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class LoggingSink(LogSink):
    """Writes records to a ``logging.Logger``.

    The structured context travels on the record as ``record.context``.
    """

    def __init__(self, target: Optional[Union[logging.Logger, str]] = None) -> None:
        if target is None or isinstance(target, str):
            target = logging.getLogger(target or "errorlogger.events")
        self.logger = target

    def log(self, level: Severity, message: str, context: dict[str, Any]) -> None:
        self.logger.log(
            LEVELS.get(level, logging.ERROR),
            "%s",
            message,
            extra={"context": context},
        )
