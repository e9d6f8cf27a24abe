"""Structured log context for intercepted errors."""

from __future__ import annotations

import logging
import traceback
from types import TracebackType
from typing import Any, Mapping, Optional

from .models import ErrorSignal, Severity

logger = logging.getLogger(__name__)

BASE_KEYS = ("error_string", "service", "error_level", "file", "line", "backtrace")


def capture_backtrace(skip: int = 1) -> str:
    """Format the current call stack, minus the innermost *skip* frames.

    Must be called at the moment of interception; the stack is gone once
    the signal has been delivered. Returns "" if the stack can't be read.
    """
    try:
        frames = traceback.extract_stack()
        if skip > 0:
            frames = frames[:-skip]
        return "".join(traceback.format_list(frames))
    except Exception:
        logger.debug("Backtrace capture failed", exc_info=True)
        return ""


def format_exception_backtrace(
    exc_type: type[BaseException],
    exc_value: Optional[BaseException],
    exc_tb: Optional[TracebackType],
) -> str:
    """Format an exception with its traceback, or "" if that fails."""
    try:
        return "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    except Exception:
        logger.debug("Exception formatting failed", exc_info=True)
        return ""


def build_context(
    signal: ErrorSignal,
    service: str,
    extra_context: Optional[Mapping[str, Any]],
    severity: Severity,
    backtrace: Optional[str],
) -> dict[str, Any]:
    """Base fields for *signal*, with *extra_context* merged over them.

    Keys in *extra_context* win over the base fields of the same name.
    """
    context: dict[str, Any] = {
        "error_string": signal.message,
        "service": service,
        "error_level": severity,
        "file": signal.file,
        "line": signal.line,
        "backtrace": backtrace if backtrace is not None else "",
    }
    if extra_context:
        context.update(extra_context)
    return context
