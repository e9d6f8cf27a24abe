"""Interfaces for the collaborators errorlogger depends on.

The logging sink and the runtime's hook slots are external. Adapters
(stdlib logging, the interpreter's warning/exception hooks) implement
these; the interceptor and finalizer depend only on the abstractions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .models import ErrorSignal, LastError, RawCode, Severity

# Chained handler: receives the raw (code, message, file, line) of a signal.
ErrorHandler = Callable[[RawCode, str, str, int], None]

# Live-path interceptor installed in a HookRegistry.
SignalHandler = Callable[[ErrorSignal], None]

ExitHook = Callable[[], None]


class LogSink(ABC):
    """Destination for leveled, structured log records."""

    @abstractmethod
    def log(self, level: Severity, message: str, context: dict[str, Any]) -> None:
        """Record one message at *level* with its structured context."""


class HookRegistry(ABC):
    """Process-boundary hooks: error delivery, exit, and last-error state."""

    @abstractmethod
    def add_error_handler(self, handler: SignalHandler) -> None:
        """Append *handler* to the ordered chain called for each live signal."""

    @abstractmethod
    def register_exit_hook(self, hook: ExitHook) -> None:
        """Arrange for *hook* to run once when the process exits."""

    @abstractmethod
    def last_error(self) -> Optional[LastError]:
        """Return the fatal error that ended the process, if any."""
