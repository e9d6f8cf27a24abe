"""Shared in-memory collaborators for errorlogger tests."""

from typing import Any, Optional

import pytest

from errorlogger.models import ErrorSignal, LastError, Severity
from errorlogger.ports import HookRegistry, LogSink


class RecordingSink(LogSink):
    """Keeps every (level, message, context) it is given."""

    def __init__(self) -> None:
        self.records: list[tuple[Severity, str, dict[str, Any]]] = []

    def log(self, level: Severity, message: str, context: dict[str, Any]) -> None:
        self.records.append((level, message, context))


class InMemoryRegistry(HookRegistry):
    """Hook registry that never touches the interpreter."""

    def __init__(self) -> None:
        self.error_handlers: list = []
        self.exit_hooks: list = []
        self.fatal: Optional[LastError] = None

    def add_error_handler(self, handler) -> None:
        self.error_handlers.append(handler)

    def register_exit_hook(self, hook) -> None:
        self.exit_hooks.append(hook)

    def last_error(self) -> Optional[LastError]:
        return self.fatal

    def deliver(self, signal: ErrorSignal) -> None:
        for handler in self.error_handlers:
            handler(signal)

    def shutdown(self) -> None:
        for hook in self.exit_hooks:
            hook()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def registry():
    return InMemoryRegistry()


@pytest.fixture
def make_sink():
    return RecordingSink
