"""The two reporting paths: live error signals and process shutdown.

ErrorEventInterceptor runs synchronously for every non-fatal signal the
runtime delivers. ShutdownFinalizer runs once at exit and reports the fatal
error that ended the process, if there was one.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from .context import build_context, capture_backtrace
from .models import ErrorSignal, Severity
from .ports import ErrorHandler, HookRegistry, LogSink
from .severity import SeverityClassifier

logger = logging.getLogger(__name__)


class _Reporter:
    """Shared dependencies of both paths."""

    def __init__(
        self,
        sink: LogSink,
        service: str,
        extra_context: Optional[Mapping[str, Any]] = None,
        classifier: Optional[SeverityClassifier] = None,
    ) -> None:
        self.sink = sink
        self.service = service
        self.extra_context = dict(extra_context or {})
        self.classifier = classifier or SeverityClassifier()

    def _emit(self, level: Severity, message: str, context: dict[str, Any]) -> None:
        try:
            self.sink.log(level, message, context)
        except Exception:
            logger.warning("Log sink failed for %s", self.service, exc_info=True)


class ErrorEventInterceptor(_Reporter):
    """Logs one record per live error signal, then runs the handler chain."""

    def __init__(
        self,
        sink: LogSink,
        service: str,
        extra_context: Optional[Mapping[str, Any]] = None,
        handlers: Sequence[ErrorHandler] = (),
        classifier: Optional[SeverityClassifier] = None,
    ) -> None:
        super().__init__(sink, service, extra_context, classifier)
        self.handlers = tuple(handlers)

    def __call__(self, signal: ErrorSignal) -> None:
        backtrace = capture_backtrace()
        severity = self.classifier.classify(signal.code)
        message = f"There was an issue with: {self.service}. {signal.message}"
        context = build_context(
            signal, self.service, self.extra_context, severity, backtrace
        )
        self._emit(severity, message, context)

        for handler in self.handlers:
            try:
                handler(signal.code, signal.message, signal.file, signal.line)
            except Exception:
                logger.warning("Chained error handler %r failed", handler, exc_info=True)


class ShutdownFinalizer(_Reporter):
    """Reports the last fatal error at exit. Never runs the handler chain."""

    def __init__(
        self,
        sink: LogSink,
        service: str,
        registry: HookRegistry,
        extra_context: Optional[Mapping[str, Any]] = None,
        classifier: Optional[SeverityClassifier] = None,
    ) -> None:
        super().__init__(sink, service, extra_context, classifier)
        self.registry = registry
        self._reported = False

    def __call__(self) -> None:
        if self._reported:
            return
        error = self.registry.last_error()
        if error is None:
            return
        self._reported = True

        severity = self.classifier.classify(error.code)
        message = f"There was a fatal error with the {self.service}. {error.message}"
        context = build_context(
            error, self.service, self.extra_context, severity, error.backtrace
        )
        self._emit(severity, message, context)
