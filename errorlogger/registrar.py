"""One-line setup for logging every error in the process, fatal ones included.

Create an ErrorLogger and keep going; it needs nothing else. Construction
adds an interceptor to the registry's live-error chain and an exit hook for
the fatal error, and does nothing more.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence

from .config import ErrorLoggerConfig
from .errors import ValidationError
from .handlers import ErrorEventInterceptor, ShutdownFinalizer
from .ports import ErrorHandler, HookRegistry, LogSink
from .runtime import default_registry
from .severity import SeverityClassifier

logger = logging.getLogger(__name__)


class ErrorLogger:
    """Routes every error signal in the process to *sink*.

    Args:
        sink: where records go; see LogSink.
        service_name: label on every record, e.g. hostname and environment.
        extra_context: name/value pairs added to every record. They override
            the built-in fields of the same name.
        other_error_handlers: callables run after each live error with the
            original (code, message, file, line).
        registry: hook registry to install into. Defaults to the
            process-wide one.
    """

    def __init__(
        self,
        sink: LogSink,
        service_name: str,
        extra_context: Optional[Mapping[str, Any]] = None,
        other_error_handlers: Iterable[ErrorHandler] = (),
        registry: Optional[HookRegistry] = None,
        classifier: Optional[SeverityClassifier] = None,
    ) -> None:
        if not isinstance(service_name, str) or not service_name.strip():
            raise ValidationError("service_name must be a non-empty string")
        if extra_context is not None and not isinstance(extra_context, Mapping):
            raise ValidationError(
                "extra_context must be a mapping",
                got=type(extra_context).__name__,
            )
        handlers = tuple(other_error_handlers)
        for handler in handlers:
            if not callable(handler):
                raise ValidationError("error handlers must be callable", handler=repr(handler))

        self.service_name = service_name
        self.registry = registry if registry is not None else default_registry()
        classifier = classifier or SeverityClassifier()

        self.interceptor = ErrorEventInterceptor(
            sink,
            service_name,
            extra_context=extra_context,
            handlers=handlers,
            classifier=classifier,
        )
        self.finalizer = ShutdownFinalizer(
            sink,
            service_name,
            self.registry,
            extra_context=extra_context,
            classifier=classifier,
        )

        self.registry.add_error_handler(self.interceptor)
        self.registry.register_exit_hook(self.finalizer)
        logger.debug("Error logging enabled for %s", service_name)

    @classmethod
    def from_config(
        cls,
        sink: LogSink,
        config: ErrorLoggerConfig,
        other_error_handlers: Sequence[ErrorHandler] = (),
        registry: Optional[HookRegistry] = None,
    ) -> ErrorLogger:
        """Build an ErrorLogger from validated configuration."""
        config.validate()
        return cls(
            sink,
            config.service_label,
            extra_context=config.extra_context,
            other_error_handlers=other_error_handlers,
            registry=registry,
        )
