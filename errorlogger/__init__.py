"""Process-wide error logging.

Intercepts warnings and uncaught exceptions, classifies them, and sends a
structured record for each to a LogSink. ``ErrorLogger`` wires it all up.
"""

from .config import ErrorLoggerConfig
from .context import build_context, capture_backtrace
from .errors import ConfigError, ErrorLoggerError, ValidationError
from .handlers import ErrorEventInterceptor, ShutdownFinalizer
from .models import (
    ErrorCode,
    ErrorSignal,
    LastError,
    Severity,
    code_for_exception,
    code_for_warning,
)
from .ports import ErrorHandler, HookRegistry, LogSink
from .registrar import ErrorLogger
from .runtime import ProcessHookRegistry, default_registry
from .severity import SeverityClassifier, classify
from .sinks import LoggingSink

__all__ = [
    "ConfigError",
    "ErrorCode",
    "ErrorEventInterceptor",
    "ErrorHandler",
    "ErrorLogger",
    "ErrorLoggerConfig",
    "ErrorLoggerError",
    "ErrorSignal",
    "HookRegistry",
    "LastError",
    "LogSink",
    "LoggingSink",
    "ProcessHookRegistry",
    "Severity",
    "SeverityClassifier",
    "ShutdownFinalizer",
    "ValidationError",
    "build_context",
    "capture_backtrace",
    "classify",
    "code_for_exception",
    "code_for_warning",
    "default_registry",
]
