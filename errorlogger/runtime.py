"""Hook registry bound to the running interpreter.

Live signals arrive through ``warnings.showwarning`` and, for threads other
than the main one, ``threading.excepthook``. Fatal errors arrive through
``sys.excepthook`` and are only recorded here; the exit hooks registered via
``atexit`` report them after the interpreter has printed the traceback.

Installation keeps whatever hooks were in place before and forwards to them
after dispatching, so default runtime behaviour (printing the warning, the
traceback) is unchanged. A second registry installed later wraps the first
one instead of replacing it.
"""

from __future__ import annotations

import atexit
import logging
import sys
import threading
import warnings
from types import TracebackType
from typing import Any, Callable, Optional

from .context import format_exception_backtrace
from .models import ErrorSignal, LastError, code_for_exception, code_for_warning
from .ports import ExitHook, HookRegistry, SignalHandler

logger = logging.getLogger(__name__)


def _describe(exc_type: type[BaseException], exc_value: Optional[BaseException]) -> str:
    """One-line "Type: message" summary of an exception."""
    try:
        text = str(exc_value) if exc_value is not None else ""
    except Exception:
        text = f"<unprintable {exc_type.__name__} object>"
    return f"{exc_type.__name__}: {text}" if text else exc_type.__name__


def _location(
    exc_value: Optional[BaseException], exc_tb: Optional[TracebackType]
) -> tuple[str, int]:
    """File and line where the exception was raised."""
    if isinstance(exc_value, SyntaxError) and exc_value.filename:
        return exc_value.filename, exc_value.lineno or 0
    if exc_tb is None:
        return "", 0
    while exc_tb.tb_next is not None:
        exc_tb = exc_tb.tb_next
    return exc_tb.tb_frame.f_code.co_filename, exc_tb.tb_lineno


class ProcessHookRegistry(HookRegistry):
    """HookRegistry backed by the interpreter's warning, exception and exit hooks."""

    def __init__(
        self,
        capture_threads: bool = True,
        exit_register: Callable[[ExitHook], Any] = atexit.register,
    ) -> None:
        self.capture_threads = capture_threads
        self._exit_register = exit_register
        self._handlers: list[SignalHandler] = []
        self._last_error: Optional[LastError] = None
        self._installed = False
        self._local = threading.local()
        self._previous_showwarning: Optional[Callable[..., None]] = None
        self._previous_excepthook: Optional[Callable[..., Any]] = None
        self._previous_threading_excepthook: Optional[Callable[..., Any]] = None

    @property
    def installed(self) -> bool:
        return self._installed

    @property
    def handlers(self) -> tuple[SignalHandler, ...]:
        return tuple(self._handlers)

    # -- HookRegistry --------------------------------------------------------

    def add_error_handler(self, handler: SignalHandler) -> None:
        self._handlers.append(handler)
        self.install()

    def register_exit_hook(self, hook: ExitHook) -> None:
        self._exit_register(hook)

    def last_error(self) -> Optional[LastError]:
        return self._last_error

    # -- installation --------------------------------------------------------

    def install(self) -> None:
        """Put this registry's dispatchers in the interpreter's hook slots.

        Idempotent. The hooks found in the slots are kept and called after
        every dispatch.
        """
        if self._installed:
            return
        self._previous_showwarning = warnings.showwarning
        warnings.showwarning = self._on_warning
        self._previous_excepthook = sys.excepthook
        sys.excepthook = self._on_uncaught_exception
        if self.capture_threads:
            self._previous_threading_excepthook = threading.excepthook
            threading.excepthook = self._on_thread_exception
        self._installed = True
        logger.debug(
            "Installed error hooks (threads=%s, wrapping showwarning=%r)",
            self.capture_threads,
            self._previous_showwarning,
        )

    # -- dispatch ------------------------------------------------------------

    def dispatch(self, signal: ErrorSignal) -> bool:
        """Run every handler for *signal*, in registration order.

        Returns False without calling anything when a handler on this thread
        is already running, e.g. when the sink itself emits a warning.
        """
        if getattr(self._local, "dispatching", False):
            return False
        self._local.dispatching = True
        try:
            for handler in list(self._handlers):
                try:
                    handler(signal)
                except Exception:
                    logger.warning("Error handler %r failed", handler, exc_info=True)
        finally:
            self._local.dispatching = False
        return True

    def record_fatal(
        self,
        exc_type: type[BaseException],
        exc_value: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> LastError:
        """Remember an uncaught exception as the process's last error."""
        file, line = _location(exc_value, exc_tb)
        self._last_error = LastError(
            code=code_for_exception(exc_type),
            message=_describe(exc_type, exc_value),
            file=file,
            line=line,
            backtrace=format_exception_backtrace(exc_type, exc_value, exc_tb),
        )
        return self._last_error

    def _on_warning(
        self,
        message: Any,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: Any = None,
        line: Optional[str] = None,
    ) -> None:
        signal = ErrorSignal(
            code=code_for_warning(category),
            message=str(message),
            file=filename,
            line=lineno,
        )
        self.dispatch(signal)
        if self._previous_showwarning is not None:
            self._previous_showwarning(message, category, filename, lineno, file, line)

    def _on_uncaught_exception(
        self,
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_tb: Optional[TracebackType],
    ) -> None:
        try:
            if not issubclass(exc_type, KeyboardInterrupt):
                self.record_fatal(exc_type, exc_value, exc_tb)
        finally:
            if self._previous_excepthook is not None:
                self._previous_excepthook(exc_type, exc_value, exc_tb)

    def _on_thread_exception(self, args: Any) -> None:
        # args is a threading.ExceptHookArgs; SystemExit ends only the thread
        try:
            if not issubclass(args.exc_type, SystemExit):
                file, line = _location(args.exc_value, args.exc_traceback)
                self.dispatch(
                    ErrorSignal(
                        code=code_for_exception(args.exc_type),
                        message=_describe(args.exc_type, args.exc_value),
                        file=file,
                        line=line,
                    )
                )
        finally:
            if self._previous_threading_excepthook is not None:
                self._previous_threading_excepthook(args)


_default_registry: Optional[ProcessHookRegistry] = None


def default_registry() -> ProcessHookRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ProcessHookRegistry()
    return _default_registry
