"""Tests for mapping Python warnings and exceptions onto error codes."""

import pytest

from errorlogger import ErrorCode, ErrorSignal, LastError, code_for_exception, code_for_warning


@pytest.mark.parametrize(
    "category, expected",
    [
        (DeprecationWarning, ErrorCode.DEPRECATED),
        (PendingDeprecationWarning, ErrorCode.DEPRECATED),
        (FutureWarning, ErrorCode.USER_DEPRECATED),
        (SyntaxWarning, ErrorCode.COMPILE_WARNING),
        (ImportWarning, ErrorCode.CORE_WARNING),
        (ResourceWarning, ErrorCode.NOTICE),
        (UserWarning, ErrorCode.USER_WARNING),
        (RuntimeWarning, ErrorCode.WARNING),
        (BytesWarning, ErrorCode.WARNING),
        (Warning, ErrorCode.WARNING),
    ],
)
def test_code_for_warning(category, expected):
    assert code_for_warning(category) == expected


def test_warning_subclass_uses_nearest_base():
    class ApiDeprecation(DeprecationWarning):
        pass

    class AppWarning(UserWarning):
        pass

    assert code_for_warning(ApiDeprecation) == ErrorCode.DEPRECATED
    assert code_for_warning(AppWarning) == ErrorCode.USER_WARNING


@pytest.mark.parametrize(
    "exc_type, expected",
    [
        (SyntaxError, ErrorCode.PARSE),
        (IndentationError, ErrorCode.PARSE),
        (MemoryError, ErrorCode.CORE_ERROR),
        (RecursionError, ErrorCode.CORE_ERROR),
        (ModuleNotFoundError, ErrorCode.COMPILE_ERROR),
        (ValueError, ErrorCode.ERROR),
        (RuntimeError, ErrorCode.ERROR),
        (KeyboardInterrupt, ErrorCode.ERROR),
    ],
)
def test_code_for_exception(exc_type, expected):
    assert code_for_exception(exc_type) == expected


def test_signals_are_immutable():
    signal = ErrorSignal(ErrorCode.WARNING, "msg", "a.py", 1)
    with pytest.raises(AttributeError):
        signal.message = "changed"


def test_last_error_defaults_to_empty_backtrace():
    error = LastError(ErrorCode.ERROR, "boom", "a.py", 3)
    assert error.backtrace == ""
