"""Runtime error signals and severity tiers."""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ErrorCode(str, Enum):
    """Kinds of runtime error signal."""

    ERROR = "E_ERROR"
    WARNING = "E_WARNING"
    PARSE = "E_PARSE"
    NOTICE = "E_NOTICE"
    CORE_ERROR = "E_CORE_ERROR"
    CORE_WARNING = "E_CORE_WARNING"
    COMPILE_ERROR = "E_COMPILE_ERROR"
    COMPILE_WARNING = "E_COMPILE_WARNING"
    USER_ERROR = "E_USER_ERROR"
    USER_WARNING = "E_USER_WARNING"
    USER_NOTICE = "E_USER_NOTICE"
    STRICT = "E_STRICT"
    RECOVERABLE_ERROR = "E_RECOVERABLE_ERROR"
    DEPRECATED = "E_DEPRECATED"
    USER_DEPRECATED = "E_USER_DEPRECATED"


class Severity(str, Enum):
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"


# Codes from foreign sources may not be ErrorCode members.
RawCode = Union[ErrorCode, str, int]


@dataclass(frozen=True)
class ErrorSignal:
    """One runtime error occurrence, as delivered by the runtime."""

    code: RawCode
    message: str
    file: str
    line: int


@dataclass(frozen=True)
class LastError(ErrorSignal):
    """The error that terminated the process, recorded when it was raised."""

    backtrace: str = ""


# ---------------------------------------------------------------------------
# Python categories -> error codes
# ---------------------------------------------------------------------------

# EncodingWarning only exists on 3.10+
_ENCODING_WARNING = getattr(builtins, "EncodingWarning", None)

_WARNING_CODES: dict[type, ErrorCode] = {
    DeprecationWarning: ErrorCode.DEPRECATED,
    PendingDeprecationWarning: ErrorCode.DEPRECATED,
    FutureWarning: ErrorCode.USER_DEPRECATED,
    SyntaxWarning: ErrorCode.COMPILE_WARNING,
    ImportWarning: ErrorCode.CORE_WARNING,
    ResourceWarning: ErrorCode.NOTICE,
    UserWarning: ErrorCode.USER_WARNING,
}
if _ENCODING_WARNING is not None:
    _WARNING_CODES[_ENCODING_WARNING] = ErrorCode.STRICT

_EXCEPTION_CODES: dict[type, ErrorCode] = {
    SyntaxError: ErrorCode.PARSE,
    MemoryError: ErrorCode.CORE_ERROR,
    SystemError: ErrorCode.CORE_ERROR,
    RecursionError: ErrorCode.CORE_ERROR,
    ImportError: ErrorCode.COMPILE_ERROR,
}


def _lookup(klass: type, table: dict[type, ErrorCode], default: ErrorCode) -> ErrorCode:
    """Return the code of the most specific class in *klass*'s MRO."""
    for base in getattr(klass, "__mro__", ()):
        if base in table:
            return table[base]
    return default


def code_for_warning(category: type[Warning]) -> ErrorCode:
    """Map a warning category (or subclass) to its error code."""
    return _lookup(category, _WARNING_CODES, ErrorCode.WARNING)


def code_for_exception(exc_type: type[BaseException]) -> ErrorCode:
    """Map an exception type (or subclass) to its error code."""
    return _lookup(exc_type, _EXCEPTION_CODES, ErrorCode.ERROR)
