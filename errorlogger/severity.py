"""Severity classification of runtime error codes.

Every code maps to exactly one tier. Anything not explicitly listed as a
notice or a warning is an ERROR, so unknown codes are never downgraded.
"""

from __future__ import annotations

from typing import Optional

from .models import ErrorCode, RawCode, Severity

NOTICE_CODES = frozenset(
    {
        ErrorCode.NOTICE,
        ErrorCode.USER_NOTICE,
        ErrorCode.STRICT,
        ErrorCode.DEPRECATED,
        ErrorCode.USER_DEPRECATED,
    }
)

WARNING_CODES = frozenset(
    {
        ErrorCode.WARNING,
        ErrorCode.CORE_WARNING,
        ErrorCode.COMPILE_WARNING,
        ErrorCode.USER_WARNING,
    }
)


def _coerce(code: object) -> Optional[ErrorCode]:
    """Resolve an ErrorCode from a member, its value ("E_NOTICE") or its name."""
    if isinstance(code, ErrorCode):
        return code
    if not isinstance(code, str):
        return None
    try:
        return ErrorCode(code)
    except ValueError:
        pass
    return ErrorCode.__members__.get(code)


class SeverityClassifier:
    """Maps error codes to severity tiers."""

    def __init__(
        self,
        notice_codes: frozenset[ErrorCode] = NOTICE_CODES,
        warning_codes: frozenset[ErrorCode] = WARNING_CODES,
    ) -> None:
        self.notice_codes = frozenset(notice_codes)
        self.warning_codes = frozenset(warning_codes)

    def classify(self, code: RawCode) -> Severity:
        resolved = _coerce(code)
        if resolved in self.notice_codes:
            return Severity.NOTICE
        if resolved in self.warning_codes:
            return Severity.WARNING
        return Severity.ERROR


_default_classifier = SeverityClassifier()


def classify(code: RawCode) -> Severity:
    """Classify *code* with the default notice/warning tables."""
    return _default_classifier.classify(code)
