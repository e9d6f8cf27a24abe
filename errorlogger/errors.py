"""Shared exceptions for errorlogger."""

from __future__ import annotations

from typing import Any


class ErrorLoggerError(Exception):
    """Base exception for errorlogger."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context = context


class ValidationError(ErrorLoggerError):
    """Raised when constructor inputs fail validation."""


class ConfigError(ErrorLoggerError):
    """Raised when configuration is invalid or missing."""
