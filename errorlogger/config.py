"""Configuration for ErrorLogger with validation and defaults.

Values come from environment variables (``from_env``) or a YAML file
(``from_yaml``). Nothing else in the package reads os.environ.
"""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

from .errors import ConfigError

_YAML_KEYS = frozenset({"service_name", "environment", "extra_context"})


@dataclass(frozen=True)
class ErrorLoggerConfig:
    """Validated configuration for an ErrorLogger."""

    service_name: str = ""
    environment: str = ""
    extra_context: dict[str, Any] = field(default_factory=dict)

    @property
    def service_label(self) -> str:
        """Service name as it appears in records, e.g. "web-01 (production)"."""
        if self.environment:
            return f"{self.service_name} ({self.environment})"
        return self.service_name

    @classmethod
    def from_env(cls) -> ErrorLoggerConfig:
        """Load config from environment variables.

        ERRORLOGGER_SERVICE defaults to the hostname.
        """
        return cls(
            service_name=os.environ.get("ERRORLOGGER_SERVICE") or socket.gethostname(),
            environment=os.environ.get("ERRORLOGGER_ENVIRONMENT", ""),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> ErrorLoggerConfig:
        """Load config from a YAML mapping of service_name/environment/extra_context."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", path=str(path)) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", path=str(path)) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping", path=str(path))
        unknown = set(data) - _YAML_KEYS
        if unknown:
            raise ConfigError(
                f"Unknown config keys in {path}: {', '.join(sorted(unknown))}",
                path=str(path),
            )

        extra = data.get("extra_context") or {}
        if not isinstance(extra, dict):
            raise ConfigError("extra_context must be a mapping", path=str(path))

        return cls(
            service_name=str(data.get("service_name") or socket.gethostname()),
            environment=str(data.get("environment") or ""),
            extra_context={str(k): v for k, v in extra.items()},
        )

    def validate(self) -> None:
        """Raise ConfigError if required values are missing or malformed."""
        if not self.service_name or not self.service_name.strip():
            raise ConfigError("service_name is required (set ERRORLOGGER_SERVICE)")
        if not isinstance(self.extra_context, dict):
            raise ConfigError("extra_context must be a mapping")
