"""Domain-specific exception hierarchy for robolog."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RobologError(Exception):
    """Base exception for robolog errors with optional remediation text."""

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidPathError(RobologError):
    """Raised when a log path does not exist or is not a regular file."""


class LogReadError(RobologError):
    """Raised when a log file cannot be opened or read."""


class LogEncodingError(RobologError):
    """Raised when a log file is not encoded in a supported text encoding."""


class LabelConfigError(RobologError):
    """Raised when a label configuration file is missing or invalid."""


__all__ = [
    "RobologError",
    "InvalidPathError",
    "LogReadError",
    "LogEncodingError",
    "LabelConfigError",
]
