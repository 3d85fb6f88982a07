"""Process exit codes for robolog CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic exit codes returned by the ``robolog`` command."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    INVALID_INPUT = 2
    READ_ERROR = 3
    ROBOCOPY_FAILURE = 4


__all__ = ["ExitCode"]
