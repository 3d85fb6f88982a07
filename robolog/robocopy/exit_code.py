"""Robocopy exit code labels."""
from __future__ import annotations

from enum import IntFlag


class RobocopyFlag(IntFlag):
    """Bits Robocopy combines into its process exit code."""

    COPY = 1
    EXTRA = 2
    MISMATCH = 4
    FAIL = 8
    FATAL = 16


UNKNOWN_LABEL = "UNKNOWN"

_EXIT_CODE_LABELS: dict[int, str] = {
    0: "NO CHANGE",
    1: "COPY",
    2: "EXTRA",
    3: "EXTRA + COPY",
    4: "MISMATCH",
    5: "MISMATCH + COPY",
    6: "MISMATCH + EXTRA",
    7: "MISMATCH + EXTRA + COPY",
    8: "FAIL",
    9: "FAIL + COPY",
    10: "FAIL + EXTRA",
    11: "FAIL + EXTRA + COPY",
    12: "FAIL + MISMATCH",
    13: "FAIL + MISMATCH + COPY",
    14: "FAIL + MISMATCH + EXTRA",
    15: "FAIL + MISMATCH + EXTRA + COPY",
    16: "FATAL ERROR",
}


def decode_exit_code(exit_code: int) -> str:
    """Return the label for a Robocopy exit code, or ``"UNKNOWN"``."""

    return _EXIT_CODE_LABELS.get(exit_code, UNKNOWN_LABEL)


def exit_code_flags(exit_code: int) -> RobocopyFlag | None:
    """Return the flags set in *exit_code*, or None when the code is not a known value."""

    if exit_code not in _EXIT_CODE_LABELS:
        return None
    return RobocopyFlag(exit_code)


def is_failure(exit_code: int) -> bool:
    """Return True when the exit code reports failed copies, a fatal error or is unknown."""

    flags = exit_code_flags(exit_code)
    if flags is None:
        return True
    return bool(flags & (RobocopyFlag.FAIL | RobocopyFlag.FATAL))


__all__ = [
    "RobocopyFlag",
    "UNKNOWN_LABEL",
    "decode_exit_code",
    "exit_code_flags",
    "is_failure",
]
