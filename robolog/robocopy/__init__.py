"""Robocopy exit code decoding and log summary parsing."""
from __future__ import annotations

from .exit_code import (
    UNKNOWN_LABEL,
    RobocopyFlag,
    decode_exit_code,
    exit_code_flags,
    is_failure,
)
from .models import CounterStats, HeaderMatch, RobocopySummary, TimeStats
from .parser import parse_log_summary, summarize_windows

__all__ = [
    "UNKNOWN_LABEL",
    "CounterStats",
    "HeaderMatch",
    "RobocopyFlag",
    "RobocopySummary",
    "TimeStats",
    "decode_exit_code",
    "exit_code_flags",
    "is_failure",
    "parse_log_summary",
    "summarize_windows",
]
