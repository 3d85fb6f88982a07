"""Utility helpers for robolog."""

from __future__ import annotations

from .io import (
    FOOTER_WINDOW,
    HEADER_WINDOW,
    LogWindows,
    format_display_path,
    read_log_windows,
)

__all__ = [
    "FOOTER_WINDOW",
    "HEADER_WINDOW",
    "LogWindows",
    "format_display_path",
    "read_log_windows",
]
