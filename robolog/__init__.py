"""Robocopy log summaries and exit-code labels."""
from __future__ import annotations

from .errors import RobologError
from .robocopy import decode_exit_code, parse_log_summary

__all__ = ("__version__", "RobologError", "decode_exit_code", "parse_log_summary")

__version__ = "0.1.0"
