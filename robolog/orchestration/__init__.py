"""Orchestration layer for robolog."""
from __future__ import annotations

from .runner import ExecutionOutcome, handle_domain_error, run_decode, run_parse

__all__ = [
    "ExecutionOutcome",
    "handle_domain_error",
    "run_decode",
    "run_parse",
]
