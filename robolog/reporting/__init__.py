"""Reporting helpers for robolog CLI output."""
from __future__ import annotations

from .renderer import (
    SummaryRenderOptions,
    render_summary,
    render_summary_json,
    render_summary_text,
)

__all__ = [
    "SummaryRenderOptions",
    "render_summary",
    "render_summary_json",
    "render_summary_text",
]
