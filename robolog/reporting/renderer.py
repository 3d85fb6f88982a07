"""Rendering utilities for Robocopy log summaries."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Sequence

from robolog.robocopy.models import COUNTER_FIELDS, CounterStats, RobocopySummary, TimeStats

_SECTION_WIDTH = 11
_VALUE_WIDTH = 9
_TITLE = "Robocopy Log Summary"
_MISSING = "--"
_UNSET = "(not found)"


@dataclass(frozen=True)
class SummaryRenderOptions:
    """Render-time switches influencing CLI layout."""

    json: bool = False
    display_name: str | None = None


def render_summary(summary: RobocopySummary, options: SummaryRenderOptions | None = None) -> str:
    """Render *summary* as a text table or JSON depending on *options*."""

    resolved = options or SummaryRenderOptions()
    if resolved.json:
        return render_summary_json(summary)
    return render_summary_text(summary, display_name=resolved.display_name)


def render_summary_json(summary: RobocopySummary) -> str:
    """Return the summary as indented JSON."""

    return json.dumps(summary.to_dict(), indent=2, ensure_ascii=False)


def render_summary_text(summary: RobocopySummary, *, display_name: str | None = None) -> str:
    """Render the header values and the footer statistics table."""

    lines: list[str] = []
    title = f"{_TITLE} - {display_name}" if display_name else _TITLE
    lines.append(title)
    lines.append(f"Source      : {summary.source or _UNSET}")
    lines.append(f"Destination : {summary.destination or _UNSET}")
    lines.append("")

    columns = _table_columns()
    lines.append(_format_header(columns))
    lines.append(_format_separator(columns))
    lines.append(_format_row("Directories", _counter_cells(summary.directories), columns))
    lines.append(_format_row("Files", _counter_cells(summary.files), columns))
    lines.append(_format_row("Times", _time_cells(summary.times), columns))

    return "\n".join(lines)


def _table_columns() -> Sequence[tuple[str, int, str]]:
    columns: list[tuple[str, int, str]] = [("Section", _SECTION_WIDTH, "left")]
    columns.extend((name, _VALUE_WIDTH, "right") for name in COUNTER_FIELDS)
    return columns


def _counter_cells(stats: CounterStats) -> dict[str, str]:
    return {name: _display(getattr(stats, name)) for name in COUNTER_FIELDS}


def _time_cells(stats: TimeStats) -> dict[str, str]:
    return {
        "total": _display(stats.total),
        "copied": _display(stats.copied),
        "failed": _display(stats.failed),
        "extras": _display(stats.extras),
    }


def _display(value: object) -> str:
    return _MISSING if value is None else str(value)


def _format_header(columns: Sequence[tuple[str, int, str]]) -> str:
    return " | ".join(
        _pad_text(title.upper(), width, align=align) for title, width, align in columns
    )


def _format_separator(columns: Sequence[tuple[str, int, str]]) -> str:
    return "-+-".join("-" * width for _, width, _ in columns)


def _format_row(
    label: str,
    cells: dict[str, str],
    columns: Sequence[tuple[str, int, str]],
) -> str:
    items = [_pad_text(label, columns[0][1], align=columns[0][2])]
    for title, width, alignment in columns[1:]:
        items.append(_pad_text(cells.get(title, _MISSING), width, align=alignment))
    return " | ".join(items)


def _pad_text(value: str, width: int, *, align: str = "left") -> str:
    text = _truncate(value, width)
    if align == "right":
        return text.rjust(width)
    return text.ljust(width)


def _truncate(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    if width <= 3:
        return value[:width]
    return value[: width - 3] + "..."


__all__ = [
    "SummaryRenderOptions",
    "render_summary",
    "render_summary_json",
    "render_summary_text",
]
