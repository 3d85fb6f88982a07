"""Extract the header and footer summary from a Robocopy log.

Robocopy writes a fixed-size header (job options, ``Source :`` and ``Dest :``)
and a fixed-size footer (the ``Dirs :``, ``Files :``, ``Bytes :`` and
``Times :`` statistics table) no matter how many files it processed, so only
the first and last few lines of a log are inspected.

Parsing is best effort. A missing or malformed line leaves the matching field
at its default and adds a note to ``RobocopySummary.issues``; only path and
read failures raise.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence

from robolog.configuration import LabelSet, load_label_set
from robolog.robocopy.models import (
    COUNTER_FIELDS,
    TIME_FIELDS,
    CounterStats,
    HeaderMatch,
    RobocopySummary,
    TimeStats,
)
from robolog.utils.io import FOOTER_WINDOW, HEADER_WINDOW, read_log_windows

# "Source : x" in /LOG output, "Source - x" in the error-log layout. Labels
# only count at the start of a line so folder names like "Dest-Archive" are values.
_HEADER_DELIMITERS: tuple[str, ...] = (":", "-")


def parse_log_summary(
    path: Path | str,
    *,
    labels: LabelSet | None = None,
    header_match: HeaderMatch | str = HeaderMatch.FIRST,
) -> RobocopySummary:
    """Parse the Robocopy log at *path* into a ``RobocopySummary``.

    Raises ``InvalidPathError`` when *path* is not an existing file and
    ``LogReadError`` or ``LogEncodingError`` when it cannot be read.
    """

    label_set = labels or load_label_set()
    windows = read_log_windows(Path(path), head=HEADER_WINDOW, tail=FOOTER_WINDOW)
    return summarize_windows(
        windows.head,
        windows.tail,
        labels=label_set,
        header_match=header_match,
    )


def summarize_windows(
    head: Sequence[str],
    tail: Sequence[str],
    *,
    labels: LabelSet,
    header_match: HeaderMatch | str = HeaderMatch.FIRST,
) -> RobocopySummary:
    """Build a summary from already-read header and footer lines."""

    policy = HeaderMatch(header_match)
    issues: list[str] = []

    source = _extract_header_value(head, labels.source, policy)
    if source is None:
        issues.append("Header line for source not found.")
    destination = _extract_header_value(head, labels.destination, policy)
    if destination is None:
        issues.append("Header line for destination not found.")

    directories = _extract_counters(tail, labels.directories, "directories", issues)
    files = _extract_counters(tail, labels.files, "files", issues)
    times = _extract_times(tail, labels.times, issues)

    return RobocopySummary(
        source=source or "",
        destination=destination or "",
        directories=directories,
        files=files,
        times=times,
        issues=tuple(issues),
    )


def _header_patterns(labels: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    return tuple(
        re.compile(rf"^\s*{re.escape(label)}\s*{re.escape(delimiter)}(?P<value>.*)")
        for label in labels
        for delimiter in _HEADER_DELIMITERS
    )


def _footer_pattern(labels: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(label) for label in labels)
    return re.compile(rf"^\s*(?:{alternatives})\s*:(?P<value>.*)")


def _extract_header_value(
    lines: Sequence[str],
    labels: Sequence[str],
    policy: HeaderMatch,
) -> str | None:
    patterns = _header_patterns(labels)
    found: str | None = None

    for line in lines:
        value = _match_first(patterns, line)
        if not value:
            continue
        if policy is HeaderMatch.FIRST:
            return value
        found = value
    return found


def _match_first(patterns: Sequence[re.Pattern[str]], line: str) -> str | None:
    for pattern in patterns:
        match = pattern.match(line)
        if match:
            return match.group("value").strip()
    return None


def _last_footer_value(lines: Sequence[str], labels: Sequence[str]) -> str | None:
    # The header also carries a "Files : *.*" line; on short logs the footer
    # window overlaps it, so the last matching line is the real statistics row.
    pattern = _footer_pattern(labels)
    found: str | None = None
    for line in lines:
        match = pattern.match(line)
        if match:
            found = match.group("value").strip()
    return found


def _tokenize(value: str, names: Sequence[str]) -> dict[str, str] | None:
    """Split *value* on whitespace into exactly ``len(names)`` named tokens."""

    tokens = value.split()
    if len(tokens) != len(names):
        return None
    return dict(zip(names, tokens))


def _extract_counters(
    lines: Sequence[str],
    labels: Sequence[str],
    section: str,
    issues: list[str],
) -> CounterStats:
    value = _last_footer_value(lines, labels)
    if value is None:
        issues.append(f"Footer line for {section} not found.")
        return CounterStats()

    tokens = _tokenize(value, COUNTER_FIELDS)
    if tokens is None:
        issues.append(
            f"Footer line for {section} has {len(value.split())} values; "
            f"expected {len(COUNTER_FIELDS)}."
        )
        return CounterStats()

    if not all(token.isascii() and token.isdigit() for token in tokens.values()):
        issues.append(f"Footer line for {section} contains non-numeric counters.")
        return CounterStats()

    return CounterStats(**{name: int(token) for name, token in tokens.items()})


def _extract_times(lines: Sequence[str], labels: Sequence[str], issues: list[str]) -> TimeStats:
    value = _last_footer_value(lines, labels)
    if value is None:
        issues.append("Footer line for times not found.")
        return TimeStats()

    tokens = _tokenize(value, TIME_FIELDS)
    if tokens is None:
        issues.append(
            f"Footer line for times has {len(value.split())} values; "
            f"expected {len(TIME_FIELDS)}."
        )
        return TimeStats()

    return TimeStats(**tokens)


__all__ = ["parse_log_summary", "summarize_windows"]
