"""Dataclasses describing a parsed Robocopy log summary."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Tuple

COUNTER_FIELDS: Tuple[str, ...] = ("total", "copied", "skipped", "mismatch", "failed", "extras")
TIME_FIELDS: Tuple[str, ...] = ("total", "copied", "failed", "extras")


class HeaderMatch(str, Enum):
    """Which header line wins when several match the same label."""

    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class CounterStats:
    """Counters from a ``Dirs :`` or ``Files :`` footer line."""

    total: int | None = None
    copied: int | None = None
    skipped: int | None = None
    mismatch: int | None = None
    failed: int | None = None
    extras: int | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when the section was missing or malformed."""

        return all(getattr(self, item.name) is None for item in fields(self))


@dataclass(frozen=True)
class TimeStats:
    """Durations from the ``Times :`` footer line, kept as formatted strings."""

    total: str | None = None
    copied: str | None = None
    failed: str | None = None
    extras: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when the section was missing or malformed."""

        return all(getattr(self, item.name) is None for item in fields(self))


@dataclass(frozen=True)
class RobocopySummary:
    """Header and footer data extracted from one Robocopy log."""

    source: str = ""
    destination: str = ""
    directories: CounterStats = field(default_factory=CounterStats)
    files: CounterStats = field(default_factory=CounterStats)
    times: TimeStats = field(default_factory=TimeStats)
    issues: Tuple[str, ...] = ()

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        object.__setattr__(self, "issues", tuple(self.issues))

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as plain nested mappings."""

        payload = asdict(self)
        payload["issues"] = list(self.issues)
        return payload


__all__ = [
    "COUNTER_FIELDS",
    "TIME_FIELDS",
    "CounterStats",
    "HeaderMatch",
    "RobocopySummary",
    "TimeStats",
]
