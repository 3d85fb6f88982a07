"""Filesystem helpers for reading Robocopy logs with Windows-friendly defaults."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path

from robolog.errors import InvalidPathError, LogEncodingError, LogReadError

HEADER_WINDOW = 12
FOOTER_WINDOW = 9

_FALLBACK_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1252")
_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xff\xfe", "utf-16"),
    (b"\xfe\xff", "utf-16"),
)
_ENCODING_LABELS: dict[str, str] = {
    "utf-8-sig": "UTF-8",
    "utf-16": "UTF-16",
    "cp1252": "Windows-1252",
}


@dataclass(frozen=True)
class LogWindows:
    """The first and last lines of a log file, plus read metadata."""

    path: Path
    head: tuple[str, ...]
    tail: tuple[str, ...]
    encoding: str
    line_count: int

    @property
    def display_encoding(self) -> str:
        """Return a human-friendly label for the log encoding."""

        return _ENCODING_LABELS.get(self.encoding, self.encoding)


def format_display_path(path: Path) -> str:
    """Format a path for human-readable output without leaking directories."""

    name = path.name
    if " " in name:
        return f'"{name}"'
    return name


def read_log_windows(
    path: Path,
    *,
    head: int = HEADER_WINDOW,
    tail: int = FOOTER_WINDOW,
) -> LogWindows:
    """Read the first *head* and last *tail* lines of *path* in a single pass.

    Only the two windows are retained; body lines are streamed past. Encodings
    are tried in order: the one named by a byte order mark, otherwise UTF-8
    followed by Windows-1252.
    """

    if head < 0 or tail < 0:
        raise ValueError("window sizes must be non-negative")

    candidate = Path(path).expanduser()
    display = format_display_path(candidate)

    try:
        is_file = candidate.is_file()
    except OSError as exc:
        raise LogReadError(
            message=f"Unable to access the log file {display}.",
            remediation="Verify file permissions on the log and its parent folders.",
        ) from exc

    if not is_file:
        raise InvalidPathError(
            message=f"Log path {candidate} does not exist or is not a file.",
            remediation="Verify the log path and ensure the file is readable.",
        )

    try:
        with candidate.open("rb") as handle:
            prefix = handle.read(4)
    except OSError as exc:
        raise LogReadError(
            message=f"Unable to read the log file {display}.",
            remediation=(
                "Verify file permissions and that the file is not locked by another process."
            ),
        ) from exc

    bom_encoding = _sniff_bom(prefix)
    encodings = (bom_encoding,) if bom_encoding else _FALLBACK_ENCODINGS

    last_error: UnicodeDecodeError | None = None
    for encoding in encodings:
        try:
            return _collect_windows(candidate, encoding, head=head, tail=tail)
        except UnicodeDecodeError as exc:
            last_error = exc
            continue

    supported = ", ".join(_ENCODING_LABELS[enc] for enc in encodings)
    raise LogEncodingError(
        message=f"The log file {display} is not encoded as {supported}.",
        remediation="Re-run Robocopy with /LOG or /UNILOG, or re-save the log as UTF-8.",
    ) from last_error


def _sniff_bom(prefix: bytes) -> str | None:
    for bom, encoding in _BOMS:
        if prefix.startswith(bom):
            return encoding
    return None


def _collect_windows(path: Path, encoding: str, *, head: int, tail: int) -> LogWindows:
    head_lines: list[str] = []
    tail_lines: deque[str] = deque(maxlen=tail)
    count = 0

    try:
        # Split on "\n" only so that "\r\r\n" written by some Windows tools stays one line.
        with path.open("r", encoding=encoding, newline="\n") as handle:
            for raw_line in handle:
                line = raw_line.rstrip("\r\n")
                if count < head:
                    head_lines.append(line)
                if tail:
                    tail_lines.append(line)
                count += 1
    except OSError as exc:
        raise LogReadError(
            message=f"Reading the log file {format_display_path(path)} failed.",
            remediation=(
                "Verify file permissions and that the file is not locked by another process."
            ),
        ) from exc

    return LogWindows(
        path=path,
        head=tuple(head_lines),
        tail=tuple(tail_lines),
        encoding=encoding,
        line_count=count,
    )


__all__ = [
    "FOOTER_WINDOW",
    "HEADER_WINDOW",
    "LogWindows",
    "format_display_path",
    "read_log_windows",
]
