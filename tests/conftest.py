from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

HEADER_LINES: tuple[str, ...] = (
    "",
    "-------------------------------------------------------------------------------",
    "   ROBOCOPY     ::     Robust File Copy for Windows",
    "-------------------------------------------------------------------------------",
    "",
    "  Started : Monday, 7 October 2024 09:15:02",
    "   Source : \\\\server\\share1\\",
    "     Dest : \\\\server\\share2\\",
    "",
    "    Files : *.*",
    "",
    "  Options : *.* /S /E /DCOPY:DA /COPY:DAT /R:1000000 /W:30",
    "",
    "------------------------------------------------------------------------------",
)

BODY_LINES: tuple[str, ...] = (
    "",
    "\t                   2\t\\\\server\\share1\\",
    "\t    *EXTRA File \t\t  1024\tstale.txt",
    "\t                 201\t\\\\server\\share1\\reports\\",
    "",
)

FOOTER_LINES: tuple[str, ...] = (
    "------------------------------------------------------------------------------",
    "",
    "               Total    Copied   Skipped  Mismatch    FAILED    Extras",
    "    Dirs :         2         0         2         0         0         0",
    "   Files :       203         0       203         0         0         0",
    "   Bytes :   1.204 m         0   1.204 m         0         0         0",
    "   Times :   0:00:00   0:00:00                       0:00:00   0:00:00",
    "   Ended : Monday, 7 October 2024 09:15:03",
    "",
)

LogWriter = Callable[..., Path]


def build_log(
    header: Sequence[str] = HEADER_LINES,
    body: Sequence[str] = BODY_LINES,
    footer: Sequence[str] = FOOTER_LINES,
) -> str:
    """Join log sections the way Robocopy writes them (newline terminated)."""

    return "\n".join([*header, *body, *footer]) + "\n"


@pytest.fixture
def write_log(tmp_path: Path) -> LogWriter:
    """Return a helper writing a Robocopy log into *tmp_path*."""

    def _write(
        text: str | None = None,
        *,
        name: str = "robocopy.log",
        encoding: str = "utf-8",
        newline: str = "\n",
    ) -> Path:
        content = build_log() if text is None else text
        if newline != "\n":
            content = content.replace("\n", newline)
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write


@pytest.fixture
def sample_log(write_log: LogWriter) -> Path:
    """A complete log written by a /LOG run that skipped everything."""

    return write_log()


@pytest.fixture
def compose_log() -> Callable[..., str]:
    """Return the section joiner so tests can swap in their own header/body/footer."""

    return build_log
