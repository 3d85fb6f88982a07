"""Execution orchestrator for robolog CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from robolog.configuration import load_label_set
from robolog.errors import (
    InvalidPathError,
    LabelConfigError,
    LogEncodingError,
    LogReadError,
    RobologError,
)
from robolog.exit_codes import ExitCode
from robolog.robocopy import (
    HeaderMatch,
    RobocopySummary,
    decode_exit_code,
    is_failure,
    summarize_windows,
)
from robolog.utils import read_log_windows

logger = logging.getLogger("robolog.orchestration.runner")


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of invoking a robolog operation."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    summary: RobocopySummary | None = None


_ERROR_MAPPINGS: tuple[
    tuple[type[RobologError], ExitCode, str, str | None],
    ...,
] = (
    (
        InvalidPathError,
        ExitCode.INVALID_INPUT,
        "Log path is invalid.",
        "Double-check the log path and that it points to a file.",
    ),
    (
        LabelConfigError,
        ExitCode.INVALID_INPUT,
        "Label configuration is invalid.",
        "Fix or remove the files passed with --labels.",
    ),
    (
        LogEncodingError,
        ExitCode.READ_ERROR,
        "Log file encoding is not supported.",
        "Re-run Robocopy with /LOG or /UNILOG.",
    ),
    (
        LogReadError,
        ExitCode.READ_ERROR,
        "Log file could not be read.",
        "Retry once Robocopy has released the log file.",
    ),
)


def run_parse(
    log_path: Path,
    *,
    label_paths: Sequence[Path] | None = None,
    header_match: HeaderMatch | str = HeaderMatch.FIRST,
) -> ExecutionOutcome:
    """Parse a Robocopy log and log any sections the parser had to skip."""

    try:
        labels = load_label_set(label_paths)
        logger.info(
            "Loaded label set",
            extra={
                "label_sources": [str(path) for path in labels.sources],
                "label_count": labels.details().label_count,
            },
        )
        windows = read_log_windows(log_path)
        summary = summarize_windows(
            windows.head,
            windows.tail,
            labels=labels,
            header_match=header_match,
        )
    except RobologError as error:
        return handle_domain_error(error)
    except Exception as error:  # pragma: no cover - defensive
        logger.exception("Unexpected error occurred while parsing the log.")
        return ExecutionOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred while parsing the log.",
            remediation="Re-run without --quiet and inspect the logs before retrying.",
        )

    for issue in summary.issues:
        logger.warning(issue, extra={"log_path": str(log_path)})

    logger.info(
        "Parsed log summary",
        extra={
            "log_path": str(log_path),
            "header_match": HeaderMatch(header_match).value,
            "encoding": windows.display_encoding,
            "line_count": windows.line_count,
            "issue_count": len(summary.issues),
        },
    )

    status = "partial" if summary.issues else "success"
    return ExecutionOutcome(exit_code=ExitCode.SUCCESS, status=status, summary=summary)


def run_decode(exit_code: int, *, fail_on_error: bool = False) -> ExecutionOutcome:
    """Decode a Robocopy exit code, optionally mapping failures to a non-zero exit."""

    label = decode_exit_code(exit_code)
    failed = is_failure(exit_code)
    logger.info(
        "Decoded Robocopy exit code",
        extra={"robocopy_exit_code": exit_code, "label": label, "failure": failed},
    )

    if failed and fail_on_error:
        return ExecutionOutcome(
            exit_code=ExitCode.ROBOCOPY_FAILURE,
            status="failure",
            message=label,
            remediation="Inspect the Robocopy log for failed or skipped entries.",
        )
    return ExecutionOutcome(exit_code=ExitCode.SUCCESS, status="success", message=label)


def handle_domain_error(error: RobologError) -> ExecutionOutcome:
    """Translate a domain error into an execution outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ExecutionOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _map_error(error: RobologError) -> tuple[ExitCode, str, str | None]:
    """Match an error instance to its configured exit code and remediation."""

    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "An unexpected error occurred.",
        "Retry without --quiet. If the issue persists, open a bug ticket with the logs.",
    )


__all__ = ["ExecutionOutcome", "handle_domain_error", "run_decode", "run_parse"]
