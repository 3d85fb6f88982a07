from __future__ import annotations

import logging
from pathlib import Path

import pytest

from robolog.errors import LogReadError, RobologError
from robolog.exit_codes import ExitCode
from robolog.orchestration import handle_domain_error, run_decode, run_parse


def test_run_parse_success(sample_log: Path) -> None:
    outcome = run_parse(sample_log)

    assert outcome.exit_code == ExitCode.SUCCESS
    assert outcome.status == "success"
    assert outcome.summary is not None
    assert outcome.summary.files.total == 203


def test_run_parse_logs_issues_as_warnings(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "partial.log"
    path.write_text("Source : C:\\a\\\nDest : D:\\b\\\nFiles : 1 1 0 0 0 0\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="robolog"):
        outcome = run_parse(path)

    assert outcome.exit_code == ExitCode.SUCCESS
    assert outcome.status == "partial"
    messages = [record.getMessage() for record in caplog.records]
    assert "Footer line for directories not found." in messages
    assert "Footer line for times not found." in messages


def test_run_parse_maps_missing_path(tmp_path: Path) -> None:
    outcome = run_parse(tmp_path / "missing.log")

    assert outcome.exit_code == ExitCode.INVALID_INPUT
    assert outcome.status == "failure"
    assert outcome.summary is None
    assert "does not exist" in (outcome.message or "")


def test_run_parse_maps_label_errors(sample_log: Path, tmp_path: Path) -> None:
    bad_labels = tmp_path / "bad.yaml"
    bad_labels.write_text("labels:\n  bytes: Bytes\n", encoding="utf-8")

    outcome = run_parse(sample_log, label_paths=[bad_labels])

    assert outcome.exit_code == ExitCode.INVALID_INPUT


def test_run_parse_logs_encoding_and_line_count(
    write_log, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_log(name="unilog.log", encoding="utf-16", newline="\r\n")

    with caplog.at_level(logging.INFO, logger="robolog"):
        outcome = run_parse(path)

    assert outcome.exit_code == ExitCode.SUCCESS
    record = next(
        record for record in caplog.records if record.getMessage() == "Parsed log summary"
    )
    assert record.encoding == "UTF-16"
    assert record.line_count == 28


def test_run_parse_maps_read_errors(
    monkeypatch: pytest.MonkeyPatch, sample_log: Path
) -> None:
    def _raise(*args: object, **kwargs: object) -> None:
        raise LogReadError("Log is locked", remediation="Wait for Robocopy to finish")

    monkeypatch.setattr("robolog.orchestration.runner.read_log_windows", _raise)

    outcome = run_parse(sample_log)

    assert outcome.exit_code == ExitCode.READ_ERROR
    assert outcome.message == "Log is locked"
    assert outcome.remediation == "Wait for Robocopy to finish"


def test_handle_domain_error_falls_back_to_unexpected() -> None:
    outcome = handle_domain_error(RobologError(""))

    assert outcome.exit_code == ExitCode.UNEXPECTED_ERROR
    assert outcome.message
    assert outcome.remediation


@pytest.mark.parametrize(
    ("code", "fail_on_error", "expected_exit"),
    [
        (1, False, ExitCode.SUCCESS),
        (8, False, ExitCode.SUCCESS),
        (7, True, ExitCode.SUCCESS),
        (8, True, ExitCode.ROBOCOPY_FAILURE),
        (16, True, ExitCode.ROBOCOPY_FAILURE),
        (99, True, ExitCode.ROBOCOPY_FAILURE),
    ],
)
def test_run_decode(code: int, fail_on_error: bool, expected_exit: ExitCode) -> None:
    outcome = run_decode(code, fail_on_error=fail_on_error)

    assert outcome.exit_code == expected_exit
    assert outcome.message
