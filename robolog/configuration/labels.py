"""Label set loading for Robocopy header and footer lines."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from robolog.errors import LabelConfigError

DEFAULT_LABELS_PATH = Path(__file__).resolve().with_name("default_labels.yaml")

LABEL_FIELDS: tuple[str, ...] = ("source", "destination", "directories", "files", "times")


@dataclass(frozen=True)
class LabelSetDetails:
    """Summary details describing loaded label files."""

    sources: tuple[Path, ...]
    label_count: int


@dataclass(frozen=True)
class LabelSet:
    """Label strings the log parser looks for, in match order."""

    source: tuple[str, ...]
    destination: tuple[str, ...]
    directories: tuple[str, ...]
    files: tuple[str, ...]
    times: tuple[str, ...]
    sources: tuple[Path, ...] = ()

    def details(self) -> LabelSetDetails:
        """Summarise label coverage for diagnostics and logging."""

        total = sum(len(getattr(self, name)) for name in LABEL_FIELDS)
        return LabelSetDetails(sources=self.sources, label_count=total)


def load_label_set(extra_paths: Sequence[Path] | None = None) -> LabelSet:
    """Load the bundled labels and merge *extra_paths* after them."""

    candidate_paths: list[Path] = [DEFAULT_LABELS_PATH]
    if extra_paths:
        candidate_paths.extend(extra_paths)

    merged: dict[str, list[str]] = {name: [] for name in LABEL_FIELDS}
    resolved_sources: list[Path] = []

    for path in candidate_paths:
        resolved = _resolve_path(path)
        payload = _load_yaml(resolved)
        _apply_labels(payload.get("labels"), merged, resolved)
        resolved_sources.append(resolved)

    missing = [name for name, values in merged.items() if not values]
    if missing:
        raise LabelConfigError(
            message=f"No labels configured for: {', '.join(missing)}.",
            remediation="Restore the bundled default_labels.yaml or define the missing keys.",
        )

    return LabelSet(
        **{name: tuple(values) for name, values in merged.items()},
        sources=tuple(resolved_sources),
    )


def _resolve_path(path: Path) -> Path:
    candidate = Path(path).expanduser()
    try:
        resolved = candidate.resolve()
    except OSError:
        resolved = candidate

    if not resolved.exists() or not resolved.is_file():
        raise LabelConfigError(
            message=f"Label file {resolved} does not exist or is not a file.",
            remediation="Verify the path or remove the --labels option.",
        )
    return resolved


def _load_yaml(path: Path) -> dict:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LabelConfigError(
            message=f"Unable to read label file {path}.",
            remediation="Check file permissions and retry.",
        ) from exc

    try:
        loaded = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise LabelConfigError(
            message=f"Label file {path} contains invalid YAML.",
            remediation="Ensure the file follows the documented schema.",
        ) from exc

    if not isinstance(loaded, dict):
        raise LabelConfigError(
            message=f"Label file {path} must define a mapping at the root level.",
            remediation="Provide a 'labels' mapping keyed by field name.",
        )
    return loaded


def _apply_labels(data: object, merged: dict[str, list[str]], source: Path) -> None:
    if data is None:
        return
    if not isinstance(data, Mapping):
        raise LabelConfigError(
            message=f"Label file {source} must map field names to labels.",
            remediation=f"Under 'labels', use keys from: {', '.join(LABEL_FIELDS)}.",
        )

    for key, raw in data.items():
        if key not in merged:
            raise LabelConfigError(
                message=f"Unknown label field '{key}' in {source}.",
                remediation=f"Use keys from: {', '.join(LABEL_FIELDS)}.",
            )
        bucket = merged[key]
        for label in _normalize_labels(raw, key, source):
            if label not in bucket:
                bucket.append(label)


def _normalize_labels(value: object, key: str, source: Path) -> tuple[str, ...]:
    if isinstance(value, str):
        values: Sequence[object] = (value,)
    elif isinstance(value, Sequence) and not isinstance(value, bytes):
        values = value
    else:
        raise LabelConfigError(
            message=f"Labels for '{key}' in {source} must be a string or a list of strings.",
            remediation="Use a YAML string or list, e.g. files: [Files, Dateien].",
        )

    labels: list[str] = []
    for item in values:
        if not isinstance(item, str) or not item.strip():
            raise LabelConfigError(
                message=f"Labels for '{key}' in {source} must be non-empty strings.",
                remediation="Remove blank or non-text label entries.",
            )
        labels.append(item.strip())
    return tuple(labels)


__all__ = [
    "DEFAULT_LABELS_PATH",
    "LABEL_FIELDS",
    "LabelSet",
    "LabelSetDetails",
    "load_label_set",
]
