"""Configuration utilities for robolog."""
from __future__ import annotations

from .labels import DEFAULT_LABELS_PATH, LabelSet, LabelSetDetails, load_label_set

__all__ = [
    "DEFAULT_LABELS_PATH",
    "LabelSet",
    "LabelSetDetails",
    "load_label_set",
]
