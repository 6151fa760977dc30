"""Sanitising labels and label values to GCP's label restrictions."""

from __future__ import annotations

import re
from typing import Mapping

_INVALID_CHARACTERS = re.compile(r"[^a-z0-9_-]")
_LEADING_DISALLOWED = "0123456789_"
MAX_GCP_LABEL_CHARACTERS = 63


def _lower(text: str) -> str:
    # Lower-case one character at a time so every character maps to exactly one.
    return "".join(ch.lower()[:1] or ch for ch in text)


def _sanitize(text: str, start_with_character: bool) -> str:
    value = _INVALID_CHARACTERS.sub("_", _lower(text))
    if start_with_character:
        value = value.lstrip(_LEADING_DISALLOWED)
    return value[:MAX_GCP_LABEL_CHARACTERS]


def sanitize_gcp_label(label: str) -> str:
    """Sanitise a label key; it must start with a lowercase letter."""
    return _sanitize(label, True)


def sanitize_gcp_label_value(value: str) -> str:
    """Sanitise a label value."""
    return _sanitize(value, False)


def gce_instance_labels(name: str, labels: Mapping[str, str] | None) -> dict[str, str]:
    """Build the GCE instance labels for a worker pool."""
    result = {"name": sanitize_gcp_label_value(name)}
    for key, value in (labels or {}).items():
        label = sanitize_gcp_label(key)
        if label:
            result[label] = sanitize_gcp_label_value(value)
    return result