"""Label presence predicates."""

from typing import Iterable

from github_triage.triage.types import HasName, LabelType


def extract_label_names(labels: Iterable[LabelType] | None) -> set[str]:
    """Extract label names from a list of GitHub label objects, strings, or dicts."""
    names: set[str] = set()
    if not labels:
        return names
    for label in labels:
        if isinstance(label, str):
            names.add(label)
        elif isinstance(label, dict) and "name" in label:
            names.add(label["name"])
        elif isinstance(label, HasName):
            names.add(label.name)
    return names


def has_label(labels: Iterable[LabelType] | None, name: str) -> bool:
    """Return whether a label called exactly `name` is present (case-sensitive)."""
    return name in extract_label_names(labels)
