"""Type hints for the triage module."""

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class HasName(Protocol):
    """Protocol for objects that have a name attribute."""

    name: str


LabelType = str | dict[str, Any] | HasName

ConfirmationGate = Callable[[str], bool]
