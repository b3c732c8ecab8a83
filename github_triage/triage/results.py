"""Contains per-item results of the triage workflows."""

from enum import Enum


class LabelAction(str, Enum):
    """Label mutation a workflow asked the user to confirm."""

    ADD = "add"
    REMOVE = "remove"


class ItemOutcome(str, Enum):
    """What happened to a single candidate item."""

    APPLIED = "applied"
    DECLINED = "declined"
    FAILED = "failed"


class LabelChangeResult:
    """Contains the result of a confirm-then-mutate step for one issue or pull request."""

    def __init__(self, number: int, label: str, action: LabelAction, outcome: ItemOutcome, error: BaseException | None = None) -> None:
        """Initialize the result with the item number, label, action, and outcome."""
        self.number = number
        self.label = label
        self.action = action
        self.outcome = outcome
        self.error = error

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"LabelChangeResult(number={self.number}, label={self.label!r}, action={self.action.value}, outcome={self.outcome.value})"


class FetchFailure:
    """Contains a failed read for one item, such as a pull request diff."""

    def __init__(self, number: int, error: BaseException) -> None:
        """Initialize the failure with the item number and the raised error."""
        self.number = number
        self.error = error


class WorkflowResult:
    """Contains results of a mutating triage workflow."""

    def __init__(self, results: list[LabelChangeResult] | None = None, fetch_failures: list[FetchFailure] | None = None) -> None:
        """Initialize the result with label change results and fetch failures."""
        self.results = results or []
        self.fetch_failures = fetch_failures or []

    def _with_outcome(self, outcome: ItemOutcome) -> list[LabelChangeResult]:
        return [result for result in self.results if result.outcome == outcome]

    @property
    def applied(self) -> list[LabelChangeResult]:
        """Label changes that were confirmed and applied."""
        return self._with_outcome(ItemOutcome.APPLIED)

    @property
    def declined(self) -> list[LabelChangeResult]:
        """Label changes the user declined."""
        return self._with_outcome(ItemOutcome.DECLINED)

    @property
    def failed(self) -> list[LabelChangeResult]:
        """Label changes that were confirmed but failed."""
        return self._with_outcome(ItemOutcome.FAILED)

    @property
    def has_failures(self) -> bool:
        """Whether any read or mutation failed."""
        return bool(self.failed or self.fetch_failures)

    def summary(self) -> str:
        """One-line human readable summary."""
        summary = f"{len(self.applied)} applied, {len(self.declined)} cancelled, {len(self.failed)} failed"
        if self.fetch_failures:
            summary += f", {len(self.fetch_failures)} could not be checked"
        return summary
