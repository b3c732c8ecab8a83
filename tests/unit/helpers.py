"""Builders and fakes shared by the unit tests."""

from types import SimpleNamespace
from typing import Any, Literal

from github_triage.github.abc import RepositoryClientBase


def make_label(name: str) -> SimpleNamespace:
    """Build an object shaped like a githubkit label."""
    return SimpleNamespace(name=name)


def make_issue(number: int, title: str = "", body: Any = None, labels: list[str] | None = None) -> SimpleNamespace:
    """Build an object shaped like a githubkit issue."""
    return SimpleNamespace(
        number=number,
        title=title or f"Issue {number}",
        body=body,
        labels=[make_label(name) for name in labels or []],
    )


def make_pull_request(number: int, labels: list[str] | None = None, base: str = "main", head: str | None = None) -> SimpleNamespace:
    """Build an object shaped like a githubkit simple pull request."""
    return SimpleNamespace(
        number=number,
        labels=[make_label(name) for name in labels or []],
        base=SimpleNamespace(ref=base),
        head=SimpleNamespace(ref=head or f"feature/{number}"),
    )


def make_comparison(*changes: int) -> SimpleNamespace:
    """Build an object shaped like a githubkit commit comparison."""
    return SimpleNamespace(files=[SimpleNamespace(filename=f"file{index}.py", changes=count) for index, count in enumerate(changes)])


class FakeRepositoryClient(RepositoryClientBase):
    """In-memory repository client recording label mutations."""

    def __init__(
        self,
        issues: list[SimpleNamespace] | None = None,
        pull_requests: list[SimpleNamespace] | None = None,
        comparisons: dict[str, Any] | None = None,
        login: str = "octocat",
    ) -> None:
        """Initialize the fake with canned issues, pull requests and comparisons keyed by head ref."""
        self.issues = issues or []
        self.pull_requests = pull_requests or []
        self.comparisons = comparisons or {}
        self.login = login
        self.added: list[tuple[int, list[str]]] = []
        self.removed: list[tuple[int, str]] = []
        self.failing_numbers: set[int] = set()

    def _item(self, number: int) -> SimpleNamespace:
        for item in [*self.issues, *self.pull_requests]:
            if item.number == number:
                return item
        raise KeyError(number)

    async def get_authenticated_user(self) -> Any:
        return SimpleNamespace(login=self.login)

    async def list_issues(self, state: Literal["open", "closed", "all"] = "open", **kwargs: Any) -> list[Any]:
        return list(self.issues)

    async def list_pull_requests(self, state: Literal["open", "closed", "all"] = "open", **kwargs: Any) -> list[Any]:
        return list(self.pull_requests)

    async def compare_commits(self, base: str, head: str) -> Any:
        comparison = self.comparisons[head]
        if isinstance(comparison, Exception):
            raise comparison
        return comparison

    async def add_labels_to_issue(self, issue_number: int, labels: list[str]) -> Any:
        if issue_number in self.failing_numbers:
            raise ValueError(f"GitHub 422 error in add_labels_to_issue for #{issue_number}")
        self.added.append((issue_number, labels))
        item = self._item(issue_number)
        for name in labels:
            if name not in {label.name for label in item.labels}:
                item.labels.append(make_label(name))
        return item.labels

    async def remove_label_from_issue(self, issue_number: int, name: str) -> None:
        if issue_number in self.failing_numbers:
            raise ValueError(f"GitHub 422 error in remove_label_from_issue for #{issue_number}")
        self.removed.append((issue_number, name))
        item = self._item(issue_number)
        item.labels = [label for label in item.labels if label.name != name]


def always(answer: bool) -> Any:
    """Confirmation gate that always answers `answer` and records the prompts it saw."""
    prompts: list[str] = []

    def gate(message: str) -> bool:
        prompts.append(message)
        return answer

    gate.prompts = prompts  # type: ignore[attr-defined]
    return gate
