"""Base ABC for repository clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class RepositoryClientBase(ABC):
    """Base ABC for clients scoped to a single repository."""

    # Identity
    @abstractmethod
    async def get_authenticated_user(self) -> Any:
        """Get the user the client is authenticated as."""
        pass

    # Issues
    @abstractmethod
    async def list_issues(self, state: Literal["open", "closed", "all"] = "open", **kwargs: Any) -> list[Any]:
        """List issues for a repository."""
        pass

    # Pull Requests
    @abstractmethod
    async def list_pull_requests(self, state: Literal["open", "closed", "all"] = "open", **kwargs: Any) -> list[Any]:
        """List pull requests for a repository."""
        pass

    # Commits
    @abstractmethod
    async def compare_commits(self, base: str, head: str) -> Any:
        """Compare two refs within the repository."""
        pass

    # Labels
    @abstractmethod
    async def add_labels_to_issue(self, issue_number: int, labels: list[str]) -> Any:
        """Add labels to an issue (or pull request)."""
        pass

    @abstractmethod
    async def remove_label_from_issue(self, issue_number: int, name: str) -> None:
        """Remove a single label from an issue (or pull request)."""
        pass
