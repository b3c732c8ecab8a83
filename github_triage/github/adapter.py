"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import (
    CommitComparison,
    Issue,
    Label,
    PrivateUser,
    PublicUser,
    PullRequestSimple,
)

from github_triage.configuration.models import TriageConfig

from .abc import RepositoryClientBase
from .client import GitHubClient, get_github_token_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ValueError(
                    f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {getattr(exc.response, 'url', None)}"
                ) from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(RepositoryClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @classmethod
    async def create(cls, config: TriageConfig) -> Self:
        """Create a new GitHub client adapter for the configured repository.

        Args:
            config: Triage configuration holding the token, API URL and target repository

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            RuntimeError: If the configuration carries no access token
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=config.github_api_url,
            owner=config.owner,
            repo_name=config.repo,
        )
        client = await get_github_token_client(config.github_access_token, config.github_api_url)
        return cls(client, config.owner, config.repo)

    # Identity
    async def get_authenticated_user(self) -> PrivateUser | PublicUser:
        """Get the user the client is authenticated as."""
        response: Response[PrivateUser | PublicUser] = await self.client.rest.users.async_get_authenticated()
        return response.parsed_data

    # Issues
    async def list_issues(self, state: Literal["open", "closed", "all"] = "open", per_page: int = 100, **kwargs: Any) -> list[Issue]:
        """List the first page of issues for a repository.

        GitHub returns pull requests from this endpoint as well.
        """
        response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            state=state,
            per_page=per_page,
            **kwargs,
        )
        issues = response.parsed_data
        logger.debug("Listed issues", owner=self.owner, repo=self.repo_name, state=state, count=len(issues))
        return issues

    # Pull Requests
    async def list_pull_requests(
        self, state: Literal["open", "closed", "all"] = "open", per_page: int = 100, **kwargs: Any
    ) -> list[PullRequestSimple]:
        """List the first page of pull requests for a repository."""
        response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
            owner=self.owner,
            repo=self.repo_name,
            state=state,
            per_page=per_page,
            **kwargs,
        )
        pull_requests = response.parsed_data
        logger.debug("Listed pull requests", owner=self.owner, repo=self.repo_name, state=state, count=len(pull_requests))
        return pull_requests

    # Commits
    async def compare_commits(self, base: str, head: str) -> CommitComparison:
        """Compare two refs within the repository."""
        response: Response[CommitComparison] = await self.client.rest.repos.async_compare_commits(
            owner=self.owner,
            repo=self.repo_name,
            basehead=f"{base}...{head}",
        )
        return response.parsed_data

    # Labels
    @handle_github_422
    async def add_labels_to_issue(self, issue_number: int, labels: list[str]) -> list[Label]:
        """Add labels to an issue (or pull request - GitHub considers them the same for label purposes).

        Adding a label that is already present is accepted by GitHub and returns the current label set.
        """
        response: Response[list[Label]] = await self.client.rest.issues.async_add_labels(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            labels=labels,
        )
        logger.info("Added labels", owner=self.owner, repo=self.repo_name, issue_number=issue_number, labels=labels)
        return response.parsed_data

    async def remove_label_from_issue(self, issue_number: int, name: str) -> None:
        """Remove a single label from an issue (or pull request).

        A label that is already absent is treated as removed.
        """
        try:
            await self.client.rest.issues.async_remove_label(
                owner=self.owner,
                repo=self.repo_name,
                issue_number=issue_number,
                name=name,
            )
        except RequestFailed as exc:
            if exc.response.status_code != 404:
                raise
            logger.warning("Label already absent", owner=self.owner, repo=self.repo_name, issue_number=issue_number, label=name)
            return
        logger.info("Removed label", owner=self.owner, repo=self.repo_name, issue_number=issue_number, label=name)
