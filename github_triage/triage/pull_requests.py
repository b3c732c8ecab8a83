"""Flags open pull requests whose diff is too large to review comfortably."""

import asyncio
from dataclasses import dataclass
from typing import Any

import structlog
import typer

from github_triage.configuration.models import TriageConfig
from github_triage.github.abc import RepositoryClientBase
from github_triage.triage.confirm import confirm_action
from github_triage.triage.labels import has_label
from github_triage.triage.mutate import confirm_and_apply_label_change
from github_triage.triage.results import FetchFailure, LabelAction, WorkflowResult
from github_triage.triage.types import ConfirmationGate

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass
class PullRequestDiff:
    """A pull request together with the size of its diff."""

    number: int
    labels: list[Any]
    total_changes: int


def calculate_total_changes(comparison: Any) -> int:
    """Sum the per-file change counts of a commit comparison."""
    files = getattr(comparison, "files", None)
    if not isinstance(files, list):
        return 0
    return sum(file.changes for file in files)


def is_oversized(total_changes: int, threshold: int) -> bool:
    """Whether a diff of `total_changes` lines exceeds `threshold`."""
    return total_changes > threshold


async def fetch_pull_request_diffs(
    adapter: RepositoryClientBase,
    pull_requests: list[Any],
    max_concurrency: int,
) -> tuple[list[PullRequestDiff], list[FetchFailure]]:
    """Compare head against base for every pull request with bounded concurrency.

    Each comparison succeeds or fails on its own; failures are returned rather than raised.
    """
    semaphore = asyncio.Semaphore(max_concurrency)

    async def fetch(pull_request: Any) -> PullRequestDiff:
        async with semaphore:
            comparison = await adapter.compare_commits(base=pull_request.base.ref, head=pull_request.head.ref)
        return PullRequestDiff(
            number=pull_request.number,
            labels=list(pull_request.labels),
            total_changes=calculate_total_changes(comparison),
        )

    outcomes = await asyncio.gather(*(fetch(pull_request) for pull_request in pull_requests), return_exceptions=True)

    diffs: list[PullRequestDiff] = []
    failures: list[FetchFailure] = []
    for pull_request, outcome in zip(pull_requests, outcomes):
        if isinstance(outcome, Exception):
            logger.error("Failed to compare pull request refs", pr_number=pull_request.number, error=str(outcome))
            failures.append(FetchFailure(pull_request.number, outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            diffs.append(outcome)
    return diffs, failures


async def label_oversized_pull_requests(
    adapter: RepositoryClientBase,
    config: TriageConfig,
    confirm: ConfirmationGate = confirm_action,
) -> WorkflowResult:
    """Add the too-big label, after confirmation, to every oversized open pull request lacking it."""
    pull_requests = await adapter.list_pull_requests()
    logger.info("Fetched open pull requests", count=len(pull_requests))

    diffs, fetch_failures = await fetch_pull_request_diffs(adapter, pull_requests, config.max_concurrency)
    for failure in fetch_failures:
        typer.echo(f"PR #{failure.number}: could not compare refs: {failure.error}", err=True)

    oversized = [diff for diff in diffs if is_oversized(diff.total_changes, config.too_big_threshold)]
    logger.info("Selected oversized pull requests", threshold=config.too_big_threshold, count=len(oversized))

    result = WorkflowResult(fetch_failures=fetch_failures)
    for diff in oversized:
        typer.echo(f"PR #{diff.number}, Total Changes: {diff.total_changes}")
        if has_label(diff.labels, config.label_too_big):
            logger.debug("Pull request already labeled", pr_number=diff.number, label=config.label_too_big)
            continue
        typer.echo(f"Adding {config.label_too_big} label to PR #{diff.number}...")
        result.results.append(
            await confirm_and_apply_label_change(
                adapter,
                number=diff.number,
                label=config.label_too_big,
                action=LabelAction.ADD,
                message=f"Do you really want to add label {config.label_too_big} to PR #{diff.number}",
                confirm=confirm,
            )
        )
    return result
