"""Orchestrates the triage workflows against the configured repository."""

import time
from typing import Any

import structlog

from github_triage.configuration.models import TriageConfig
from github_triage.github.adapter import GitHubKitAdapter
from github_triage.triage.bugs import list_bug_issues
from github_triage.triage.confirm import confirm_action
from github_triage.triage.pull_requests import label_oversized_pull_requests
from github_triage.triage.results import WorkflowResult
from github_triage.triage.screenshots import reconcile_screenshot_labels
from github_triage.triage.types import ConfirmationGate

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_me_workflow(config: TriageConfig) -> str:
    """Return the login of the authenticated user."""
    github_adapter = await GitHubKitAdapter.create(config)
    user = await github_adapter.get_authenticated_user()
    return user.login


async def run_list_bugs_workflow(config: TriageConfig) -> list[dict[str, Any]]:
    """Return the bug-labeled issues of the configured repository."""
    github_adapter = await GitHubKitAdapter.create(config)
    return await list_bug_issues(github_adapter, config)


async def run_check_prs_workflow(config: TriageConfig, confirm: ConfirmationGate = confirm_action) -> WorkflowResult:
    """Run the oversized pull request workflow."""
    github_adapter = await GitHubKitAdapter.create(config)
    start_time = time.time()
    logger.info("Checking pull request sizes", repo=config.full_name)
    result = await label_oversized_pull_requests(github_adapter, config, confirm=confirm)
    logger.info("Checked pull request sizes", duration=round(time.time() - start_time, 2), summary=result.summary())
    return result


async def run_check_screenshots_workflow(config: TriageConfig, confirm: ConfirmationGate = confirm_action) -> WorkflowResult:
    """Run the screenshot requirement workflow."""
    github_adapter = await GitHubKitAdapter.create(config)
    start_time = time.time()
    logger.info("Checking bug reports for screenshots", repo=config.full_name)
    result = await reconcile_screenshot_labels(github_adapter, config, confirm=confirm)
    logger.info("Checked bug reports for screenshots", duration=round(time.time() - start_time, 2), summary=result.summary())
    return result
