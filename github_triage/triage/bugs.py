"""Read-only listing of bug-labeled issues."""

from typing import Any

import structlog

from github_triage.configuration.models import TriageConfig
from github_triage.github.abc import RepositoryClientBase
from github_triage.triage.labels import has_label

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def list_bug_issues(adapter: RepositoryClientBase, config: TriageConfig) -> list[dict[str, Any]]:
    """Return the title and number of every listed issue carrying the bug label."""
    issues = await adapter.list_issues()
    bugs = [{"title": issue.title, "number": issue.number} for issue in issues if has_label(issue.labels, config.label_bug)]
    logger.info("Filtered issues by label", label=config.label_bug, issue_count=len(issues), match_count=len(bugs))
    return bugs
