"""Flags bug reports missing a screenshot and unflags them once one is added."""

from typing import Any

import structlog

from github_triage.configuration.models import TriageConfig
from github_triage.github.abc import RepositoryClientBase
from github_triage.triage.confirm import confirm_action
from github_triage.triage.labels import has_label
from github_triage.triage.markdown import is_any_image_in_markdown
from github_triage.triage.mutate import confirm_and_apply_label_change
from github_triage.triage.results import LabelAction, WorkflowResult
from github_triage.triage.types import ConfirmationGate

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _body_has_image(issue: Any) -> bool:
    body = getattr(issue, "body", None)
    return isinstance(body, str) and bool(body) and is_any_image_in_markdown(body)


def should_flag_for_screenshot(issue: Any, config: TriageConfig) -> bool:
    """An issue with no image in its body that is not yet flagged."""
    return not _body_has_image(issue) and not has_label(issue.labels, config.label_needs_screenshot)


def should_resolve_screenshot(issue: Any, config: TriageConfig) -> bool:
    """A flagged issue whose body now contains an image."""
    return _body_has_image(issue) and has_label(issue.labels, config.label_needs_screenshot)


async def reconcile_screenshot_labels(
    adapter: RepositoryClientBase,
    config: TriageConfig,
    confirm: ConfirmationGate = confirm_action,
) -> WorkflowResult:
    """Add or remove the needs-screenshot label on bug issues, one confirmed change at a time.

    Flagged issues without an image, and unflagged issues with an image, are already
    in their desired state and are left alone.
    """
    issues = await adapter.list_issues()
    bugs = [issue for issue in issues if has_label(issue.labels, config.label_bug)]
    to_flag = [issue for issue in bugs if should_flag_for_screenshot(issue, config)]
    to_resolve = [issue for issue in bugs if should_resolve_screenshot(issue, config)]
    logger.info(
        "Selected bug issues for screenshot triage",
        bug_count=len(bugs),
        flag_count=len(to_flag),
        resolve_count=len(to_resolve),
    )

    result = WorkflowResult()
    label = config.label_needs_screenshot
    for issue in to_flag:
        result.results.append(
            await confirm_and_apply_label_change(
                adapter,
                number=issue.number,
                label=label,
                action=LabelAction.ADD,
                message=f"Do you really want to add label {label} to issue #{issue.number}",
                confirm=confirm,
            )
        )
    for issue in to_resolve:
        result.results.append(
            await confirm_and_apply_label_change(
                adapter,
                number=issue.number,
                label=label,
                action=LabelAction.REMOVE,
                message=f"Do you really want to remove label {label} from issue #{issue.number}",
                confirm=confirm,
            )
        )
    return result
