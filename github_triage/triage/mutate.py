"""Confirmation-gated label mutation shared by the triage workflows."""

import structlog
import typer
from githubkit.exception import GitHubException

from github_triage.github.abc import RepositoryClientBase
from github_triage.triage.results import ItemOutcome, LabelAction, LabelChangeResult
from github_triage.triage.types import ConfirmationGate

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def confirm_and_apply_label_change(
    adapter: RepositoryClientBase,
    number: int,
    label: str,
    action: LabelAction,
    message: str,
    confirm: ConfirmationGate,
) -> LabelChangeResult:
    """Prompt for confirmation, then add or remove `label` on issue or pull request `number`.

    Callers must run this for one item at a time; only one prompt may be active, and it
    blocks the event loop while waiting so that Ctrl-C reaches the prompt.
    A failed mutation is captured in the returned result instead of raised.
    """
    if not confirm(message):
        typer.echo("Cancelled!")
        logger.info("Label change declined", number=number, label=label, action=action.value)
        return LabelChangeResult(number, label, action, ItemOutcome.DECLINED)

    try:
        if action == LabelAction.ADD:
            await adapter.add_labels_to_issue(number, [label])
        else:
            await adapter.remove_label_from_issue(number, label)
    except (GitHubException, ValueError) as exc:
        logger.error("Label change failed", number=number, label=label, action=action.value, error=str(exc))
        typer.echo(f"Failed to {action.value} label {label} on #{number}: {exc}", err=True)
        return LabelChangeResult(number, label, action, ItemOutcome.FAILED, error=exc)

    return LabelChangeResult(number, label, action, ItemOutcome.APPLIED)
