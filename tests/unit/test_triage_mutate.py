"""Unit tests for the confirmation-gated label mutation."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from githubkit.exception import RequestFailed

from github_triage.triage.mutate import confirm_and_apply_label_change
from github_triage.triage.results import ItemOutcome, LabelAction


@pytest.mark.asyncio
async def test_declined_does_not_call_client() -> None:
    """Test that the client is untouched when the user declines."""
    adapter = MagicMock()
    adapter.add_labels_to_issue = AsyncMock()
    result = await confirm_and_apply_label_change(adapter, 1, "too-big", LabelAction.ADD, "Sure?", confirm=lambda message: False)
    assert result.outcome == ItemOutcome.DECLINED
    adapter.add_labels_to_issue.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_dispatches_to_remove_label() -> None:
    """Test that a confirmed removal calls remove_label_from_issue."""
    adapter = MagicMock()
    adapter.remove_label_from_issue = AsyncMock()
    result = await confirm_and_apply_label_change(adapter, 2, "needs-screenshot", LabelAction.REMOVE, "Sure?", confirm=lambda message: True)
    assert result.outcome == ItemOutcome.APPLIED
    adapter.remove_label_from_issue.assert_awaited_once_with(2, "needs-screenshot")


@pytest.mark.asyncio
async def test_github_error_is_captured() -> None:
    """Test that a GitHub request failure becomes a failed result."""
    adapter = MagicMock()
    error = RequestFailed(MagicMock(status_code=500))
    adapter.add_labels_to_issue = AsyncMock(side_effect=error)
    result = await confirm_and_apply_label_change(adapter, 3, "too-big", LabelAction.ADD, "Sure?", confirm=lambda message: True)
    assert result.outcome == ItemOutcome.FAILED
    assert result.error is error


@pytest.mark.asyncio
async def test_unexpected_error_propagates() -> None:
    """Test that errors other than GitHub or validation failures are not swallowed."""
    adapter = MagicMock()
    adapter.add_labels_to_issue = AsyncMock(side_effect=KeyError("boom"))
    with pytest.raises(KeyError):
        await confirm_and_apply_label_change(adapter, 4, "too-big", LabelAction.ADD, "Sure?", confirm=lambda message: True)
