"""Configuration models and compiled-in triage constants."""

from dataclasses import dataclass

TARGET_REPOSITORY = "kmwyatt/github-cli-practice"

LABEL_TOO_BIG = "too-big"
LABEL_BUG = "bug"
LABEL_NEEDS_SCREENSHOT = "needs-screenshot"

TOO_BIG_THRESHOLD = 100
"""Pull requests with strictly more changed lines than this are oversized."""

MAX_CONCURRENCY = 8
"""Upper bound on concurrent read-only requests within one workflow."""


@dataclass(frozen=True)
class TriageConfig:
    """Configuration value shared by every triage workflow."""

    owner: str
    repo: str
    github_api_url: str
    github_access_token: str
    debug: bool = False
    label_too_big: str = LABEL_TOO_BIG
    label_bug: str = LABEL_BUG
    label_needs_screenshot: str = LABEL_NEEDS_SCREENSHOT
    too_big_threshold: int = TOO_BIG_THRESHOLD
    max_concurrency: int = MAX_CONCURRENCY

    @property
    def full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner}/{self.repo}"
