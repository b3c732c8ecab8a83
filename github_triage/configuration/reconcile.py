"""Reconciles environment settings into the triage configuration."""

from github_triage.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    RequiredConfigurationElementError,
)
from github_triage.configuration.models import TARGET_REPOSITORY, TriageConfig
from github_triage.utils.github import split_repository_in_configuration


def validate_github_authentication_configuration(github_access_token: str | None) -> str:
    """Validates the GitHub authentication configuration.

    Args:
        github_access_token (str | None): The GitHub access token.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If no usable token is provided.

    Returns:
        str: The token with surrounding whitespace removed.
    """
    if github_access_token is None:
        raise GitHubAuthenticationConfigurationUndefinedError(
            "No GitHub authentication configuration provided. Please set GITHUB_ACCESS_TOKEN in the environment or a .env file."
        )
    token = github_access_token.strip()
    if not token:
        raise GitHubAuthenticationConfigurationUndefinedError("GITHUB_ACCESS_TOKEN is set but empty.")
    return token


def build_triage_configuration(
    github_access_token: str | None,
    github_api_url: str = "https://api.github.com",
    debug: bool = False,
    repository: str = TARGET_REPOSITORY,
) -> TriageConfig:
    """Build the configuration value handed to every workflow.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If the token is missing or empty.
        RequiredConfigurationElementError: If the GitHub API URL is empty.
        ValueError: If the repository is not in 'owner/repo' format.
    """
    token = validate_github_authentication_configuration(github_access_token)
    if not github_api_url:
        raise RequiredConfigurationElementError(name="GitHub API URL", env_name="GITHUB_API_URL")
    owner, repo = split_repository_in_configuration(repository)
    return TriageConfig(
        owner=owner,
        repo=repo,
        github_api_url=github_api_url.rstrip("/"),
        github_access_token=token,
        debug=debug,
    )
