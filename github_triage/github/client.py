# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_token_client(github_access_token: str, github_api_url: str) -> GitHubClient:
    """Returns an authenticated GitHub client using an access token."""
    if not github_access_token:
        raise RuntimeError("GitHub token authentication requires GITHUB_ACCESS_TOKEN.")
    # Disable HTTP caching to always get fresh label state
    return GitHub(auth=TokenAuthStrategy(github_access_token), base_url=github_api_url, http_cache=False)
