"""Label triage for a single GitHub repository's issues and pull requests."""

__version__ = "0.0.1"
