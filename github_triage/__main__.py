"""Allows running the CLI with ``python -m github_triage``."""

from github_triage.configuration.cli import typer_app

typer_app(prog_name="github-triage")
