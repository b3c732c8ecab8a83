"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import json

import typer
from dotenv import find_dotenv, load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_triage import __version__
from github_triage.configuration.env import Settings
from github_triage.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    RequiredConfigurationElementError,
)
from github_triage.configuration.logs import configure_logging
from github_triage.configuration.models import TriageConfig
from github_triage.configuration.reconcile import build_triage_configuration
from github_triage.triage.driver import (
    run_check_prs_workflow,
    run_check_screenshots_workflow,
    run_list_bugs_workflow,
    run_me_workflow,
)
from github_triage.triage.results import WorkflowResult

load_dotenv(find_dotenv(usecwd=True))

typer_app = typer.Typer(pretty_exceptions_show_locals=False, no_args_is_help=True)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"github-triage {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        Option("--version", "-V", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """Label triage for the issues and pull requests of a GitHub repository."""
    configure_logging(debug=Settings().DEBUG)


def load_triage_config() -> TriageConfig:
    """Build the configuration from the environment, exiting on configuration errors."""
    settings = Settings()
    try:
        return build_triage_configuration(
            github_access_token=settings.GITHUB_ACCESS_TOKEN,
            github_api_url=settings.GITHUB_API_URL,
            debug=settings.DEBUG,
        )
    except (GitHubAuthenticationConfigurationUndefinedError, RequiredConfigurationElementError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _report(result: WorkflowResult) -> None:
    typer.echo(f"Done: {result.summary()}")
    if result.has_failures:
        raise typer.Exit(code=1)


@typer_app.command(name="me")
def me_cli() -> None:
    """Check my profile."""
    config = load_triage_config()
    login = asyncio.run(run_me_workflow(config))
    typer.echo(f"Hello, {login}")


@typer_app.command(name="list-bugs")
def list_bugs_cli() -> None:
    """List issues with bug label."""
    config = load_triage_config()
    bugs = asyncio.run(run_list_bugs_workflow(config))
    typer.echo(json.dumps(bugs, indent=2))


@typer_app.command(name="check-prs")
def check_prs_cli() -> None:
    """Check pull request status."""
    config = load_triage_config()
    _report(asyncio.run(run_check_prs_workflow(config)))


@typer_app.command(name="check-screenshots")
def check_screenshots_cli() -> None:
    """Check bug reports for screenshots."""
    config = load_triage_config()
    _report(asyncio.run(run_check_screenshots_workflow(config)))


if __name__ == "__main__":
    typer_app()
