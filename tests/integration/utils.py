"""Utility functions for integration tests."""

import os
import subprocess
import sys
from pathlib import Path


def get_cli_with_starting_args() -> list[str]:
    """Get the command that starts the github-triage CLI with the current interpreter."""
    return [sys.executable, "-m", "github_triage"]


def run_cli(args: list[str], cwd: Path, env_overrides: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    """Helper to run the CLI as a subprocess and capture output.

    Args:
        args: List of command line arguments to pass to the CLI.
        cwd: Working directory, which decides which .env file is read.
        env_overrides: Environment variables to set for the child process.

    Returns:
        subprocess.CompletedProcess: The result of running the CLI command.
    """
    env = {key: value for key, value in os.environ.items() if key not in {"GITHUB_ACCESS_TOKEN", "GITHUB_API_URL", "DEBUG"}}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(Path(__file__).parent.parent.parent), env.get("PYTHONPATH")]))
    env.update(env_overrides or {})
    complete_command = get_cli_with_starting_args() + args
    print(f"Running command: {' '.join(complete_command)}")
    result = subprocess.run(
        complete_command,
        capture_output=True,
        text=True,
        cwd=cwd,
        env=env,
    )
    print(f"Command result: {result.returncode}")
    print(f"Command stdout: {result.stdout}")
    print(f"Command stderr: {result.stderr}")
    return result
