"""Interactive yes/no confirmation before label mutations."""

import sys

import structlog
import typer

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def confirm_action(message: str) -> bool:
    """Ask the user to confirm `message`.

    Non-interactive sessions and interrupted prompts count as a "no".
    """
    if not sys.stdin.isatty():
        logger.warning("Standard input is not interactive, declining", message=message)
        return False
    try:
        return typer.confirm(message, default=False)
    except typer.Abort:
        logger.info("Confirmation prompt interrupted, declining", message=message)
        typer.echo()
        return False
