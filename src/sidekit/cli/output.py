"""User-facing output for CLI commands."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message meant for the user (stderr, keeping stdout for data)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "") -> None:
    """Print data meant to be consumed by other programs (stdout)."""
    click.echo(message)
