"""Output utilities for CLI commands with clear intent.

user_output goes to stderr and is meant for people; machine_output goes to
stdout so results can be piped.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)
