"""Output helpers that keep user messages and machine-readable output apart.

user_output goes to stderr so stdout stays clean for anything a script may
want to capture.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message meant for a person at the terminal."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print a line meant to be read by other programs."""
    click.echo(message)
