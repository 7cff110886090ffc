"""Output helpers for CLI-facing messages.

user_output goes to stderr so stdout stays free for machine-readable output.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message intended for the human at the terminal."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print a message intended for stdout consumers."""
    click.echo(message)


def warning_output(message: str) -> None:
    """Print a yellow warning line."""
    user_output(click.style("Warning: ", fg="yellow") + message)
