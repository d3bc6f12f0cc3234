"""CLI helper utilities."""

import os
import sys

import click


def fail(message: str) -> None:
    """Print ``Error: <message>`` on stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def silence_stdout() -> None:
    """Point stdout at devnull after the reader went away.

    Without this the interpreter reports a second BrokenPipeError when it
    flushes stdout at shutdown.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass
