"""Shell utilities.

Provides a thin wrapper around subprocess for running package manager
commands, plus the terminal trace helpers used by the pipeline.
"""

from __future__ import annotations

import subprocess

import click

from .errors import SubprocessFailureError


def run(command: str) -> str:
    """Run a shell command string and return its stdout.

    The command goes through the shell because list commands for some
    managers pipe into grep/findstr. The call blocks until the command
    finishes; there is no timeout.

    Args:
        command: Full command line (e.g., "npm install --save remix@2.0.0").

    Returns:
        Captured stdout, unmodified.

    Raises:
        SubprocessFailureError: If the command exits non-zero.
    """
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    if result.returncode != 0:
        raise SubprocessFailureError(command, result.returncode, result.stderr)
    return result.stdout


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    click.echo(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    """Print an indented trace line under the current step."""
    click.echo(f"  {msg}")
