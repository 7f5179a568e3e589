"""
Shared CLI utilities.
"""

import platform

import typer

from subatomic_tokens._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"subatomic-tokens {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()
