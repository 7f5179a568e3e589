"""
Token build CLI.

- build.py: the ``build`` command (the only command, so it runs without a
  subcommand name: ``subatomic-tokens --theme vanilla``)
- utils.py: shared utilities
"""

import typer

from subatomic_tokens.cli.build import build_command
from subatomic_tokens.cli.utils import version_callback

app = typer.Typer(
    help="Build design tokens into CSS, JSON and JS/TS artifacts, per theme.",
    add_completion=False,
)

app.command(name="build")(build_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "build_command",
    "version_callback",
]
