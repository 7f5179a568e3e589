"""
Token build command.

Builds every configured theme, or only the one named with ``--theme``.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from subatomic_tokens.cli.utils import version_callback
from subatomic_tokens.core.builder import build_themes, resolve_themes
from subatomic_tokens.core.errors import TokenError
from subatomic_tokens.core.logging import setup_logging
from subatomic_tokens.core.settings import load_settings

console = Console()
err_console = Console(stderr=True)


def build_command(
    theme: str | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme to build (default: every configured theme)",
    ),
    root: Path = typer.Option(  # noqa: B008
        Path("."),
        "--root",
        "-r",
        envvar="SUBATOMIC_TOKENS_ROOT",
        help="Token root holding core/ and one directory per theme",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file (default: <root>/tokens.yaml when present)",
    ),
    jobs: int = typer.Option(
        1,
        "--jobs",
        "-j",
        min=1,
        help="Number of themes to build in parallel",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every written file"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """
    Build design tokens for one theme or all themes.

    Examples:
        subatomic-tokens                      # Build every theme
        subatomic-tokens --theme vanilla      # Build one theme
        subatomic-tokens -r tokens/ -j 4      # Build all themes, 4 at a time
    """
    setup_logging(verbose=verbose)

    try:
        settings = load_settings(root.resolve(), config)
        themes = resolve_themes(theme, settings)
        if theme is None:
            console.print("[yellow]No theme specified, building all themes...[/yellow]")
        results = build_themes(themes, settings, jobs=jobs)
    except TokenError as e:
        err_console.print(f"[red]Token build failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    file_count = sum(len(result.files) for result in results)
    console.print(f"[green]✓ Built {len(results)} theme(s), {file_count} file(s)[/green]")
