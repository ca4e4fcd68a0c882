from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from muggle_assert.config.loader import load_settings, settings_from_env

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


@app.command()
def config(
    path: Optional[Path] = typer.Argument(
        None,
        help="Config file or directory holding muggle-assert.yaml (defaults to $MUGGLE_ASSERT_CONFIG)",
    ),
) -> None:
    """Show the effective settings."""
    try:
        settings = load_settings(path) if path is not None else settings_from_env()
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        console.print(f"[red]Invalid config:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="muggle-assert settings", show_lines=False)
    table.add_column("Setting")
    table.add_column("Value")
    for section, values in settings.model_dump().items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", "n/a" if value is None else str(value))
    console.print(table)


@app.command()
def version() -> None:
    """Print the installed version."""
    try:
        console.print(package_version("muggle-assert"))
    except PackageNotFoundError:
        console.print("unknown")
