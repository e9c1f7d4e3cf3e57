"""Settings commands.

Show, initialize and locate the filetree config file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filetree.core.config import ConfigError, FiletreeConfig, require_config, save_config
from filetree.core.paths import get_config_path
from filetree.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Display the effective settings."""
    settings = require_config()
    config_path = get_config_path()

    table = Table(title="Settings", show_lines=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_column("Description", style="dim")

    for key, field in FiletreeConfig.model_fields.items():
        value = getattr(settings, key)
        table.add_row(key, escape(repr(value)), field.description or "")

    console.print(table)
    source = str(config_path) if config_path.exists() else "defaults (no config file)"
    console.print(f"\n[dim]Source: {escape(source)}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {escape(str(config_path))} (use --force to overwrite)")
        return

    try:
        saved = save_config(FiletreeConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")


@app.command()
def path() -> None:
    """Print the config file path."""
    typer.echo(str(get_config_path()))
