"""Configuration commands.

Shows and initializes the tagdirs configuration file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from tagdirs.core.config import (
    ConfigError,
    TagdirsConfig,
    config_to_dict,
    load_config_or_default,
    save_config,
)
from tagdirs.core.paths import get_config_path
from tagdirs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize configuration.",
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config file."),
]


@app.command()
def path(config_path: ConfigPathOption = None) -> None:
    """Print the config file location."""
    typer.echo(str(config_path or get_config_path()))


@app.command()
def show(config_path: ConfigPathOption = None) -> None:
    """Show the effective configuration as TOML."""
    target = config_path or get_config_path()
    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not target.exists():
        print_info(f"No config file at {target}, showing defaults.")
    typer.echo(tomli_w.dumps(config_to_dict(config)).rstrip())


@app.command()
def init(
    config_path: ConfigPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file."""
    target = config_path or get_config_path()
    if target.exists() and not force:
        print_error(f"Config already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(TagdirsConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
    console.print("[dim]Edit default_roots and lacks_files to taste.[/dim]")
