"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from tagdirs import __version__
from tagdirs.cli.commands import config, ls
from tagdirs.utils.logging import setup_logging

# Create main Typer app
app = typer.Typer(
    name="tagdirs",
    help="Locate tagged directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tagdirs version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Enable verbose output (-vv traces every directory visited).",
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report errors.",
        ),
    ] = False,
) -> None:
    """tagdirs - Locate tagged directories.

    A tagged directory carries one or more marker files named
    [bold].tag-TAGNAME[/bold]. Once a tagged directory is found, its
    contents are not searched for further tagged directories.
    """
    setup_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command(name="ls")(ls.list_dirs)
app.command(name="list-tagged-dirs", hidden=True)(ls.list_dirs)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
