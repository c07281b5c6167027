"""CLI package for tagdirs.

This package contains the Typer application and all subcommands.
"""

from tagdirs.cli.main import app

__all__ = ["app"]
