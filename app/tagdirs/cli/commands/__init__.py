"""CLI commands for tagdirs.

This package contains all subcommand implementations.
"""

from tagdirs.cli.commands import config, ls

__all__ = ["config", "ls"]
