"""List tagged directories.

Searches one or more roots for tagged directories. Once a directory
matches, its contents are no longer searched.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from tagdirs.core.config import ConfigError, load_config_or_default
from tagdirs.locator.models import DirectoryRecord
from tagdirs.locator.walker import LocatorError, TaggedDirLocator
from tagdirs.utils.formatting import console, create_records_table, print_error, print_info


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    TABLE = "table"
    JSON = "json"


def list_dirs(
    roots: Annotated[
        list[str] | None,
        typer.Argument(
            help="Location(s) to search for tagged subdirectories.",
            show_default=False,
        ),
    ] = None,
    has_tags: Annotated[
        list[str] | None,
        typer.Option("--has-tag", "-t", help="Require tag (repeatable)."),
    ] = None,
    lacks_tags: Annotated[
        list[str] | None,
        typer.Option("--lacks-tag", "-T", help="Reject directories with tag (repeatable)."),
    ] = None,
    has_files: Annotated[
        list[str] | None,
        typer.Option("--has-file", "-f", help="Require file (repeatable)."),
    ] = None,
    lacks_files: Annotated[
        list[str] | None,
        typer.Option(
            "--lacks-file",
            "-F",
            help="Reject directories with file; entries with this name are never searched.",
        ),
    ] = None,
    detail: Annotated[
        bool,
        typer.Option("--detail", "-l", help="Show name and path as well as absolute path."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-o",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to config file."),
    ] = None,
) -> None:
    """Search tagged directories recursively in a list of places.

    Examples:

        tagdirs ls --has-tag datadir --lacks-file .git . | wc -l

        tagdirs ls --has-tag media --lacks-file .git -l /media/budi /media/ujang
    """
    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        filter_spec = config.build_filter(
            has_tags=has_tags,
            lacks_tags=lacks_tags,
            has_files=has_files,
            lacks_files=lacks_files,
        )
    except ValueError as e:
        print_error(f"Invalid filter: {e}")
        raise typer.Exit(code=2) from e

    search_roots = roots or config.default_roots

    try:
        records = TaggedDirLocator(filter_spec).locate(search_roots)
    except LocatorError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if output_format == OutputFormat.JSON:
        _print_json(records, detail)
        return

    if output_format == OutputFormat.TABLE:
        _print_table(records)
        return

    _print_text(records, detail)


# === Private helper functions ===


def _print_text(records: list[DirectoryRecord], detail: bool) -> None:
    """Print one match per line, suitable for piping.

    Paths are written as the bytes the filesystem returned, so names that
    are not valid UTF-8 come out unchanged.
    """
    for record in records:
        fields = (record.name, record.path, record.abs_path) if detail else (record.abs_path,)
        typer.echo(b"\t".join(os.fsencode(f) for f in fields))


def _print_table(records: list[DirectoryRecord]) -> None:
    """Display matches as a Rich table."""
    if not records:
        print_info("No tagged directories found.")
        return
    console.print(create_records_table(records))
    console.print(f"\n[dim]Found {len(records)} tagged directories[/dim]")


def _print_json(records: list[DirectoryRecord], detail: bool) -> None:
    """Display matches as JSON.

    Output is ASCII: undecodable bytes in names appear as ``\\udcXX``
    escapes, which ``os.fsencode`` turns back into the original bytes.
    """
    data: list[object]
    if detail:
        data = [r.to_dict() for r in records]
    else:
        data = [r.abs_path for r in records]
    typer.echo(json.dumps(data, indent=2, ensure_ascii=True))
