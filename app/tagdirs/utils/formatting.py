"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from tagdirs.locator.models import DirectoryRecord

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "dim": "#b2bec3",
        "tag.name": "bold #69B9A1",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


def display_path(path: str) -> str:
    """Make a path printable, showing undecodable bytes as \\xNN escapes."""
    return os.fsencode(path).decode(sys.getfilesystemencoding(), "backslashreplace")


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_records_table(
    records: list[DirectoryRecord],
    title: str = "Tagged Directories",
) -> Table:
    """Create a table listing tagged directories.

    Args:
        records: Matches to display, in traversal order.
        title: Table title.

    Returns:
        Rich Table with name, path and abs_path columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("name", style="tag.name", no_wrap=True)
    table.add_column("path", style="muted")
    table.add_column("abs_path")

    for record in records:
        table.add_row(
            escape(display_path(record.name)),
            escape(display_path(record.path)),
            escape(display_path(record.abs_path)),
        )

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
