"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fstree.core.theme import get_theme

if TYPE_CHECKING:
    from fstree.tree.models import FileSystemNode


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_node_label(node: FileSystemNode) -> str:
    """Format a node name with Rich markup.

    Directories get a trailing slash; directories that could not be
    listed are flagged as denied.

    Args:
        node: Node to format.

    Returns:
        Rich markup string.
    """
    if node.is_file:
        return f"[file]{escape(node.name)}[/]"
    label = f"[directory]{escape(node.name)}/[/]"
    if node.unauthorized_children:
        label += " [denied](permission denied)[/]"
    return label


def create_node_table(title: str) -> Table:
    """Create a pre-configured table for displaying nodes.

    Args:
        title: Table title.

    Returns:
        Rich Table with Level, Position, Type, Name and Path columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Level", justify="right", width=5)
    table.add_column("Position", justify="right", width=8)
    table.add_column("Type", width=9)
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", style="muted", overflow="fold")
    return table


def format_node_row(node: FileSystemNode) -> tuple[str, str, str, str, str]:
    """Format a node as a row for :func:`create_node_table`."""
    return (
        str(node.level),
        str(node.position),
        node.kind.value,
        format_node_label(node),
        escape(node.path),
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
