"""Levels command implementation.

Summarizes how many directories and files live at each level.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from fstree.cli.types import HiddenOption, OutputFormat, RootArgument, build_tree
from fstree.tree.tree import FileSystemTree
from fstree.utils.formatting import console


def levels(
    root: RootArgument,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    hidden: HiddenOption = None,
) -> None:
    """Show node counts per level below ROOT."""
    tree = build_tree(root, show_hidden=hidden)
    counts = count_levels(tree)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(counts))
        return

    table = Table(
        title=f"Levels of {tree.root.path}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Level", justify="right")
    table.add_column("Directories", justify="right", style="directory")
    table.add_column("Files", justify="right", style="file")
    table.add_column("Total", justify="right")

    for row in counts:
        table.add_row(
            str(row["level"]),
            str(row["directories"]),
            str(row["files"]),
            str(row["total"]),
        )

    console.print(table)
    console.print(f"\n[dim]{len(tree)} nodes in {tree.level_count} levels[/dim]")


def count_levels(tree: FileSystemTree) -> list[dict[str, int]]:
    """Count directories and files per level.

    Returns:
        One dictionary per level with level, directories, files and total.
    """
    counts: list[dict[str, int]] = []
    for level in range(tree.level_count):
        nodes = tree.nodes_at_level(level) or []
        directories = sum(1 for n in nodes if n.is_directory)
        counts.append(
            {
                "level": level,
                "directories": directories,
                "files": len(nodes) - directories,
                "total": len(nodes),
            }
        )
    return counts
