"""Export command implementation.

Dumps a tree to JSON, either to stdout or to a file.
"""

from pathlib import Path
from typing import Annotated

import typer

from fstree.cli.types import HiddenOption, RootArgument, build_tree
from fstree.tree.serialization import export_tree, tree_to_json
from fstree.utils.formatting import print_error, print_success, print_warning


def export(
    root: RootArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write JSON to this file instead of stdout.",
        ),
    ] = None,
    hidden: HiddenOption = None,
) -> None:
    """Export the tree below ROOT as JSON."""
    tree = build_tree(root, show_hidden=hidden)

    if output is None:
        typer.echo(tree_to_json(tree))
        return

    output = output.resolve()
    if output.is_dir():
        print_error(f"Export path is a directory: {output}")
        raise typer.Exit(code=1)
    if output.exists():
        print_warning(f"Overwriting existing file: {output}")

    try:
        export_tree(tree, output)
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Exported {len(tree)} nodes to {output}")
