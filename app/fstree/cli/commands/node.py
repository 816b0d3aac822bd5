"""Node and find command implementations.

``node`` shows one node by its coordinate together with its ancestors;
``find`` lists every node whose name matches a pattern.
"""

import fnmatch
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fstree.cli.types import HiddenOption, RootArgument, build_tree
from fstree.tree.navigation import get_all_children, get_all_parent
from fstree.utils.formatting import (
    console,
    create_node_table,
    format_node_label,
    format_node_row,
    print_error,
    print_info,
)


def node(
    root: RootArgument,
    level: Annotated[int, typer.Argument(min=0, help="Level of the node (root = 0).")],
    position: Annotated[int, typer.Argument(min=0, help="Position within the level.")],
    hidden: HiddenOption = None,
) -> None:
    """Show the node at LEVEL, POSITION and its ancestors."""
    tree = build_tree(root, show_hidden=hidden)

    found = tree.node_at(level, position)
    if found is None:
        print_error(f"No node at level {level}, position {position}.")
        raise typer.Exit(code=1)

    details = Table(show_header=False, border_style="border")
    details.add_column("Field", style="bold_header")
    details.add_column("Value")
    details.add_row("Name", format_node_label(found))
    details.add_row("Path", escape(found.path))
    details.add_row("Type", found.kind.value)
    details.add_row("Level", str(found.level))
    details.add_row("Position", str(found.position))
    details.add_row("Unreadable", "yes" if found.unauthorized_children else "no")
    if found.is_directory:
        details.add_row("Children", str(len(found.children or [])))
        details.add_row("Descendants", str(len(get_all_children(found) or [])))
    console.print(details)

    ancestors = get_all_parent(found)
    if ancestors is None:
        print_info("This is the root node.")
        return

    table = create_node_table("Ancestors")
    for ancestor in ancestors:
        table.add_row(*format_node_row(ancestor))
    console.print(table)


def find(
    root: RootArgument,
    pattern: Annotated[str, typer.Argument(help="Name or glob pattern to match.")],
    hidden: HiddenOption = None,
) -> None:
    """List nodes below ROOT whose name matches PATTERN.

    Examples:
        fstree find . README.md
        fstree find . "*.py"
    """
    tree = build_tree(root, show_hidden=hidden)
    matches = [n for n in tree.all() if fnmatch.fnmatchcase(n.name, pattern)]

    if not matches:
        print_info(f"No entries match '{escape(pattern)}'.")
        return

    table = create_node_table(f"Matches for '{escape(pattern)}'")
    for match in matches:
        table.add_row(*format_node_row(match))
    console.print(table)
    console.print(f"\n[dim]Found {len(matches)} matching entries[/dim]")
