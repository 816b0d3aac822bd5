"""Show command implementation.

Renders a directory tree with Rich, level by level from the root.
"""

from typing import Annotated

import typer
from rich.tree import Tree

from fstree.cli.types import HiddenOption, RootArgument, build_tree
from fstree.core.config import load_config_or_default
from fstree.tree.models import FileSystemNode
from fstree.tree.tree import FileSystemTree
from fstree.utils.formatting import console, format_node_label


def show(
    root: RootArgument,
    depth: Annotated[
        int | None,
        typer.Option(
            "--depth",
            "-d",
            min=0,
            help="Deepest level to render (default from config, else unlimited).",
        ),
    ] = None,
    hidden: HiddenOption = None,
) -> None:
    """Render the directory tree below ROOT.

    Examples:
        fstree show .                 # Whole tree
        fstree show ~/src --depth 2   # Two levels below the root
        fstree show . --no-hidden     # Skip dot-entries
    """
    if depth is None:
        depth = load_config_or_default().max_render_depth

    tree = build_tree(root, show_hidden=hidden)
    console.print(render_tree(tree, max_depth=depth))

    nodes = tree.all()
    directories = sum(1 for n in nodes if n.is_directory)
    files = len(nodes) - directories
    denied = sum(1 for n in nodes if n.unauthorized_children)

    summary = f"\n[dim]{directories} directories, {files} files, {tree.level_count} levels"
    if denied:
        summary += f", [denied]{denied} unreadable[/denied]"
    console.print(summary + "[/dim]")


def render_tree(tree: FileSystemTree, max_depth: int | None = None) -> Tree:
    """Build a Rich Tree from a file tree.

    Args:
        tree: Tree to render.
        max_depth: Deepest level to include. None renders everything.

    Returns:
        Rich Tree rooted at the tree's root node.
    """
    root = tree.root_node
    if root is None:
        return Tree("[muted](empty)[/muted]")

    rendered = Tree(format_node_label(root), guide_style="border")
    stack: list[tuple[FileSystemNode, Tree]] = [(root, rendered)]
    while stack:
        node, branch = stack.pop()
        if max_depth is not None and (node.level or 0) >= max_depth:
            continue
        for child in node.children or []:
            stack.append((child, branch.add(format_node_label(child))))
    return rendered
