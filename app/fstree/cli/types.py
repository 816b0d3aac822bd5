"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to avoid code duplication.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from fstree.core.config import load_config_or_default
from fstree.tree.enumerator import PathEnumerator
from fstree.tree.tree import FileSystemTree
from fstree.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


# Reusable argument/option declarations
RootArgument = Annotated[
    Path,
    typer.Argument(
        help="Root directory of the tree.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
]

HiddenOption = Annotated[
    bool | None,
    typer.Option(
        "--hidden/--no-hidden",
        help="Include dot-entries (default from config).",
        show_default=False,
    ),
]


def build_tree(root: Path, show_hidden: bool | None = None) -> FileSystemTree:
    """Build a tree for a CLI command, exiting on failure.

    Args:
        root: Root directory.
        show_hidden: Override of the ``show_hidden`` config setting.

    Returns:
        The populated tree.

    Raises:
        typer.Exit: If the root directory cannot be listed.
    """
    if show_hidden is None:
        show_hidden = load_config_or_default().show_hidden

    try:
        return FileSystemTree(root, enumerator=PathEnumerator(show_hidden=show_hidden))
    except PermissionError as e:
        print_error(f"Permission denied: {root}")
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Cannot read directory tree: {e}")
        raise typer.Exit(code=1) from e
