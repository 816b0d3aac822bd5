"""CLI commands for fstree.

This package contains all subcommand implementations.
"""

from fstree.cli.commands import config, export, levels, node, show

__all__ = ["config", "export", "levels", "node", "show"]
