"""CLI package for fstree.

This package contains the Typer application and all subcommands.
"""

from fstree.cli.main import app

__all__ = ["app"]
