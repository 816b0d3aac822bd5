"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from fstree import __version__
from fstree.cli.commands import config, export, levels, node, show
from fstree.core.config import load_config_or_default
from fstree.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="fstree",
    help="Level-indexed snapshots of directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fstree version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log at DEBUG.
        quiet: Log at ERROR only. Ignored when ``verbose`` is set.

    Returns:
        The effective log level.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.getLevelName(load_config_or_default().log_level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
    return level


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
) -> None:
    """fstree - level-indexed snapshots of directory trees.

    Every directory and file below a root becomes a node addressable by
    its (level, position) coordinate.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command("show")(show.show)
app.command("levels")(levels.levels)
app.command("node")(node.node)
app.command("find")(node.find)
app.command("export")(export.export)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
