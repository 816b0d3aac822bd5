"""Config commands.

Inspect the active configuration or write a default config file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.syntax import Syntax

from fstree.core.config import ConfigError, TreeConfig, load_config_or_default, save_config
from fstree.core.paths import ensure_config_dir, get_config_path
from fstree.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and initialize the fstree configuration.",
    no_args_is_help=True,
)


@app.command("show")
def show_config() -> None:
    """Show the effective configuration as TOML."""
    config_path = get_config_path()
    config = load_config_or_default(config_path)

    if config_path.exists():
        print_info(f"Configuration file: {config_path}")
    else:
        print_info(f"No configuration file at {config_path}, showing defaults.")

    content = tomli_w.dumps(config.model_dump(exclude_none=True))
    console.print(Syntax(content, "toml", theme="ansi_dark", background_color="default"))


@app.command("init")
def init_config(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ensure_config_dir()
        save_config(TreeConfig(), config_path)
    except (RuntimeError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {config_path}")
