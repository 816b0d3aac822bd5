"""Theme management for the fstree CLI.

Turns the ``[colors]`` section of the user configuration into a Rich theme.
"""

from rich.theme import Theme

from fstree.core.config import DisplayColors, load_config_or_default


def get_rich_theme(colors: DisplayColors | None = None) -> Theme:
    """Convert DisplayColors to a Rich Theme.

    Args:
        colors: Colors to convert. If None, loads them from the user config.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = load_config_or_default().colors

    styles: dict[str, str] = {
        "directory": f"bold {colors.directory}",
        "file": colors.file,
        "denied": f"bold {colors.denied}",
        "muted": colors.muted,
        "header": colors.header,
        "border": colors.border,
        "success": colors.success,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
        # Convenience styles
        "bold_header": f"bold {colors.header}",
        "dim": colors.muted,
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it if necessary."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
