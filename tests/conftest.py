"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import pytest
from fstree.tree.enumerator import PathEnumerator
from fstree.tree.models import EntryRef
from fstree.tree.tree import FileSystemTree
from rich.logging import RichHandler

# Nested fixture shape: 3 directories per level for 3 levels, 3 files in each leaf
NESTED_FANOUT = 3
NESTED_NODE_COUNT = 121
NESTED_FILE_COUNT = 81
NESTED_DIR_COUNT = 40


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


def _make_nested(directory: Path, depth: int) -> None:
    """Create NESTED_FANOUT children named '<parent>.<i>' below directory."""
    for i in range(NESTED_FANOUT):
        if depth == 0:
            (directory / f"{directory.name}.{i}.txt").write_text(f"{directory.name}.{i}")
        else:
            child = directory / f"{directory.name}.{i}"
            child.mkdir()
            _make_nested(child, depth - 1)


@pytest.fixture
def nested_root(tmp_path: Path) -> Path:
    """Directory tree: root/root.0/root.0.0/root.0.0.0/root.0.0.0.0.txt (3-way fanout).

    Yields 1 + 3 + 9 + 27 directories and 81 files over 5 levels.
    """
    root = tmp_path / "root"
    root.mkdir()
    _make_nested(root, depth=3)
    return root


@pytest.fixture
def nested_tree(nested_root: Path) -> FileSystemTree:
    """FileSystemTree built from nested_root."""
    return FileSystemTree(nested_root)


class DenyingEnumerator(PathEnumerator):
    """PathEnumerator that raises an error for selected directory names."""

    def __init__(self, names: Iterable[str], error: type[OSError] = PermissionError) -> None:
        super().__init__()
        self.names = set(names)
        self.error = error

    def enumerate_children(self, entry: EntryRef) -> tuple[list[EntryRef], list[EntryRef]]:
        if entry.name in self.names:
            raise self.error(f"denied: {entry.path}")
        return super().enumerate_children(entry)


@pytest.fixture
def denying_enumerator() -> type[DenyingEnumerator]:
    """Factory for enumerators that fail on selected directory names."""
    return DenyingEnumerator


@pytest.fixture
def restore_logging():
    """Drop the Rich handler installed by the CLI callback."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)
