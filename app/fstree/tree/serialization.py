"""JSON export of a file tree.

Only view data is serialized: parent and tree back-references are left
out. An export is a one-way dump and is never loaded back into a tree.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import TYPE_CHECKING, Any

from fstree import __version__
from fstree.tree.models import FileSystemNode

if TYPE_CHECKING:
    from fstree.tree.tree import FileSystemTree


@dataclass(frozen=True, slots=True)
class ExportMetadata:
    """Metadata written alongside an exported tree.

    Attributes:
        timestamp: ISO format timestamp of the export.
        root: Absolute path of the tree root.
        fstree_version: Version of fstree that wrote the export.
        node_count: Total number of nodes.
        level_count: Number of levels.
    """

    timestamp: str
    root: str
    fstree_version: str
    node_count: int
    level_count: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "root": self.root,
            "fstree_version": self.fstree_version,
            "node_count": self.node_count,
            "level_count": self.level_count,
        }

    @classmethod
    def for_tree(cls, tree: FileSystemTree) -> ExportMetadata:
        return cls(
            timestamp=datetime.now(UTC).isoformat(),
            root=tree.root.path,
            fstree_version=__version__,
            node_count=len(tree),
            level_count=tree.level_count,
        )


def node_to_dict(node: FileSystemNode) -> dict[str, Any]:
    """Convert a node projection to a dictionary.

    Args:
        node: Projection to convert (attached or detached).

    Returns:
        Dictionary with name, path, type, level, position and
        unauthorized_children.
    """
    return {
        "name": node.name,
        "path": node.path,
        "type": node.kind.value,
        "level": node.level,
        "position": node.position,
        "unauthorized_children": node.unauthorized_children,
    }


def tree_to_dict(tree: FileSystemTree) -> dict[str, Any]:
    """Convert a tree to a dictionary of metadata and per-level nodes.

    Level keys are strings so the result maps directly onto JSON.
    """
    levels: dict[str, list[dict[str, Any]]] = {}
    for level in range(tree.level_count):
        nodes = tree.nodes_at_level(level) or []
        levels[str(level)] = [node_to_dict(node) for node in nodes]

    return {
        "metadata": ExportMetadata.for_tree(tree).to_dict(),
        "levels": levels,
    }


def tree_to_json(tree: FileSystemTree, *, indent: int | None = 2) -> str:
    return json.dumps(tree_to_dict(tree), indent=indent)


def export_tree(tree: FileSystemTree, path: Path) -> Path:
    """Write a tree to a JSON file.

    The file is written atomically through a temporary file in the same
    directory.

    Args:
        tree: Tree to export.
        path: Destination file.

    Returns:
        Path where the export was written.

    Raises:
        OSError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = tree_to_json(tree)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(content)
            f.write("\n")
        os.replace(tmp_path, path)
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise

    return path
