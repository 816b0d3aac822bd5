"""Level-indexed file tree engine.

This module provides the tree itself, its node projections, the
filesystem enumerator it is built from, navigation helpers and JSON
export.
"""

from fstree.tree.enumerator import ChildEnumerator, PathEnumerator
from fstree.tree.errors import (
    EntryTypeError,
    FileTreeError,
    NodeOwnershipError,
    OperationCancelledError,
    TreeRangeError,
)
from fstree.tree.models import EntryKind, EntryRef, FileSystemNode
from fstree.tree.navigation import (
    get_all_children,
    get_all_parent,
    get_parent,
    get_top_parent,
    is_root,
)
from fstree.tree.serialization import export_tree, node_to_dict, tree_to_dict, tree_to_json
from fstree.tree.tree import FileSystemTree

__all__ = [
    "ChildEnumerator",
    "EntryKind",
    "EntryRef",
    "EntryTypeError",
    "FileSystemNode",
    "FileSystemTree",
    "FileTreeError",
    "NodeOwnershipError",
    "OperationCancelledError",
    "PathEnumerator",
    "TreeRangeError",
    "export_tree",
    "get_all_children",
    "get_all_parent",
    "get_parent",
    "get_top_parent",
    "is_root",
    "node_to_dict",
    "tree_to_dict",
    "tree_to_json",
]
