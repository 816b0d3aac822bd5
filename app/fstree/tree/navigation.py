"""Ancestor and descendant walks over node projections.

These helpers only rely on ``FileSystemNode.parent`` and
``FileSystemNode.children``, both of which are resolved through the
owning tree on every access.
"""

from collections import deque

from fstree.tree.errors import TreeRangeError
from fstree.tree.models import FileSystemNode


def _require_node(node: FileSystemNode | None) -> FileSystemNode:
    if node is None:
        msg = "node must not be None"
        raise TypeError(msg)
    return node


def is_root(node: FileSystemNode | None) -> bool:
    """Check if a node is the root of its tree.

    A detached or standalone node is never a root.

    Raises:
        TypeError: If node is None.
    """
    node = _require_node(node)
    if node.tree is None:
        return False
    return node.tree.root_node == node


def get_parent(node: FileSystemNode | None, levels: int) -> FileSystemNode | None:
    """Ascend a number of levels from a node.

    Args:
        node: Starting node.
        levels: Number of levels to ascend. 0 returns ``node`` itself.

    Returns:
        The ancestor, or None if the chain ends before ``levels`` steps.

    Raises:
        TypeError: If node is None.
        TreeRangeError: If levels is negative.
    """
    node = _require_node(node)
    if levels < 0:
        msg = f"levels must be >= 0, got {levels}"
        raise TreeRangeError(msg)
    if levels == 0:
        return node

    current = node.parent
    for _ in range(1, levels):
        if current is None:
            return None
        current = current.parent
    return current


def get_top_parent(node: FileSystemNode | None) -> FileSystemNode | None:
    """Get the topmost ancestor of a node.

    Returns:
        The root the node hangs from, or None if the node has no parent
        (including when it is the root itself).

    Raises:
        TypeError: If node is None.
    """
    node = _require_node(node)
    current = node.parent
    if current is None:
        return None
    while (above := current.parent) is not None:
        current = above
    return current


def get_all_parent(node: FileSystemNode | None) -> list[FileSystemNode] | None:
    """Get every ancestor, from the immediate parent up to the root.

    Returns:
        Ancestors nearest first, or None if the node has no parent.

    Raises:
        TypeError: If node is None.
    """
    node = _require_node(node)
    current = node.parent
    if current is None:
        return None
    ancestors: list[FileSystemNode] = []
    while current is not None:
        ancestors.append(current)
        current = current.parent
    return ancestors


def get_all_children(node: FileSystemNode | None) -> list[FileSystemNode] | None:
    """Get every descendant of a directory node.

    Descendants are returned level by level, in position order within
    each level.

    Returns:
        All descendants, or None if the node is not a directory or its
        children cannot be resolved (detached node).

    Raises:
        TypeError: If node is None.
    """
    node = _require_node(node)
    if not node.is_directory:
        return None
    children = node.children
    if children is None:
        return None

    descendants: list[FileSystemNode] = []
    queue: deque[FileSystemNode] = deque(children)
    while queue:
        current = queue.popleft()
        descendants.append(current)
        queue.extend(current.children or ())
    return descendants
