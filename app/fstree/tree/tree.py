"""Level-indexed file tree.

A :class:`FileSystemTree` is a one-shot snapshot of a directory subtree.
Nodes are stored in an arena keyed by level, each level holding an
ordered list of slots. A slot is emptied when its node is removed and the
lists are compacted before the removal returns, so that positions are
always ``0..count-1`` and no level is ever empty.

Internal nodes never leave this module; callers only see
:class:`~fstree.tree.models.FileSystemNode` projections built on demand.
Projections are matched back to internal nodes by entry identity (path)
within their level.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from fstree.tree.enumerator import ChildEnumerator, PathEnumerator
from fstree.tree.errors import (
    EntryTypeError,
    NodeOwnershipError,
    OperationCancelledError,
    TreeRangeError,
)
from fstree.tree.models import EntryKind, EntryRef, FileSystemNode

logger = logging.getLogger(__name__)


def _check_cancelled(cancel_event: threading.Event | None) -> None:
    """Raise OperationCancelledError if the cancel event is set."""
    if cancel_event is not None and cancel_event.is_set():
        msg = "Operation cancelled"
        raise OperationCancelledError(msg)


@dataclass(slots=True, eq=False)
class _Node:
    """Mutable tree-owned node.

    ``parent`` does not own its target: the arena owns every node, and a
    removal clears the link together with the arena slot.
    """

    entry: EntryRef
    level: int | None = 0
    parent: _Node | None = None
    position: int | None = 0
    unauthorized_children: bool = False
    children: list[_Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.level is not None and self.level < 0:
            msg = f"Level must be >= 0, got {self.level}"
            raise TreeRangeError(msg)
        if self.level and self.parent is None:
            msg = f"Node at level {self.level} requires a parent"
            raise ValueError(msg)

    def detach(self) -> None:
        """Strip tree linkage so projections report the node as removed."""
        self.level = None
        self.position = None
        self.parent = None

    def project(self, tree: FileSystemTree) -> FileSystemNode:
        attached = self.level is not None
        return FileSystemNode(
            entry=self.entry,
            level=self.level,
            position=self.position,
            unauthorized_children=self.unauthorized_children,
            tree=tree if attached else None,
        )


class FileSystemTree:
    """In-memory tree of every entry below a root directory.

    The tree is populated breadth-first at construction. Afterwards it
    can only shrink, through :meth:`remove_nodes`.

    Args:
        root: Root directory, as an EntryRef or a path.
        enumerator: Source of directory listings. Defaults to PathEnumerator.
        cancel_event: Checked at every level and per node while building.

    Raises:
        EntryTypeError: If ``root`` is not a directory entry.
        PermissionError: If the root directory cannot be listed.
        OSError: If any directory fails to list for another reason.
        OperationCancelledError: If ``cancel_event`` was set mid-build.
    """

    def __init__(
        self,
        root: EntryRef | str | os.PathLike[str],
        *,
        enumerator: ChildEnumerator | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        if not isinstance(root, EntryRef):
            root = EntryRef.directory(root)
        if root.kind is not EntryKind.DIRECTORY:
            msg = f"Tree root must be a directory: {root.path}"
            raise EntryTypeError(msg)

        self._root = root
        self._enumerator: ChildEnumerator = enumerator or PathEnumerator()
        self._levels: dict[int, list[_Node | None]] = {}
        self._by_path: dict[str, _Node] = {}

        self._build(cancel_event)
        self._update_positions(cancel_event)
        logger.debug(
            "Built tree for %s: %d nodes in %d levels", root.path, len(self), self.level_count
        )

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def root(self) -> EntryRef:
        return self._root

    @property
    def root_node(self) -> FileSystemNode | None:
        """Projection of the node at (0, 0)."""
        return self.node_at(0, 0)

    @property
    def level_count(self) -> int:
        """Number of non-empty levels."""
        return len(self._levels)

    def node_at(self, level: int, position: int) -> FileSystemNode | None:
        """Get the node at a coordinate.

        Args:
            level: Depth from the root.
            position: Rank within the level.

        Returns:
            Node projection, or None if the coordinate is out of range.

        Raises:
            TreeRangeError: If level or position is negative.
        """
        node = self._node_at(level, position)
        return node.project(self) if node is not None else None

    def nodes_at_level(self, level: int) -> list[FileSystemNode] | None:
        """Get every node of a level in position order.

        Returns:
            Node projections, or None if the level does not exist.

        Raises:
            TreeRangeError: If level is negative.
        """
        if level < 0:
            msg = f"Level must be >= 0, got {level}"
            raise TreeRangeError(msg)
        slots = self._levels.get(level)
        if slots is None:
            return None
        return [node.project(self) for node in slots if node is not None]

    def get_children(self, node: FileSystemNode) -> list[FileSystemNode] | None:
        """Get the immediate children of a node.

        Args:
            node: Projection obtained from this tree.

        Returns:
            Children in enumeration order (empty for files), or None if the
            node is no longer part of the tree.

        Raises:
            NodeOwnershipError: If ``node`` belongs to another tree.
        """
        self._require_owned(node)
        internal = self._find(node)
        if internal is None:
            return None
        return [child.project(self) for child in internal.children]

    def get_parent(self, node: FileSystemNode) -> FileSystemNode | None:
        """Get the parent of a node, resolved against the current tree state.

        Raises:
            NodeOwnershipError: If ``node`` belongs to another tree.
        """
        self._require_owned(node)
        internal = self._find(node)
        if internal is None or internal.parent is None:
            return None
        return internal.parent.project(self)

    def all(self) -> list[FileSystemNode]:
        """Get every node, level by level in position order."""
        return [
            node.project(self)
            for level in sorted(self._levels)
            for node in self._levels[level]
            if node is not None
        ]

    def __len__(self) -> int:
        return sum(1 for slots in self._levels.values() for node in slots if node is not None)

    def __iter__(self) -> Iterator[FileSystemNode]:
        return iter(self.all())

    def __getitem__(
        self, key: int | tuple[int, int]
    ) -> FileSystemNode | list[FileSystemNode] | None:
        if isinstance(key, tuple):
            level, position = key
            return self.node_at(level, position)
        return self.nodes_at_level(key)

    def __str__(self) -> str:
        lines: list[str] = []
        for level in sorted(self._levels):
            lines.append(str(level))
            for node in self._levels[level]:
                lines.append(f"\t{node.project(self)}" if node is not None else "\tNone")
        return "\n".join(lines)

    # =========================================================================
    # Removal
    # =========================================================================

    def remove_nodes(
        self,
        nodes: Iterable[FileSystemNode],
        *,
        cancel_event: threading.Event | None = None,
    ) -> list[FileSystemNode]:
        """Remove nodes from the tree, cascading into directories.

        A directory is removed together with every node below it. A
        requested node is skipped when its recorded coordinate no longer
        holds the same entry (already removed, or a stale projection).

        Args:
            nodes: Projections obtained from this tree.
            cancel_event: Checked per requested node and while compacting.

        Returns:
            Detached projections of every removed node, each requested
            directory followed by its descendants.

        Raises:
            NodeOwnershipError: If any node belongs to another tree.
                Nothing is removed in that case.
            OperationCancelledError: If ``cancel_event`` was set mid-way.
        """
        requested = list(nodes)
        foreign = [node for node in requested if node.tree is not self]
        if foreign:
            msg = f"Cannot remove {len(foreign)} node(s) that do not belong to this tree"
            raise NodeOwnershipError(msg)

        removed: list[FileSystemNode] = []
        for node in requested:
            _check_cancelled(cancel_event)
            target = self._resolve_slot(node)
            if target is None:
                logger.debug("Skipping stale or removed node: %s", node.path)
                continue

            batch = self._collect_subtree(target) if target.entry.is_directory else [target]
            for item in batch:
                self._detach(item)
                removed.append(item.project(self))

        self._compact(cancel_event)
        self._update_positions(cancel_event)
        logger.debug("Removed %d node(s), %d remaining", len(removed), len(self))
        return removed

    # =========================================================================
    # Construction helpers
    # =========================================================================

    def _build(self, cancel_event: threading.Event | None) -> None:
        """Populate the arena breadth-first, one level at a time."""
        root_node = _Node(self._root, level=0)
        self._levels[0] = [root_node]
        self._by_path[root_node.entry.path] = root_node

        level = 0
        while True:
            _check_cancelled(cancel_event)
            slots = self._levels.get(level)
            if not slots or all(
                node is not None and node.entry.is_file for node in slots
            ):
                return
            for node in slots:
                _check_cancelled(cancel_event)
                if node is not None and node.entry.is_directory:
                    self._expand(node)
            logger.debug("Expanded level %d (%d nodes)", level, len(slots))
            level += 1

    def _expand(self, node: _Node) -> None:
        """Enumerate a directory and append its children to the next level."""
        try:
            directories, files = self._enumerator.enumerate_children(node.entry)
        except PermissionError:
            if node.level == 0:
                raise
            logger.warning("Permission denied listing directory: %s", node.entry.path)
            node.unauthorized_children = True
            return

        child_level = (node.level or 0) + 1
        children = [_Node(entry, level=child_level, parent=node) for entry in (*directories, *files)]
        if not children:
            return
        node.children.extend(children)
        self._levels.setdefault(child_level, []).extend(children)
        for child in children:
            self._by_path[child.entry.path] = child

    def _update_positions(self, cancel_event: threading.Event | None) -> None:
        """Renumber every level from 0 and drop empty levels."""
        _check_cancelled(cancel_event)
        for slots in self._levels.values():
            _check_cancelled(cancel_event)
            for position, node in enumerate(slots):
                if node is not None:
                    node.position = position

        for level in [lvl for lvl, slots in self._levels.items() if not slots]:
            del self._levels[level]

    # =========================================================================
    # Lookup and removal helpers
    # =========================================================================

    def _require_owned(self, node: FileSystemNode) -> None:
        if node.tree is not self:
            msg = f"Node does not belong to this tree: {node.path}"
            raise NodeOwnershipError(msg)

    def _node_at(self, level: int, position: int) -> _Node | None:
        if level < 0:
            msg = f"Level must be >= 0, got {level}"
            raise TreeRangeError(msg)
        if position < 0:
            msg = f"Position must be >= 0, got {position}"
            raise TreeRangeError(msg)
        slots = self._levels.get(level)
        if slots is None or position >= len(slots):
            return None
        return slots[position]

    def _find(self, node: FileSystemNode) -> _Node | None:
        """Find the internal node with the same entry in the projection's level."""
        if node.level is None or node.level not in self._levels:
            return None
        internal = self._by_path.get(node.entry.path)
        if internal is None or internal.level != node.level:
            return None
        return internal

    def _resolve_slot(self, node: FileSystemNode) -> _Node | None:
        """Resolve a projection by its coordinate, checking the entry still matches."""
        if node.level is None or node.position is None:
            return None
        internal = self._node_at(node.level, node.position)
        if internal is None or internal.entry != node.entry:
            return None
        return internal

    @staticmethod
    def _collect_subtree(node: _Node) -> list[_Node]:
        """Collect a node and all its descendants without recursion."""
        collected = [node]
        stack = [node]
        while stack:
            current = stack.pop()
            collected.extend(current.children)
            stack.extend(child for child in current.children if child.entry.is_directory)
        return collected

    def _detach(self, node: _Node) -> None:
        """Unlink a node from its parent and empty its slot."""
        if node.parent is not None:
            node.parent.children.remove(node)
        if node.level is not None and node.position is not None:
            self._levels[node.level][node.position] = None
        self._by_path.pop(node.entry.path, None)
        node.detach()

    def _compact(self, cancel_event: threading.Event | None) -> None:
        """Drop emptied slots from every level."""
        for level, slots in self._levels.items():
            _check_cancelled(cancel_event)
            self._levels[level] = [node for node in slots if node is not None]
