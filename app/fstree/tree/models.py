"""File tree domain models.

This module defines the entry reference handed out by the filesystem
enumerator and the immutable node projection that the tree exposes to
callers. Both compare by entry identity (the absolute path), never by
object identity or tree linkage.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from fstree.tree.errors import EntryTypeError

if TYPE_CHECKING:
    from fstree.tree.tree import FileSystemTree


class EntryKind(str, Enum):
    """Kind of filesystem entry.

    Attributes:
        DIRECTORY: Directory whose children are enumerated.
        FILE: Anything that is not descended into (regular files, links, ...).
    """

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True, slots=True, eq=False)
class EntryRef:
    """Reference to a single file or directory.

    Two references denote the same entry iff their paths are equal.

    Attributes:
        path: Absolute path of the entry.
        kind: Entry kind (file or directory).
        name: Base name of the entry. Derived from ``path`` when empty.
    """

    path: str
    kind: EntryKind
    name: str = field(default="")

    def __post_init__(self) -> None:
        """Validate the entry and fill in its name."""
        if not isinstance(self.kind, EntryKind):
            try:
                kind = EntryKind(self.kind)
            except ValueError:
                msg = f"Entry kind must be one of {[k.value for k in EntryKind]}, got {self.kind!r}"
                raise EntryTypeError(msg) from None
            object.__setattr__(self, "kind", kind)
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if not self.name:
            # The root of a filesystem has no base name
            object.__setattr__(self, "name", os.path.basename(self.path.rstrip(os.sep)) or self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryRef):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @classmethod
    def directory(cls, path: str | os.PathLike[str]) -> EntryRef:
        """Create a directory reference with an absolute, normalised path."""
        return cls(path=os.path.abspath(path), kind=EntryKind.DIRECTORY)

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> EntryRef:
        """Create a file reference with an absolute, normalised path."""
        return cls(path=os.path.abspath(path), kind=EntryKind.FILE)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> EntryRef:
        """Create a reference, inspecting the filesystem for its kind.

        Symbolic links are always file-kind so that traversal never
        follows them.

        Args:
            path: Path to the entry.

        Returns:
            EntryRef of the detected kind.
        """
        p = Path(path)
        if not p.is_symlink() and p.is_dir():
            return cls.directory(p)
        return cls.file(p)


@dataclass(frozen=True, slots=True, eq=False)
class FileSystemNode:
    """Read-only view of a node in a :class:`FileSystemTree`.

    Projections are snapshots: ``level`` and ``position`` are the values at
    the time the projection was made. A projection returned by a removal
    is detached, its ``level``, ``position`` and ``tree`` are ``None``.

    Equality uses the entry only, so a detached projection still equals a
    live projection of the same path.

    Attributes:
        entry: Referenced filesystem entry.
        level: Depth from the root (root = 0), None when detached.
        position: Rank within the level, None when detached.
        unauthorized_children: True if listing this directory was denied.
        tree: Owning tree, None when detached or standalone.
    """

    entry: EntryRef
    level: int | None = 0
    position: int | None = 0
    unauthorized_children: bool = False
    tree: FileSystemTree | None = field(default=None, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSystemNode):
            return NotImplemented
        return self.entry == other.entry

    def __hash__(self) -> int:
        return hash(self.entry)

    def __str__(self) -> str:
        return (
            f"Name: {self.name}, Type: {self.kind.value}, Level: {self.level}, "
            f"Position: {self.position}, Path: {self.path}, "
            f"UnauthorizedChildren: {self.unauthorized_children}"
        )

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def path(self) -> str:
        return self.entry.path

    @property
    def kind(self) -> EntryKind:
        return self.entry.kind

    @property
    def is_directory(self) -> bool:
        return self.entry.is_directory

    @property
    def is_file(self) -> bool:
        return self.entry.is_file

    @property
    def is_attached(self) -> bool:
        """Check if the node still belongs to a tree."""
        return self.tree is not None and self.level is not None

    @property
    def parent(self) -> FileSystemNode | None:
        """Parent projection, resolved through the tree on each access."""
        if self.tree is None:
            return None
        return self.tree.get_parent(self)

    @property
    def children(self) -> list[FileSystemNode] | None:
        """Immediate children, resolved through the tree on each access.

        Returns:
            Children in enumeration order, or None for a detached node.
        """
        if self.tree is None:
            return None
        return self.tree.get_children(self)
