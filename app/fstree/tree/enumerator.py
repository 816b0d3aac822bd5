"""Filesystem enumeration used to populate a tree.

The tree only needs one primitive from the filesystem: given a
directory, list its immediate sub-directories and files. Access denied
is signalled with ``PermissionError``; any other ``OSError`` propagates.
"""

import logging
from pathlib import Path
from typing import Protocol

from fstree.tree.models import EntryRef

logger = logging.getLogger(__name__)


class ChildEnumerator(Protocol):
    """Lists the immediate children of a directory entry."""

    def enumerate_children(self, entry: EntryRef) -> tuple[list[EntryRef], list[EntryRef]]:
        """Return ``(subdirectories, files)`` of a directory.

        Raises:
            PermissionError: If listing the directory is denied.
            OSError: For any other failure.
        """
        ...


class PathEnumerator:
    """Enumerates directories with :mod:`pathlib`.

    Entries are sorted by name. Symbolic links are reported as files and
    never descended into, which keeps the traversal acyclic.

    Args:
        show_hidden: If False, skip entries whose name starts with a dot.
    """

    def __init__(self, *, show_hidden: bool = True) -> None:
        self._show_hidden = show_hidden

    def enumerate_children(self, entry: EntryRef) -> tuple[list[EntryRef], list[EntryRef]]:
        """List the sub-directories and files of ``entry``.

        Args:
            entry: Directory to list.

        Returns:
            Tuple of (subdirectories, files), each sorted by name.

        Raises:
            PermissionError: If the directory cannot be listed.
            OSError: If the directory is missing or unreadable.
        """
        directories: list[EntryRef] = []
        files: list[EntryRef] = []

        for child in sorted(Path(entry.path).iterdir()):
            if not self._show_hidden and child.name.startswith("."):
                continue
            ref = EntryRef.from_path(child)
            (directories if ref.is_directory else files).append(ref)

        logger.debug(
            "Enumerated %s: %d directories, %d files", entry.path, len(directories), len(files)
        )
        return directories, files
