"""Exceptions raised by the file tree engine.

Only ``PermissionError`` raised while enumerating the children of a
non-root directory is absorbed into node state. Everything below aborts
the operation that raised it.
"""


class FileTreeError(Exception):
    """Base exception for file tree errors."""


class TreeRangeError(FileTreeError, ValueError):
    """Raised for a negative level, position or ascend count."""


class NodeOwnershipError(FileTreeError):
    """Raised when a node projection does not belong to the target tree."""


class EntryTypeError(FileTreeError, TypeError):
    """Raised when an entry is neither a file nor a directory."""


class OperationCancelledError(FileTreeError):
    """Raised when a construction or removal observes its cancel event.

    The tree that raised it is left partially updated and must be discarded.
    """
