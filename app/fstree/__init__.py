"""fstree - level-indexed in-memory snapshot of a directory tree."""

__version__ = "0.1.0"
