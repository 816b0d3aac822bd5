"""Utility modules for fstree."""
