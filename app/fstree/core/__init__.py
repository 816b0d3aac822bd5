"""Configuration, paths and theming for fstree."""
