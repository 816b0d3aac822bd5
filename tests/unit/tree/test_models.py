"""Tests for file tree domain models."""

import os
from pathlib import Path

import pytest
from fstree.tree.errors import EntryTypeError
from fstree.tree.models import EntryKind, EntryRef, FileSystemNode


class TestEntryKind:
    """Tests for EntryKind enum."""

    def test_entry_kind_values(self) -> None:
        """Verify both EntryKind values exist with correct string values."""
        assert EntryKind.DIRECTORY == "directory"
        assert EntryKind.FILE == "file"
        assert len(EntryKind) == 2

    def test_entry_kind_is_str_enum(self) -> None:
        """EntryKind values are usable as strings."""
        assert isinstance(EntryKind.FILE, str)


class TestEntryRef:
    """Tests for EntryRef frozen dataclass."""

    def test_name_derived_from_path(self) -> None:
        """Name defaults to the base name of the path."""
        entry = EntryRef(path="/srv/data/report.txt", kind=EntryKind.FILE)
        assert entry.name == "report.txt"

    def test_name_of_filesystem_root(self) -> None:
        """The filesystem root uses its path as name."""
        entry = EntryRef(path=os.sep, kind=EntryKind.DIRECTORY)
        assert entry.name == os.sep

    def test_explicit_name_kept(self) -> None:
        """An explicit name is not overwritten."""
        entry = EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY, name="data-root")
        assert entry.name == "data-root"

    def test_kind_string_coerced(self) -> None:
        """A valid kind string is converted to EntryKind."""
        entry = EntryRef(path="/srv/data", kind="directory")  # type: ignore[arg-type]
        assert entry.kind is EntryKind.DIRECTORY
        assert entry.is_directory is True
        assert entry.is_file is False

    def test_invalid_kind_rejected(self) -> None:
        """An unknown kind raises EntryTypeError."""
        with pytest.raises(EntryTypeError, match="Entry kind must be one of"):
            EntryRef(path="/srv/data", kind="symlink")  # type: ignore[arg-type]

    def test_invalid_kind_is_type_error(self) -> None:
        """EntryTypeError is also a TypeError."""
        with pytest.raises(TypeError):
            EntryRef(path="/srv/data", kind=42)  # type: ignore[arg-type]

    def test_empty_path_rejected(self) -> None:
        """Empty path string should raise ValueError."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            EntryRef(path="", kind=EntryKind.FILE)

    def test_equality_by_path(self) -> None:
        """References with the same path are equal regardless of name."""
        a = EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY, name="a")
        b = EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY, name="b")
        c = EntryRef(path="/srv/other", kind=EntryKind.DIRECTORY)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_frozen(self) -> None:
        """Verify immutability raises on assignment."""
        entry = EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY)
        with pytest.raises(AttributeError):
            entry.path = "/other"  # type: ignore[misc]

    def test_factories_make_paths_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """directory() and file() store absolute paths."""
        monkeypatch.chdir(tmp_path)
        assert EntryRef.directory("sub").path == str(Path.cwd() / "sub")
        assert EntryRef.file("a.txt").path == str(Path.cwd() / "a.txt")
        assert EntryRef.file("a.txt").kind is EntryKind.FILE

    def test_factories_normalise_paths(self, tmp_path: Path) -> None:
        """Different spellings of one path yield equal references."""
        spelled = EntryRef.directory(tmp_path / "a" / ".." / "b")
        assert spelled.path == str(tmp_path / "b")
        assert spelled == EntryRef.directory(tmp_path / "b")
        assert spelled.name == "b"
        assert EntryRef.file(f"{tmp_path}/./c.txt").path == str(tmp_path / "c.txt")

    def test_from_path_detects_kind(self, tmp_path: Path) -> None:
        """from_path() inspects the filesystem."""
        (tmp_path / "dir").mkdir()
        (tmp_path / "file.txt").write_text("x")

        assert EntryRef.from_path(tmp_path / "dir").kind is EntryKind.DIRECTORY
        assert EntryRef.from_path(tmp_path / "file.txt").kind is EntryKind.FILE

    def test_from_path_symlink_is_file(self, tmp_path: Path) -> None:
        """A symlink to a directory is file-kind."""
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target, target_is_directory=True)

        assert EntryRef.from_path(link).kind is EntryKind.FILE


class TestFileSystemNode:
    """Tests for FileSystemNode projections."""

    def test_standalone_node(self) -> None:
        """A node without a tree has no parent and no children."""
        node = FileSystemNode(EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY))
        assert node.tree is None
        assert node.parent is None
        assert node.children is None
        assert node.is_attached is False
        assert node.level == 0
        assert node.position == 0

    def test_entry_properties(self) -> None:
        """Name, path and kind are taken from the entry."""
        node = FileSystemNode(EntryRef(path="/srv/data/a.txt", kind=EntryKind.FILE), level=1)
        assert node.name == "a.txt"
        assert node.path == "/srv/data/a.txt"
        assert node.kind is EntryKind.FILE
        assert node.is_file is True
        assert node.is_directory is False

    def test_equality_by_entry(self) -> None:
        """Projections compare by entry only, not by coordinate."""
        entry = EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY)
        live = FileSystemNode(entry, level=2, position=5)
        detached = FileSystemNode(entry, level=None, position=None)
        other = FileSystemNode(EntryRef(path="/srv/other", kind=EntryKind.DIRECTORY))
        assert live == detached
        assert hash(live) == hash(detached)
        assert live != other

    def test_frozen(self) -> None:
        """Verify immutability raises on assignment."""
        node = FileSystemNode(EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY))
        with pytest.raises(AttributeError):
            node.level = 3  # type: ignore[misc]

    def test_str(self) -> None:
        """String form lists the view fields."""
        node = FileSystemNode(
            EntryRef(path="/srv/data", kind=EntryKind.DIRECTORY),
            unauthorized_children=True,
        )
        text = str(node)
        assert "Name: data" in text
        assert "Type: directory" in text
        assert "Level: 0" in text
        assert "Position: 0" in text
        assert "Path: /srv/data" in text
        assert "UnauthorizedChildren: True" in text
