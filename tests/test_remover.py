"""
Tests for EntryRemover.

Created: 2026-10-19
"""

import errno
import os
import pytest

from rmview.core.exceptions import (
    DirectoryNotEmptyError,
    ForcedDeleteError,
    RemovalError,
    UnsupportedEntryError,
)
from rmview.core.models import Entry, EntryKind
from rmview.core.remover import EntryRemover, SymlinkPolicy


@pytest.fixture
def remover():
    return EntryRemover()


@pytest.fixture
def tree(tmp_path):
    """tree/x.txt, tree/sub/y.txt"""
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "x.txt").write_text("x")
    (root / "sub" / "y.txt").write_text("y")
    return root


class TestRemoveFile:
    """Test file removal."""

    def test_remove_file(self, remover, tmp_path):
        target = tmp_path / "a.txt"
        target.write_text("a")

        remover.remove_file(target)

        assert not target.exists()

    def test_remove_missing_file(self, remover, tmp_path):
        """Failures are wrapped with the path and reason."""
        target = tmp_path / "missing.txt"

        with pytest.raises(RemovalError) as exc_info:
            remover.remove_file(target)

        assert exc_info.value.path == target
        assert exc_info.value.reason == os.strerror(errno.ENOENT)


class TestRemoveDirectory:
    """Test non-recursive directory removal."""

    def test_remove_empty_directory(self, remover, tmp_path):
        target = tmp_path / "empty"
        target.mkdir()

        remover.remove_directory(target)

        assert not target.exists()

    def test_non_empty_directory(self, remover, tree):
        """Non-empty directories raise and are left untouched."""
        with pytest.raises(DirectoryNotEmptyError):
            remover.remove_directory(tree)

        assert (tree / "x.txt").exists()
        assert (tree / "sub" / "y.txt").exists()

    def test_other_failure(self, remover, tmp_path):
        """Errors other than non-empty are plain RemovalErrors."""
        with pytest.raises(RemovalError) as exc_info:
            remover.remove_directory(tmp_path / "missing")

        assert not isinstance(exc_info.value, DirectoryNotEmptyError)


class TestRemoveTree:
    """Test forced recursive removal."""

    def test_remove_tree_counts_entries(self, remover, tree):
        removed = remover.remove_tree(tree)

        assert removed == 4
        assert not tree.exists()

    def test_symlinks_inside_are_not_followed(self, remover, tree, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        os.symlink(outside, tree / "link-dir")
        os.symlink(outside / "keep.txt", tree / "link-file")

        remover.remove_tree(tree)

        assert not tree.exists()
        assert (outside / "keep.txt").read_text() == "keep"

    def test_partial_failure_reports_count(self, remover, tree, monkeypatch):
        """The walk stops at the first error and reports what it removed."""
        real_rmdir = os.rmdir

        def failing_rmdir(path, *args, **kwargs):
            if os.fspath(path) == os.fspath(tree):
                raise PermissionError(errno.EACCES, "Permission denied")
            return real_rmdir(path, *args, **kwargs)

        monkeypatch.setattr(os, "rmdir", failing_rmdir)

        with pytest.raises(ForcedDeleteError) as exc_info:
            remover.remove_tree(tree)

        assert exc_info.value.removed_count == 3
        assert exc_info.value.reason == "Permission denied"
        assert tree.exists()
        assert list(tree.iterdir()) == []


class TestRemoveOther:
    """Test symlink and special file removal."""

    def test_unlink_symlink_keeps_target(self, remover, tree, tmp_path):
        link = tmp_path / "link"
        os.symlink(tree, link)

        remover.remove_other(link)

        assert not os.path.lexists(link)
        assert (tree / "x.txt").exists()

    def test_reject_policy(self, tree, tmp_path):
        link = tmp_path / "link"
        os.symlink(tree, link)
        remover = EntryRemover(SymlinkPolicy.REJECT)

        with pytest.raises(UnsupportedEntryError):
            remover.remove_other(link)

        assert os.path.lexists(link)


class TestRemoveByKind:
    """Test remove() picking the strategy from the entry kind."""

    def test_file(self, remover, tmp_path):
        target = tmp_path / "f"
        target.write_text("")

        remover.remove(Entry(name="f", path=target, kind=EntryKind.FILE))

        assert not target.exists()

    def test_directory_is_not_recursive(self, remover, tree):
        with pytest.raises(DirectoryNotEmptyError):
            remover.remove(Entry(name="tree", path=tree, kind=EntryKind.DIRECTORY))

    def test_other(self, remover, tree, tmp_path):
        link = tmp_path / "link"
        os.symlink(tree, link)

        remover.remove(Entry(name="link", path=link, kind=EntryKind.OTHER))

        assert not os.path.lexists(link)
        assert tree.exists()
