"""
Filesystem removal for rmview.

Every failure is wrapped in a RemovalError subclass so the controller can
report it and carry on. Deletions are permanent.

Created: 2026-10-19
"""

import errno
import logging
import os
from enum import Enum
from pathlib import Path

from rmview.core.exceptions import (
    DirectoryNotEmptyError,
    ForcedDeleteError,
    RemovalError,
    UnsupportedEntryError,
)
from rmview.core.models import Entry, EntryKind


logger = logging.getLogger(__name__)

# rmdir reports a non-empty directory as ENOTEMPTY, or EEXIST on some systems
_NOT_EMPTY_ERRNOS = (errno.ENOTEMPTY, errno.EEXIST)


class SymlinkPolicy(Enum):
    """What to do with symlinks and special files."""

    UNLINK = "unlink"
    REJECT = "reject"


def _raise(error: OSError) -> None:
    raise error


class EntryRemover:
    """Removes files, directories and other entries."""

    def __init__(self, symlink_policy: SymlinkPolicy = SymlinkPolicy.UNLINK):
        self.symlink_policy = symlink_policy

    def remove(self, entry: Entry) -> None:
        """
        Remove an entry with the strategy its kind calls for.

        Directories are removed non-recursively; use remove_tree to force.

        Raises:
            DirectoryNotEmptyError: If a directory still has children
            UnsupportedEntryError: If the policy rejects the entry kind
            RemovalError: For any other filesystem failure
        """
        if entry.kind is EntryKind.FILE:
            self.remove_file(entry.path)
        elif entry.kind is EntryKind.DIRECTORY:
            self.remove_directory(entry.path)
        else:
            self.remove_other(entry.path)

    def remove_file(self, path: Path) -> None:
        try:
            os.remove(path)
        except OSError as e:
            logger.warning(f"Failed to remove file {path}: {e}")
            raise RemovalError(path, e) from e
        logger.info(f"Removed file {path}")

    def remove_directory(self, path: Path) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            if e.errno in _NOT_EMPTY_ERRNOS:
                logger.info(f"Directory {path} is not empty")
                raise DirectoryNotEmptyError(path, e) from e
            logger.warning(f"Failed to remove directory {path}: {e}")
            raise RemovalError(path, e) from e
        logger.info(f"Removed directory {path}")

    def remove_other(self, path: Path) -> None:
        """Unlink a symlink or special file itself, never its target."""
        if self.symlink_policy is SymlinkPolicy.REJECT:
            logger.warning(f"Refusing to remove {path}: unsupported entry kind")
            raise UnsupportedEntryError(path, ValueError("unsupported entry kind"))
        try:
            os.unlink(path)
        except OSError as e:
            logger.warning(f"Failed to remove {path}: {e}")
            raise RemovalError(path, e) from e
        logger.info(f"Unlinked {path}")

    def remove_tree(self, path: Path) -> int:
        """
        Remove a directory and everything below it.

        Walks bottom-up and stops at the first error. Symlinks inside the
        tree are unlinked, not followed.

        Args:
            path: Directory to remove

        Returns:
            Number of filesystem entries removed, ``path`` included

        Raises:
            ForcedDeleteError: On the first failure, with the count so far
        """
        removed = 0
        try:
            for root, dirnames, filenames in os.walk(path, topdown=False, onerror=_raise):
                for name in filenames:
                    os.unlink(os.path.join(root, name))
                    removed += 1
                for name in dirnames:
                    child = os.path.join(root, name)
                    if os.path.islink(child):
                        os.unlink(child)
                    else:
                        os.rmdir(child)
                    removed += 1
            os.rmdir(path)
            removed += 1
        except OSError as e:
            logger.warning(
                f"Forced removal of {path} stopped after {removed} entries: {e}"
            )
            raise ForcedDeleteError(path, e, removed_count=removed) from e

        logger.info(f"Removed directory tree {path} ({removed} entries)")
        return removed
