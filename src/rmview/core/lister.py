"""
Directory listing for rmview.

Reads the listed directory itself plus its direct children. There is no
cache: every call goes back to the filesystem.

Created: 2026-10-19
"""

import logging
import os
from pathlib import Path
from typing import List

from rmview.core.exceptions import ListingError
from rmview.core.models import Entry, EntryKind


logger = logging.getLogger(__name__)


def entry_kind(dir_entry: os.DirEntry) -> EntryKind:
    """Classify a scandir entry without following symlinks."""
    if dir_entry.is_symlink():
        return EntryKind.OTHER
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


class DirectoryLister:
    """Produces the depth 0 and depth 1 entries of a directory."""

    def list(self, directory: Path) -> List[Entry]:
        """
        List ``directory`` and its immediate children.

        Args:
            directory: Directory to enumerate

        Returns:
            Unordered entries, the self-entry included

        Raises:
            ListingError: If the directory or any child cannot be read
        """
        entries = [Entry.self_entry(directory)]
        try:
            with os.scandir(directory) as it:
                for dir_entry in it:
                    entries.append(
                        Entry(
                            name=dir_entry.name,
                            path=directory / dir_entry.name,
                            kind=entry_kind(dir_entry),
                        )
                    )
        except OSError as e:
            logger.error(f"Listing {directory} failed: {e}")
            raise ListingError(directory, e) from e

        logger.debug(f"Listed {len(entries) - 1} entries in {directory}")
        return entries
