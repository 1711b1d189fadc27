"""
Core data models for rmview.

Entries are immutable snapshots of one listing; a changed directory
produces a new list rather than mutating entries in place.

Created: 2026-10-19
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


SELF_ENTRY_NAME = "."


class EntryKind(Enum):
    """Filesystem object type, decided without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class Focus(Enum):
    """Which widget receives keyboard input."""

    LIST = "list"
    FILTER = "filter"

    def toggled(self) -> "Focus":
        return Focus.FILTER if self is Focus.LIST else Focus.LIST


@dataclass(frozen=True)
class Entry:
    """
    One child of the listed directory, or the directory itself.

    The self-entry carries the label "." and the directory's own path.
    """

    name: str
    path: Path
    kind: EntryKind
    is_self: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_hidden(self) -> bool:
        return not self.is_self and self.name.startswith(".")

    @classmethod
    def self_entry(cls, directory: Path) -> "Entry":
        """Create the synthetic entry standing for ``directory`` itself."""
        return cls(
            name=SELF_ENTRY_NAME,
            path=directory,
            kind=EntryKind.DIRECTORY,
            is_self=True,
        )


@dataclass
class ViewState:
    """Mutable UI state owned by the interaction controller."""

    filter_text: str = ""
    selected_index: Optional[int] = None
    focus: Focus = Focus.LIST
