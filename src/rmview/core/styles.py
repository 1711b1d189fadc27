"""
Style hints for rendered entries.

Only the classification lives here; colours are up to the display surface.

Created: 2026-10-19
"""

from enum import Enum

from rmview.core.models import Entry, EntryKind


class EntryStyle(Enum):
    SELF = "self"
    DIRECTORY = "directory"
    HIDDEN_DIRECTORY = "hidden-directory"
    FILE = "file"
    HIDDEN_FILE = "hidden-file"
    OTHER = "other"


def style_for(entry: Entry) -> EntryStyle:
    """Pick the style hint for one entry."""
    if entry.is_self:
        return EntryStyle.SELF
    if entry.kind is EntryKind.DIRECTORY:
        return EntryStyle.HIDDEN_DIRECTORY if entry.is_hidden else EntryStyle.DIRECTORY
    if entry.kind is EntryKind.OTHER:
        return EntryStyle.OTHER
    return EntryStyle.HIDDEN_FILE if entry.is_hidden else EntryStyle.FILE
