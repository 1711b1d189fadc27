"""
Ordering and prefix filtering of directory entries.

Both functions are pure: same inputs, same output, no filesystem access.

Created: 2026-10-19
"""

from pathlib import Path
from typing import Iterable, List, Tuple

from rmview.core.models import Entry, SELF_ENTRY_NAME


def _sort_key(entry: Entry, directory: Path) -> Tuple[int, int, str]:
    if entry.path == directory:
        return (0, 0, "")
    return (1, 0 if entry.is_dir else 1, entry.name)


def order_entries(entries: Iterable[Entry], directory: Path) -> List[Entry]:
    """
    Order entries for display.

    The entry whose path equals ``directory`` comes first, then
    directories, then files and everything else. Names compare
    case-sensitively within each bucket.
    """
    return sorted(entries, key=lambda entry: _sort_key(entry, directory))


def filter_entries(
    entries: Iterable[Entry], filter_text: str, directory: Path
) -> List[Entry]:
    """
    Keep entries whose name starts with ``filter_text``.

    The match is a literal, case-sensitive prefix. The self-entry is kept
    only for an empty filter or the exact text ".".
    """
    kept = []
    for entry in entries:
        if entry.path == directory:
            if filter_text in ("", SELF_ENTRY_NAME):
                kept.append(entry)
        elif entry.name.startswith(filter_text):
            kept.append(entry)
    return kept


def order_and_filter(
    entries: Iterable[Entry], filter_text: str, directory: Path
) -> List[Entry]:
    """Ordered, filtered display sequence."""
    return filter_entries(order_entries(entries, directory), filter_text, directory)
