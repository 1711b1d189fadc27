"""
Core logic for rmview.

Listing, ordering, removal and the interaction controller. Nothing here
imports the terminal UI, so every piece can be driven from tests.

Created: 2026-10-19
"""

from rmview.core.exceptions import (
    RmviewError,
    ListingError,
    RemovalError,
    DirectoryNotEmptyError,
    UnsupportedEntryError,
    ForcedDeleteError,
    ConfigurationError,
)

__all__ = [
    "RmviewError",
    "ListingError",
    "RemovalError",
    "DirectoryNotEmptyError",
    "UnsupportedEntryError",
    "ForcedDeleteError",
    "ConfigurationError",
]
