"""
Custom exceptions for rmview.

Created: 2026-10-19
"""

from pathlib import Path


class RmviewError(Exception):
    """Base exception for all rmview errors."""

    pass


class ListingError(RmviewError):
    """Raised when the working directory cannot be enumerated.

    This is fatal: the application exits with status 1.
    """

    def __init__(self, directory: Path, cause: Exception):
        super().__init__(
            f"Failed to read entries from current directory with error {cause}"
        )
        self.directory = directory
        self.cause = cause


class RemovalError(RmviewError):
    """Raised when an entry could not be removed."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause

    @property
    def reason(self) -> str:
        """Underlying error text without the path prefix."""
        if isinstance(self.cause, OSError) and self.cause.strerror:
            return self.cause.strerror
        return str(self.cause)


class DirectoryNotEmptyError(RemovalError):
    """Raised when a non-recursive directory removal hits a non-empty directory."""

    pass


class UnsupportedEntryError(RemovalError):
    """Raised when the configured policy refuses to remove an entry kind."""

    pass


class ForcedDeleteError(RemovalError):
    """Raised when a recursive removal stops partway through."""

    def __init__(self, path: Path, cause: Exception, removed_count: int = 0):
        super().__init__(path, cause)
        self.removed_count = removed_count


class ConfigurationError(RmviewError):
    """Raised when configuration is invalid."""

    pass
