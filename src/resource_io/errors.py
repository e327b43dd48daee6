"""Errors raised by resource I/O operations."""

from __future__ import annotations


class ResourceIOError(OSError):
    """Base class for errors specific to resource I/O."""


class ResourceNotFoundError(ResourceIOError, FileNotFoundError):
    """Raised when a bundled resource name has no matching entry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Bundled resource not found: {name}")
        self.name = name


class UnsupportedCopyOptionError(ResourceIOError, ValueError):
    """Raised when a copy option cannot be honored by the chosen operation."""
