from __future__ import annotations

from typing import Protocol


class StorageBackend(Protocol):
    """Path-addressable storage used to persist manifests.

    Paths are plain strings; how they map onto physical storage is up to the
    implementation. Errors are raised as ``OSError`` subclasses and are passed
    through the persistence layer unchanged (except ``FileNotFoundError`` on
    read, which becomes :class:`~paramstore.exceptions.NotFoundError`).
    """

    def exists(self, path: str) -> bool:
        """Return True if anything is stored at or below ``path``."""

    def delete_recursive(self, path: str) -> None:
        """Delete everything stored at or below ``path``."""

    def write_blob(self, path: str, text: str) -> None:
        """Write a single text record to ``path``; fail if ``path`` exists."""

    def read_first_blob(self, path: str) -> str:
        """Return the first text record stored at ``path``."""
