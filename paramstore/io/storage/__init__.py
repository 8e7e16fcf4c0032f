"""Storage backends used to physically read and write manifests."""

from .store import StorageBackend
from .filesystem_store import FileSystemStorageBackend, PART_FILE, SUCCESS_MARKER
from .memory_store import InMemoryStorageBackend

__all__ = [
    "StorageBackend",
    "FileSystemStorageBackend",
    "InMemoryStorageBackend",
    "PART_FILE",
    "SUCCESS_MARKER",
]
