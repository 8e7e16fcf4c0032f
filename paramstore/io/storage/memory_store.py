"""Process-local StorageBackend keeping blobs in a dict.

Useful for tests and for short-lived pipelines that never touch disk. Paths are
POSIX-normalized, and a "directory" exists whenever any blob lives below it.
"""

from __future__ import annotations

import posixpath
from threading import Lock
from typing import Dict, List


def _norm(path: str) -> str:
    return posixpath.normpath("/" + path.strip().lstrip("/"))


class InMemoryStorageBackend:
    def __init__(self):
        self._lock = Lock()
        self._blobs: Dict[str, str] = {}

    def _keys_under_locked(self, path: str) -> List[str]:
        prefix = path.rstrip("/") + "/"
        return [k for k in self._blobs if k == path or k.startswith(prefix)]

    def exists(self, path: str) -> bool:
        p = _norm(path)
        with self._lock:
            return bool(self._keys_under_locked(p))

    def delete_recursive(self, path: str) -> None:
        p = _norm(path)
        with self._lock:
            for k in self._keys_under_locked(p):
                del self._blobs[k]

    def write_blob(self, path: str, text: str) -> None:
        p = _norm(path)
        with self._lock:
            if self._keys_under_locked(p):
                raise FileExistsError(f"Output path {p} already exists")
            self._blobs[p] = text

    def read_first_blob(self, path: str) -> str:
        p = _norm(path)
        with self._lock:
            text = self._blobs.get(p)
        if text is None:
            raise FileNotFoundError(f"No data found at {p}")
        for line in text.splitlines():
            if line:
                return line
        raise FileNotFoundError(f"No records found at {p}")

    def paths(self) -> List[str]:
        with self._lock:
            return sorted(self._blobs)

    def clear(self) -> None:
        with self._lock:
            self._blobs.clear()
