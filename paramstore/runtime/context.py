"""Execution context for save/load and the process-wide default.

The default context is built lazily on first use and torn down explicitly via
:func:`reset_default_context`. Writers and readers only ever read from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Optional

from paramstore.io.storage import FileSystemStorageBackend, InMemoryStorageBackend, StorageBackend

from .settings import PersistenceSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersistenceContext:
    """Handle used to reach the storage backend."""

    backend: StorageBackend
    version: str


def _package_version() -> str:
    from paramstore import __version__

    return __version__


def build_context(settings: Optional[PersistenceSettings] = None) -> PersistenceContext:
    s = settings if settings is not None else PersistenceSettings.from_env()
    backend: StorageBackend
    if s.backend == "memory":
        backend = InMemoryStorageBackend()
    else:
        backend = FileSystemStorageBackend(s.base_dir)
    return PersistenceContext(backend=backend, version=s.format_version or _package_version())


_lock = Lock()
_default_ctx: Optional[PersistenceContext] = None


def get_default_context() -> PersistenceContext:
    global _default_ctx
    with _lock:
        if _default_ctx is None:
            _default_ctx = build_context()
            logger.debug("Initialized default persistence context: %r", _default_ctx)
        return _default_ctx


def set_default_context(ctx: PersistenceContext) -> None:
    global _default_ctx
    with _lock:
        _default_ctx = ctx


def reset_default_context() -> None:
    global _default_ctx
    with _lock:
        _default_ctx = None


def resolve_context(ctx: Optional[PersistenceContext]) -> PersistenceContext:
    """Return ``ctx`` if provided, otherwise :func:`get_default_context`."""

    return ctx if ctx is not None else get_default_context()
