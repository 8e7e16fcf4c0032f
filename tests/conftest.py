from __future__ import annotations

import pytest

from paramstore.io.storage import FileSystemStorageBackend, InMemoryStorageBackend
from paramstore.runtime import PersistenceContext, reset_default_context


@pytest.fixture(autouse=True)
def _isolated_default_context(monkeypatch):
    # Never let a test pick up a default context built by another test or the shell env.
    for var in ("PARAMSTORE_BACKEND", "PARAMSTORE_BASE_DIR", "PARAMSTORE_FORMAT_VERSION"):
        monkeypatch.delenv(var, raising=False)
    reset_default_context()
    yield
    reset_default_context()


@pytest.fixture()
def memory_ctx() -> PersistenceContext:
    return PersistenceContext(backend=InMemoryStorageBackend(), version="test-1")


@pytest.fixture()
def fs_ctx(tmp_path) -> PersistenceContext:
    return PersistenceContext(backend=FileSystemStorageBackend(tmp_path), version="test-1")


@pytest.fixture(params=["memory", "filesystem"])
def any_ctx(request, tmp_path) -> PersistenceContext:
    if request.param == "memory":
        backend = InMemoryStorageBackend()
    else:
        backend = FileSystemStorageBackend(tmp_path)
    return PersistenceContext(backend=backend, version="test-1")
