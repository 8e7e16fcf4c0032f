from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from paramstore.exceptions import AlreadyExistsError
from paramstore.runtime.context import PersistenceContext, resolve_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _BaseReadWrite:
    """Shared context handling for :class:`Writer` and :class:`Reader`."""

    def __init__(self):
        self._context: Optional[PersistenceContext] = None

    def context(self, ctx: PersistenceContext):
        """Use ``ctx`` instead of the process-wide default."""
        self._context = ctx
        return self

    @property
    def ctx(self) -> PersistenceContext:
        return resolve_context(self._context)


class Writer(_BaseReadWrite, ABC):
    """Saves an instance to a path, guarding existing content.

    Subclasses implement :meth:`save_impl`; :meth:`save` does the overwrite
    check first so every strategy shares it.
    """

    def __init__(self):
        super().__init__()
        self._should_overwrite = False

    @property
    def should_overwrite(self) -> bool:
        return self._should_overwrite

    def overwrite(self) -> "Writer":
        """Replace whatever already exists at the save path."""
        self._should_overwrite = True
        return self

    def save(self, path: str) -> None:
        """Save to ``path``.

        Raises
        ------
        AlreadyExistsError
            If ``path`` exists and :meth:`overwrite` was not called.
        """

        backend = self.ctx.backend
        if backend.exists(path):
            if not self._should_overwrite:
                raise AlreadyExistsError(
                    f"Path {path} already exists. "
                    "Please use write().overwrite().save(path) to overwrite it."
                )
            logger.info("Path %s already exists. It will be overwritten.", path)
            # Not atomic: if save_impl fails the old content is already gone.
            backend.delete_recursive(path)
        self.save_impl(path)

    @abstractmethod
    def save_impl(self, path: str) -> None:
        """Write the instance to ``path``, which is known not to exist."""


class Reader(_BaseReadWrite, ABC, Generic[T]):
    """Loads an instance from a path."""

    @abstractmethod
    def load(self, path: str) -> T:
        """Return the instance saved at ``path``."""


class Writable(ABC):
    """Mixin for types that provide a :class:`Writer`."""

    @abstractmethod
    def write(self) -> Writer:
        ...

    def save(self, path: str) -> None:
        """Shortcut for ``write().save(path)``."""
        self.write().save(path)


class Readable(ABC, Generic[T]):
    """Mixin for types that provide a :class:`Reader`."""

    @classmethod
    @abstractmethod
    def read(cls) -> Reader[T]:
        ...

    @classmethod
    def load(cls, path: str) -> T:
        """Shortcut for ``read().load(path)``."""
        return cls.read().load(path)
