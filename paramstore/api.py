"""Public paramstore API.

This module is the **stable public surface** for saving and loading:

    from paramstore.api import save_instance, load_instance

The underlying implementations live under :mod:`paramstore.io.readwrite`.
"""

from __future__ import annotations

from typing import Optional

from paramstore.contracts.metadata import Metadata
from paramstore.io.readwrite import (
    DefaultParamsReader,
    DefaultParamsWriter,
    Readable,
    Reader,
    Writable,
    Writer,
    load_metadata,
)
from paramstore.params.base import Params
from paramstore.runtime.context import PersistenceContext, resolve_context


def save_instance(
    instance: Params,
    path: str,
    *,
    overwrite: bool = False,
    context: Optional[PersistenceContext] = None,
) -> None:
    """Save ``instance`` to ``path`` with its own writer (or the default one)."""

    writer: Writer = instance.write() if isinstance(instance, Writable) else DefaultParamsWriter(instance)
    if context is not None:
        writer.context(context)
    if overwrite:
        writer.overwrite()
    writer.save(path)


def load_instance(
    path: str,
    *,
    expected_class_name: Optional[str] = None,
    context: Optional[PersistenceContext] = None,
) -> Params:
    """Load whatever instance is saved at ``path``."""

    reader: Reader = DefaultParamsReader(expected_class_name=expected_class_name)
    if context is not None:
        reader.context(context)
    return reader.load(path)


def read_metadata(
    path: str,
    *,
    expected_class_name: Optional[str] = None,
    context: Optional[PersistenceContext] = None,
) -> Metadata:
    """Return the parsed manifest at ``path`` without building an instance."""

    return load_metadata(path, resolve_context(context), expected_class_name)


__all__ = [
    "save_instance",
    "load_instance",
    "read_metadata",
    "Readable",
    "Reader",
    "Writable",
    "Writer",
    "PersistenceContext",
]
