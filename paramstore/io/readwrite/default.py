"""Default (configuration-only) persistence strategy.

Works for any :class:`~paramstore.params.base.Params` whose whole persisted
state is its field values: the manifest is the only thing written. Types with
bulk data (fitted coefficients, arrays learned from data) need their own
Writer/Reader.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from paramstore.contracts.metadata import Metadata
from paramstore.exceptions import MalformedMetadataError, NotFoundError
from paramstore.params.base import Params
from paramstore.registries.persistables import persistable_name, resolve_persistable
from paramstore.runtime.context import PersistenceContext

from .base import Readable, Reader, Writable, Writer
from .metadata import build_metadata, metadata_path, parse_metadata, render_metadata

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Params)


def save_metadata(instance: Params, path: str, ctx: PersistenceContext) -> str:
    """Write the manifest for ``instance`` to ``path/metadata``; return its text."""

    text = render_metadata(build_metadata(instance, ctx.version))
    ctx.backend.write_blob(metadata_path(path), text)
    logger.debug("Saved metadata for %s to %s", instance.uid, path)
    return text


def load_metadata(
    path: str,
    ctx: PersistenceContext,
    expected_class_name: Optional[str] = None,
) -> Metadata:
    """Read and parse the manifest stored under ``path``."""

    try:
        text = ctx.backend.read_first_blob(metadata_path(path))
    except FileNotFoundError as exc:
        raise NotFoundError(f"No metadata found at {path}") from exc
    return parse_metadata(text, expected_class_name)


def get_and_set_params(instance: Params, metadata: Metadata) -> None:
    """Decode every stored field with its own codec and set it on ``instance``."""

    for name, text in metadata.params_json():
        param = instance.get_param(name)
        instance.set(param, param.json_decode(text))


class DefaultParamsWriter(Writer):
    def __init__(self, instance: Params):
        super().__init__()
        self.instance = instance

    def save_impl(self, path: str) -> None:
        save_metadata(self.instance, path, self.ctx)


class DefaultParamsReader(Reader[P]):
    """Rebuild an instance of whatever type the manifest names.

    If ``expected_class_name`` is given the manifest must agree with it.
    """

    def __init__(self, expected_class_name: Optional[str] = None):
        super().__init__()
        self.expected_class_name = expected_class_name

    def load(self, path: str) -> P:
        metadata = load_metadata(path, self.ctx, self.expected_class_name)
        cls = resolve_persistable(metadata.class_name)
        if not (isinstance(cls, type) and issubclass(cls, Params)):
            raise MalformedMetadataError(f"{metadata.class_name} is not a Params type")

        instance = cls(metadata.uid)
        get_and_set_params(instance, metadata)
        logger.debug("Loaded %s %s from %s", metadata.class_name, metadata.uid, path)
        return instance


class DefaultParamsWritable(Writable):
    """Mixin giving a Params type the default writer."""

    def write(self) -> DefaultParamsWriter:
        return DefaultParamsWriter(self)


class DefaultParamsReadable(Readable[P]):
    """Mixin giving a Params type the default reader, checking its class name."""

    @classmethod
    def read(cls) -> DefaultParamsReader[P]:
        return DefaultParamsReader(expected_class_name=persistable_name(cls))
