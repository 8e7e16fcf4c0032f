"""Save/load protocol: Writer/Reader bases and the default params strategy."""

from .base import Readable, Reader, Writable, Writer
from .default import (
    DefaultParamsReadable,
    DefaultParamsReader,
    DefaultParamsWritable,
    DefaultParamsWriter,
    get_and_set_params,
    load_metadata,
    save_metadata,
)
from .metadata import METADATA_DIRNAME, build_metadata, metadata_path, parse_metadata, render_metadata

__all__ = [
    "Readable",
    "Reader",
    "Writable",
    "Writer",
    "DefaultParamsReadable",
    "DefaultParamsReader",
    "DefaultParamsWritable",
    "DefaultParamsWriter",
    "get_and_set_params",
    "load_metadata",
    "save_metadata",
    "METADATA_DIRNAME",
    "build_metadata",
    "metadata_path",
    "parse_metadata",
    "render_metadata",
]
