"""Build, render and parse the persistence envelope.

Wire form (one compact JSON object, one line):

{
  "class": "LinearScaler",
  "timestamp": 1760745600000,
  "formatVersion": "0.1.0",
  "uid": "LinearScaler_4f1c2ab09d7e",
  "fields": {"scale": 2.0}
}

Field values are the field codec's JSON text, embedded as JSON (not as a
quoted string). Readers also accept the legacy keys ``paramMap`` and
``sparkVersion``.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

from pydantic import ValidationError

from paramstore.contracts.metadata import Metadata, MetadataDict
from paramstore.exceptions import ClassMismatchError, MalformedMetadataError
from paramstore.params.base import Params
from paramstore.registries.persistables import persistable_name

METADATA_DIRNAME = "metadata"


def metadata_path(path: str) -> str:
    """Return the manifest location for an instance saved at ``path``."""
    return f"{path.rstrip('/')}/{METADATA_DIRNAME}"


def build_metadata(instance: Params, version: str) -> MetadataDict:
    """Return the envelope for ``instance``; a fresh dict on every call."""

    fields: Dict[str, Any] = {}
    for name, value in instance.extract_param_map().items():
        param = instance.get_param(name)
        fields[name] = json.loads(param.json_encode(value))

    return {
        "class": persistable_name(instance),
        "timestamp": int(time.time() * 1000),
        "formatVersion": version,
        "uid": instance.uid,
        "fields": fields,
    }


def render_metadata(metadata: MetadataDict) -> str:
    return json.dumps(metadata, separators=(",", ":"), ensure_ascii=False)


def parse_metadata(text: str, expected_class_name: Optional[str] = None) -> Metadata:
    """Parse manifest text and (optionally) check the recorded class name.

    Raises
    ------
    MalformedMetadataError
        If ``text`` is not a JSON object with the envelope keys.
    ClassMismatchError
        If ``expected_class_name`` is given and differs from the manifest.
    """

    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedMetadataError(f"Cannot recognize JSON metadata: {text}") from exc

    if not isinstance(obj, dict):
        raise MalformedMetadataError(f"Cannot recognize JSON metadata: {text}")

    try:
        metadata = Metadata.model_validate(obj)
    except ValidationError as exc:
        raise MalformedMetadataError(f"Cannot recognize JSON metadata: {text}\n{exc}") from exc

    metadata = metadata.model_copy(update={"metadata_str": text})

    if expected_class_name and metadata.class_name != expected_class_name:
        raise ClassMismatchError(
            f"Error loading metadata: Expected class name {expected_class_name}"
            f" but found class name {metadata.class_name}"
        )
    return metadata
