"""Typed contracts for the persistence envelope (the ``metadata`` manifest).

``MetadataDict`` is the wire shape produced on save; :class:`Metadata` is the
validated view produced on load. Unknown top-level keys are ignored so newer
writers stay readable.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple, TypedDict

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr

MetadataDict = TypedDict(
    "MetadataDict",
    {
        "class": str,
        "timestamp": int,
        "formatVersion": str,
        "uid": str,
        "fields": Dict[str, Any],
    },
)


class Metadata(BaseModel):
    """Everything read from a manifest.

    ``params`` holds field values as parsed JSON; ``metadata_str`` is the raw
    manifest text, kept for error messages.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    class_name: StrictStr = Field(validation_alias="class")
    uid: StrictStr
    timestamp: StrictInt
    format_version: str = Field(
        default="",
        validation_alias=AliasChoices("formatVersion", "sparkVersion"),
    )
    params: Dict[str, Any] = Field(validation_alias=AliasChoices("fields", "paramMap"))
    metadata_str: str = Field(default="", exclude=True)

    def params_json(self) -> List[Tuple[str, str]]:
        """Return ``(field name, compact JSON text)`` pairs in manifest order."""
        return [
            (name, json.dumps(value, separators=(",", ":"), ensure_ascii=False))
            for name, value in self.params.items()
        ]
