"""Environment-driven settings for the default persistence context.

Variables
---------
PARAMSTORE_BACKEND         ``filesystem`` (default) or ``memory``
PARAMSTORE_BASE_DIR        root for relative paths on the filesystem backend
PARAMSTORE_FORMAT_VERSION  version string written into manifests
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel

BackendName = Literal["filesystem", "memory"]


class PersistenceSettings(BaseModel):
    backend: BackendName = "filesystem"
    base_dir: Optional[str] = None
    format_version: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PersistenceSettings":
        env = os.environ if environ is None else environ
        raw = {
            "backend": env.get("PARAMSTORE_BACKEND") or None,
            "base_dir": env.get("PARAMSTORE_BASE_DIR") or None,
            "format_version": env.get("PARAMSTORE_FORMAT_VERSION") or None,
        }
        return cls(**{k: v for k, v in raw.items() if v is not None})
