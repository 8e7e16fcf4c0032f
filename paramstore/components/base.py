from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar, Dict, Optional

import numpy as np

from paramstore.io.readwrite.default import DefaultParamsReadable, DefaultParamsWritable
from paramstore.params.base import Params


class ConfigComponent(Params, DefaultParamsWritable, DefaultParamsReadable):
    """A persistable component whose whole state is its configuration.

    Subclasses declare params, list their defaults in ``defaults`` and expose
    the configured sklearn transformer so a Pipeline can use it directly.
    """

    defaults: ClassVar[Dict[str, Any]] = {}

    def __init__(self, uid: Optional[str] = None, **kwargs: Any):
        super().__init__(uid)
        self._set_default(**self.defaults)
        self.set_params(**kwargs)

    @abstractmethod
    def make_transformer(self) -> Any:
        ...

    def transform(self, X: Any) -> np.ndarray:
        """Fit the configured transformer on ``X`` and return the result."""
        return np.asarray(self.make_transformer().fit_transform(np.asarray(X, dtype=float)))
