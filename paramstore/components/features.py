from __future__ import annotations

from typing import Any

import numpy as np
from sklearn.preprocessing import Binarizer as _SkBinarizer
from sklearn.preprocessing import FunctionTransformer, PolynomialFeatures

from paramstore.params.types import FloatParam, IntArrayParam, IntParam
from paramstore.registries.persistables import register_persistable

from .base import ConfigComponent


def _valid_indices(value: Any) -> bool:
    arr = np.asarray(value)
    return arr.ndim == 1 and bool(np.all(arr >= 0)) and len(np.unique(arr)) == arr.shape[0]


def _select(X: Any, indices: np.ndarray) -> np.ndarray:
    return np.asarray(X)[:, indices]


@register_persistable("Binarizer")
class Binarizer(ConfigComponent):
    """Map values above ``threshold`` to 1.0 and the rest to 0.0."""

    threshold = FloatParam("threshold", "values greater than this become 1.0")

    defaults = {"threshold": 0.0}

    def make_transformer(self) -> _SkBinarizer:
        return _SkBinarizer(threshold=float(self.get_or_default(self.threshold)))


@register_persistable("PolynomialExpansion")
class PolynomialExpansion(ConfigComponent):
    """Expand features into their polynomial combinations."""

    degree = IntParam("degree", "the polynomial degree to expand, >= 1", validator=lambda d: d >= 1)

    defaults = {"degree": 2}

    def make_transformer(self) -> PolynomialFeatures:
        return PolynomialFeatures(degree=int(self.get_or_default(self.degree)), include_bias=False)


@register_persistable("VectorSlicer")
class VectorSlicer(ConfigComponent):
    """Keep only the feature columns listed in ``indices``."""

    indices = IntArrayParam("indices", "column indices to keep, unique and >= 0", validator=_valid_indices)

    defaults = {"indices": np.array([], dtype=np.int64)}

    def make_transformer(self) -> FunctionTransformer:
        idx = np.asarray(self.get_or_default(self.indices), dtype=np.int64)
        return FunctionTransformer(_select, kw_args={"indices": idx}, validate=True)
