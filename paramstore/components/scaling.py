from __future__ import annotations

import math
from typing import Any

import numpy as np
from sklearn.preprocessing import FunctionTransformer, StandardScaler

from paramstore.params.types import BoolParam, FloatArrayParam, FloatParam
from paramstore.registries.persistables import register_persistable

from .base import ConfigComponent


def _scale(X: Any, scale: float) -> np.ndarray:
    return np.asarray(X, dtype=float) * scale


def _elementwise(X: Any, scaling_vec: np.ndarray) -> np.ndarray:
    X = np.asarray(X, dtype=float)
    if X.shape[-1] != scaling_vec.shape[0]:
        raise ValueError(
            f"scaling_vec has {scaling_vec.shape[0]} entries but input has {X.shape[-1]} features"
        )
    return X * scaling_vec


@register_persistable("LinearScaler")
class LinearScaler(ConfigComponent):
    """Multiply every value by a constant."""

    scale = FloatParam("scale", "multiplier applied to every value", validator=math.isfinite)

    defaults = {"scale": 1.0}

    def make_transformer(self) -> FunctionTransformer:
        return FunctionTransformer(
            _scale,
            kw_args={"scale": float(self.get_or_default(self.scale))},
            validate=True,
        )


@register_persistable("StandardScaling")
class StandardScaling(ConfigComponent):
    """Standardize features by removing the mean and scaling to unit variance."""

    with_mean = BoolParam("with_mean", "center the data before scaling")
    with_std = BoolParam("with_std", "scale the data to unit standard deviation")

    defaults = {"with_mean": False, "with_std": True}

    def make_transformer(self) -> StandardScaler:
        return StandardScaler(
            with_mean=self.get_or_default(self.with_mean),
            with_std=self.get_or_default(self.with_std),
        )


@register_persistable("ElementwiseProduct")
class ElementwiseProduct(ConfigComponent):
    """Multiply each feature column by the matching entry of a weight vector."""

    scaling_vec = FloatArrayParam("scaling_vec", "per-feature multipliers")

    def make_transformer(self) -> FunctionTransformer:
        vec = np.asarray(self.get_or_default(self.scaling_vec), dtype=float)
        return FunctionTransformer(_elementwise, kw_args={"scaling_vec": vec}, validate=True)
