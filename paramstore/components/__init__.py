"""Built-in persistable components.

This package is imported for side-effects by
:mod:`paramstore.registries.persistables`, which is how the built-in types get
registered before the first load.

To add a component:
    1) subclass ConfigComponent and declare its params
    2) register it via register_persistable
"""

from .base import ConfigComponent
from .features import Binarizer, PolynomialExpansion, VectorSlicer
from .scaling import ElementwiseProduct, LinearScaler, StandardScaling

__all__ = [
    "ConfigComponent",
    "Binarizer",
    "ElementwiseProduct",
    "LinearScaler",
    "PolynomialExpansion",
    "StandardScaling",
    "VectorSlicer",
]
