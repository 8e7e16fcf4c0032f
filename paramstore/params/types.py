"""Typed param flavours for the common configuration value types."""

from __future__ import annotations

import math
from typing import Any, Callable, List, Optional

import numpy as np

from .base import Param
from .codecs import FloatCodec, JsonCodec, NumpyArrayCodec


class IntParam(Param[int]):
    def __init__(self, name: str, doc: str = "", *, validator: Optional[Callable[[Any], bool]] = None):
        super().__init__(name, doc, codec=JsonCodec(int), validator=validator)


class FloatParam(Param[float]):
    def __init__(self, name: str, doc: str = "", *, validator: Optional[Callable[[Any], bool]] = None):
        super().__init__(name, doc, codec=FloatCodec(), validator=validator)

    def values_equal(self, a: Any, b: Any) -> bool:
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        return a == b


class BoolParam(Param[bool]):
    def __init__(self, name: str, doc: str = ""):
        super().__init__(name, doc, codec=JsonCodec(bool))


class StringParam(Param[str]):
    def __init__(self, name: str, doc: str = "", *, validator: Optional[Callable[[Any], bool]] = None):
        super().__init__(name, doc, codec=JsonCodec(str), validator=validator)


class StringArrayParam(Param[List[str]]):
    def __init__(self, name: str, doc: str = ""):
        super().__init__(name, doc, codec=JsonCodec(List[str]))


class IntArrayParam(Param[np.ndarray]):
    def __init__(self, name: str, doc: str = "", *, validator: Optional[Callable[[Any], bool]] = None):
        super().__init__(name, doc, codec=NumpyArrayCodec(np.int64), validator=validator)

    def values_equal(self, a: Any, b: Any) -> bool:
        return bool(np.array_equal(np.asarray(a), np.asarray(b)))


class FloatArrayParam(Param[np.ndarray]):
    def __init__(self, name: str, doc: str = "", *, validator: Optional[Callable[[Any], bool]] = None):
        super().__init__(name, doc, codec=NumpyArrayCodec(np.float64), validator=validator)

    def values_equal(self, a: Any, b: Any) -> bool:
        return bool(np.array_equal(np.asarray(a, dtype=float), np.asarray(b, dtype=float), equal_nan=True))
