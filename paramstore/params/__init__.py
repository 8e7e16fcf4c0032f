"""Configuration fields (:class:`Param`) and the instance base (:class:`Params`)."""

from .base import Param, Params, random_uid
from .codecs import FieldCodec, FloatCodec, JsonCodec, NumpyArrayCodec
from .types import (
    BoolParam,
    FloatArrayParam,
    FloatParam,
    IntArrayParam,
    IntParam,
    StringArrayParam,
    StringParam,
)

__all__ = [
    "Param",
    "Params",
    "random_uid",
    "FieldCodec",
    "FloatCodec",
    "JsonCodec",
    "NumpyArrayCodec",
    "BoolParam",
    "FloatArrayParam",
    "FloatParam",
    "IntArrayParam",
    "IntParam",
    "StringArrayParam",
    "StringParam",
]
