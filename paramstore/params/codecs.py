"""Field codecs: encode a field value to JSON text and decode it back.

A codec is owned by the field (:class:`~paramstore.params.base.Param`), never by
the reader/writer, so adding a new field type needs no change to persistence.

Non-finite floats have no JSON literal; float codecs write them as the strings
``"NaN"``, ``"Inf"`` and ``"-Inf"`` and read those strings back.
"""

from __future__ import annotations

import math
from typing import Any, List, Literal, Protocol, Union

import numpy as np
from pydantic import TypeAdapter

NonFiniteToken = Literal["NaN", "Inf", "-Inf"]
JsonFloat = Union[float, NonFiniteToken]

_TOKEN_VALUES = {"NaN": math.nan, "Inf": math.inf, "-Inf": -math.inf}


def float_to_json(x: float) -> JsonFloat:
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Inf" if x > 0 else "-Inf"
    return x


def json_to_float(x: JsonFloat) -> float:
    if isinstance(x, str):
        return _TOKEN_VALUES[x]
    return float(x)


class FieldCodec(Protocol):
    def validate(self, value: Any) -> None:
        """Raise ValueError if ``value`` cannot be encoded by this codec."""
        ...

    def encode(self, value: Any) -> str:
        """Return the JSON text form of ``value``."""
        ...

    def decode(self, text: str) -> Any:
        """Parse JSON text back to a typed value; raise ValueError on reject."""
        ...


class JsonCodec:
    """pydantic-backed codec for any JSON-representable Python type.

    Validation and decoding run in strict mode, so ``"2"`` is not accepted for
    an ``int`` field and ``1`` is not accepted for a ``bool`` field.
    """

    def __init__(self, py_type: Any = Any):
        self.py_type = py_type
        self._adapter = TypeAdapter(py_type)

    def validate(self, value: Any) -> None:
        self._adapter.validate_python(value, strict=True)

    def encode(self, value: Any) -> str:
        return self._adapter.dump_json(value).decode("utf-8")

    def decode(self, text: str) -> Any:
        return self._adapter.validate_json(text, strict=True)

    def __repr__(self) -> str:
        return f"JsonCodec({getattr(self.py_type, '__name__', self.py_type)!s})"


class FloatCodec:
    """Codec for a single float, including NaN and the infinities."""

    def __init__(self):
        self._check = TypeAdapter(float)
        self._adapter = TypeAdapter(JsonFloat)

    def validate(self, value: Any) -> None:
        self._check.validate_python(value, strict=True)

    def encode(self, value: Any) -> str:
        return self._adapter.dump_json(float_to_json(value)).decode("utf-8")

    def decode(self, text: str) -> float:
        return json_to_float(self._adapter.validate_json(text, strict=True))

    def __repr__(self) -> str:
        return "FloatCodec()"


class NumpyArrayCodec:
    """Codec for 1-d numpy arrays stored as a JSON list."""

    def __init__(self, dtype: Any = float):
        self.dtype = np.dtype(dtype)
        self._integral = bool(np.issubdtype(self.dtype, np.integer))
        self._adapter = TypeAdapter(List[int] if self._integral else List[JsonFloat])

    def validate(self, value: Any) -> None:
        raw = np.asarray(value)
        if raw.ndim != 1:
            raise ValueError(f"Expected a 1-d array, got shape {raw.shape}")
        if raw.size == 0:
            return
        if raw.dtype == np.bool_ or not np.issubdtype(raw.dtype, np.number):
            raise ValueError(f"Expected numeric values, got dtype {raw.dtype}")
        if self._integral and not np.issubdtype(raw.dtype, np.integer):
            raise ValueError(f"Expected integer values, got dtype {raw.dtype}")

    def encode(self, value: Any) -> str:
        self.validate(value)
        arr = np.asarray(value, dtype=self.dtype)
        items = arr.tolist() if self._integral else [float_to_json(x) for x in arr.tolist()]
        return self._adapter.dump_json(items).decode("utf-8")

    def decode(self, text: str) -> np.ndarray:
        items = self._adapter.validate_json(text, strict=True)
        if not self._integral:
            items = [json_to_float(x) for x in items]
        return np.asarray(items, dtype=self.dtype)

    def __repr__(self) -> str:
        return f"NumpyArrayCodec({self.dtype.name})"
