from __future__ import annotations

import copy as _copy
import uuid
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

from paramstore.exceptions import FieldDecodeError, UnknownFieldError

from .codecs import FieldCodec, JsonCodec

T = TypeVar("T")


def random_uid(prefix: str) -> str:
    """Return ``<prefix>_<12 hex chars>``."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class Param(Generic[T]):
    """A named, documented configuration field with its own codec.

    Params are declared as class attributes of a :class:`Params` subclass; the
    values live on each instance.
    """

    def __init__(
        self,
        name: str,
        doc: str = "",
        *,
        codec: Optional[FieldCodec] = None,
        validator: Optional[Callable[[Any], bool]] = None,
    ):
        self.name = name
        self.doc = doc
        self.codec: FieldCodec = codec if codec is not None else JsonCodec()
        self.validator = validator

    def validate(self, value: Any) -> None:
        """Reject values the codec cannot encode or the validator refuses."""
        try:
            self.codec.validate(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Field {self.name!r} given invalid value {value!r}: {exc}") from exc
        if self.validator is not None and not self.validator(value):
            raise ValueError(f"Field {self.name!r} given invalid value {value!r}")

    def json_encode(self, value: T) -> str:
        return self.codec.encode(value)

    def json_decode(self, text: str) -> T:
        try:
            value = self.codec.decode(text)
        except ValueError as exc:
            raise FieldDecodeError(self.name, text, str(exc)) from exc
        try:
            self.validate(value)
        except ValueError as exc:
            raise FieldDecodeError(self.name, text, str(exc)) from exc
        return value

    def values_equal(self, a: Any, b: Any) -> bool:
        return a == b

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


ParamRef = Union[Param, str]


class Params:
    """Base class for components with a uid and named configuration fields.

    Every subclass must be constructible from ``uid`` alone; that is what the
    default reader relies on when it rebuilds an instance from a manifest.
    """

    def __init__(self, uid: Optional[str] = None):
        self._uid = uid if uid is not None else random_uid(type(self).__name__)
        self._param_map: Dict[str, Any] = {}
        self._default_param_map: Dict[str, Any] = {}

    @property
    def uid(self) -> str:
        return self._uid

    # ------------------------------------------------------------------
    # Declared fields
    # ------------------------------------------------------------------

    @classmethod
    def declared_params(cls) -> List[Param]:
        found: Dict[str, Param] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Param):
                    found[value.name] = value
        return [found[k] for k in sorted(found)]

    @property
    def params(self) -> List[Param]:
        return self.declared_params()

    def has_param(self, name: str) -> bool:
        return any(p.name == name for p in self.params)

    def get_param(self, name: str) -> Param:
        for p in self.params:
            if p.name == name:
                return p
        raise UnknownFieldError(f"{type(self).__name__} {self.uid} has no field named {name!r}")

    def _resolve(self, param: ParamRef) -> Param:
        if isinstance(param, Param):
            # Make sure the param belongs to this instance's type.
            return self.get_param(param.name)
        return self.get_param(param)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def set(self, param: ParamRef, value: Any) -> "Params":
        p = self._resolve(param)
        p.validate(value)
        self._param_map[p.name] = value
        return self

    def set_params(self, **kwargs: Any) -> "Params":
        for name, value in kwargs.items():
            if value is not None:
                self.set(name, value)
        return self

    def _set_default(self, **kwargs: Any) -> "Params":
        for name, value in kwargs.items():
            p = self.get_param(name)
            p.validate(value)
            self._default_param_map[p.name] = value
        return self

    def is_set(self, param: ParamRef) -> bool:
        return self._resolve(param).name in self._param_map

    def has_default(self, param: ParamRef) -> bool:
        return self._resolve(param).name in self._default_param_map

    def is_defined(self, param: ParamRef) -> bool:
        return self.is_set(param) or self.has_default(param)

    def get_or_default(self, param: ParamRef) -> Any:
        p = self._resolve(param)
        if p.name in self._param_map:
            return self._param_map[p.name]
        if p.name in self._default_param_map:
            return self._default_param_map[p.name]
        raise KeyError(f"Field {p.name!r} has no value and no default")

    def get_default(self, param: ParamRef) -> Any:
        p = self._resolve(param)
        if p.name not in self._default_param_map:
            raise KeyError(f"Field {p.name!r} has no default value")
        return self._default_param_map[p.name]

    def clear(self, param: ParamRef) -> None:
        self._param_map.pop(self._resolve(param).name, None)

    def extract_param_map(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Return defaults overlaid by explicitly set values (and ``extra``)."""

        out = dict(self._default_param_map)
        out.update(self._param_map)
        for name, value in (extra or {}).items():
            out[self.get_param(name).name] = value
        return out

    def explain_param(self, param: ParamRef) -> str:
        p = self._resolve(param)
        values = []
        if self.has_default(p):
            values.append(f"default: {self._default_param_map[p.name]!r}")
        if self.is_set(p):
            values.append(f"current: {self._param_map[p.name]!r}")
        suffix = f" ({', '.join(values)})" if values else " (undefined)"
        return f"{p.name}: {p.doc}{suffix}"

    def explain_params(self) -> str:
        return "\n".join(self.explain_param(p) for p in self.params)

    def copy(self, extra: Optional[Dict[str, Any]] = None) -> "Params":
        """Return a new instance with the same uid and a copy of every value."""

        that = type(self)(self.uid)
        that._default_param_map = _copy.deepcopy(self._default_param_map)
        that._param_map = _copy.deepcopy(self._param_map)
        for name, value in (extra or {}).items():
            that.set(name, value)
        return that

    def __repr__(self) -> str:
        return f"{type(self).__name__}(uid={self.uid!r})"
