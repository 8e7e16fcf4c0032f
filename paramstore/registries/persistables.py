"""Registry of persistable types: type name -> class constructible from a uid.

The default reader resolves the ``class`` entry of a manifest here instead of
doing runtime reflection. Types register themselves at import time:

    @register_persistable("LinearScaler")
    class LinearScaler(Params, DefaultParamsWritable, DefaultParamsReadable):
        ...

When no name is given the fully qualified ``module.QualName`` is used, which
also lets :func:`resolve_persistable` import the defining module on demand.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, Dict, List, Optional, Type

from paramstore.exceptions import UnknownClassError
from paramstore.registries.base import Registry

logger = logging.getLogger(__name__)

_PERSISTABLES: Registry[str, type] = Registry(_name="persistables")
_NAMES_BY_CLASS: Dict[type, str] = {}

_BUILTINS_LOADED = False


def default_type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def register_persistable(name: Optional[str] = None) -> Callable[[Type], Type]:
    """Class decorator registering ``cls`` under ``name`` (or its dotted path)."""

    def deco(cls: Type) -> Type:
        key = name or default_type_name(cls)
        _PERSISTABLES.register(key)(cls)
        _NAMES_BY_CLASS[cls] = key
        return cls

    return deco


def unregister_persistable(name: str) -> None:
    cls = _PERSISTABLES.try_get(name)
    _PERSISTABLES.unregister(name)
    if cls is not None:
        _NAMES_BY_CLASS.pop(cls, None)


def persistable_name(obj: Any) -> str:
    """Return the registered type name for a class or instance.

    Unregistered classes fall back to their dotted path; loading such a
    manifest later fails with :class:`UnknownClassError`.
    """

    cls = obj if isinstance(obj, type) else type(obj)
    return _NAMES_BY_CLASS.get(cls, default_type_name(cls))


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from paramstore import components as _  # noqa: F401

    _BUILTINS_LOADED = True


def resolve_persistable(name: str) -> type:
    """Return the class registered under ``name``."""

    _ensure_builtins()
    cls = _PERSISTABLES.try_get(name)
    if cls is None and "." in name:
        module_name = name.rsplit(".", 1)[0]
        try:
            importlib.import_module(module_name)
        except ImportError as exc:
            logger.debug("Could not import %s while resolving %s: %s", module_name, name, exc)
        cls = _PERSISTABLES.try_get(name)
    if cls is None:
        raise UnknownClassError(f"No persistable type registered under {name!r}")
    return cls


def list_persistables() -> List[str]:
    _ensure_builtins()
    return sorted(_PERSISTABLES.keys())
