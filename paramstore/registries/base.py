from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Callable, Dict, Generic, Iterable, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Minimal registry mapping keys to values.

    Typical usage:
        REG = Registry[str, type](_name="persistables")

        @REG.register("LinearScaler")
        class LinearScaler(...):
            ...

        cls = REG.get("LinearScaler")

    Re-registering the same value under a key is a no-op; registering a
    different value under a taken key raises ``ValueError``.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def register(self, key: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            with self._lock:
                current = self._items.get(key)
                if current is not None and current is not value:
                    raise ValueError(f"{self._name}: key {key!r} is already registered to {current!r}")
                self._items[key] = value
            return value

        return deco

    def unregister(self, key: K) -> None:
        with self._lock:
            self._items.pop(key, None)

    def get(self, key: K) -> V:
        if key not in self._items:
            raise KeyError(f"{self._name}: unknown key {key!r}")
        return self._items[key]

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def items(self) -> Iterable[tuple[K, V]]:
        return self._items.items()

    def __contains__(self, key: K) -> bool:  # pragma: no cover
        return key in self._items

    def __iter__(self) -> Iterator[K]:  # pragma: no cover
        return iter(self._items)
