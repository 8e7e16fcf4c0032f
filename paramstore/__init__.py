"""Top-level package for paramstore.

Save and reload configurable components without hand-written serialization:

    from paramstore.components import LinearScaler

    LinearScaler(scale=2.0).save("/models/a")
    scaler = LinearScaler.load("/models/a")

Lower-level entry points live in :mod:`paramstore.api`.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("paramstore")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
