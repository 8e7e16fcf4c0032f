"""Runtime-only state: settings and the default persistence context."""

from .settings import PersistenceSettings
from .context import (
    PersistenceContext,
    build_context,
    get_default_context,
    reset_default_context,
    resolve_context,
    set_default_context,
)
