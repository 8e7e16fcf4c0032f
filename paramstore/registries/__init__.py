"""Registries.

Add a persistable type = register it; the reader stays closed for modification.
"""

from .persistables import (
    list_persistables,
    persistable_name,
    register_persistable,
    resolve_persistable,
    unregister_persistable,
)
