"""Persistence exception types.

Every error raised by save/load derives from :class:`PersistenceError` so callers
can catch the whole family, while the secondary builtin bases keep ordinary
``except FileExistsError`` / ``except ValueError`` handlers working.

None of these are retried internally. Storage I/O failures other than a missing
manifest are owned by the backend and propagate unchanged.
"""

from __future__ import annotations


class PersistenceError(Exception):
    """Base class for save/load failures."""


class AlreadyExistsError(PersistenceError, FileExistsError):
    """Raised when the save target exists and overwrite was not requested."""


class NotFoundError(PersistenceError, FileNotFoundError):
    """Raised when no manifest exists at the load target."""


class MalformedMetadataError(PersistenceError, ValueError):
    """Raised when a manifest is present but not a well-formed envelope."""


class UnknownClassError(MalformedMetadataError):
    """Raised when the manifest names a type that is not registered."""


class ClassMismatchError(PersistenceError, ValueError):
    """Raised when the manifest class disagrees with the expected class."""


class UnknownFieldError(PersistenceError, KeyError):
    """Raised when a field name is not declared on the target instance."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class FieldDecodeError(PersistenceError, ValueError):
    """Raised when a field codec rejects a stored value."""

    def __init__(self, field_name: str, text: str, reason: str = ""):
        self.field_name = field_name
        self.text = text
        msg = f"Cannot decode value {text!r} for field {field_name!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
