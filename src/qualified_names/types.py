from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.qualified_names.qualified_name import QualifiedName


class FieldLookup(Protocol):
    """Read-only access to optional string fields of a structured record, by key."""

    def get_text(self, key: str) -> str | None:
        """Return the field as a string, or None when missing or not a string."""
        ...


class PartitionDescriptor(Protocol):
    """Protocol for partition objects that carry their own qualified name."""

    name: QualifiedName
