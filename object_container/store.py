"""Per-kind entity storage."""
from __future__ import annotations

from typing import Any

from .descriptor import TypeDescriptor
from .errors import NotAllowedTypeError


class TypedStore:
    """Identifier-to-entity mapping for one kind, guarded by its descriptor.

    Identifiers carry no uniqueness constraint: adding under an existing
    identifier replaces the stored entity.
    """

    def __init__(self, descriptor: TypeDescriptor) -> None:
        self.descriptor = descriptor
        self._entries: dict[str, Any] = {}

    @property
    def kind(self) -> str:
        return self.descriptor.singular_name

    def add(self, entity_id: str, entity: Any) -> None:
        if not self.descriptor.accepts(entity):
            raise NotAllowedTypeError(
                self.kind,
                self.descriptor.allowed_type,
                type(entity),
            )
        self._entries[entity_id] = entity

    def get(self, entity_id: str) -> Any | None:
        return self._entries.get(entity_id)

    def delete(self, entity_id: str) -> None:
        self._entries.pop(entity_id, None)

    def list(self) -> dict[str, Any]:
        """Return a copy of the stored entities keyed by identifier."""
        return dict(self._entries)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
