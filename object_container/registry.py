"""Type registry.

The registry acts as a symbol table for entity kinds: normalized descriptors
are bound to their singular names in registration order, which is the order
the dispatcher scans when two kinds claim the same call name.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

from .descriptor import TypeDescriptor

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Ordered mapping of singular names to type descriptors."""

    def __init__(self) -> None:
        self._descriptors: dict[str, TypeDescriptor] = {}

    def register(self, descriptor: TypeDescriptor) -> None:
        """Bind a descriptor to its singular name.

        Re-registering a name replaces the earlier descriptor but keeps the
        kind's original position in the scan order.
        """
        name = descriptor.singular_name
        if name in self._descriptors:
            logger.warning("Type '%s' registered twice; the later descriptor wins", name)
        self._descriptors[name] = descriptor

    def describe(self, kind: str) -> TypeDescriptor | None:
        return self._descriptors.get(kind)

    def all(self) -> list[TypeDescriptor]:
        """Return descriptors in registration order."""
        return list(self._descriptors.values())

    def names(self) -> list[str]:
        return list(self._descriptors.keys())

    def as_config(self) -> dict[str, TypeDescriptor]:
        return dict(self._descriptors)

    def __contains__(self, kind: object) -> bool:
        return kind in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self.all())
