"""Call-name dispatch.

Configured call names (`addPost`, `insertPost`, ...) are resolved to the
kind and action they stand for. The lookup table is built once from the
registered descriptors instead of scanning them on every call.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .descriptor import Action, TypeDescriptor

logger = logging.getLogger(__name__)

ActionHandler = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class CallTarget:
    """The (kind, action) pair a call name resolves to."""

    kind: str
    action: Action


class Dispatcher:
    """Lookup table from call names to call targets."""

    def __init__(self, table: Mapping[str, CallTarget] | None = None) -> None:
        self._table: dict[str, CallTarget] = dict(table or {})

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[TypeDescriptor]) -> Dispatcher:
        """Build the table, keeping the first claim on each call name.

        Descriptors are scanned in the order given and each descriptor's
        active slots in action order, so the result matches a linear scan
        that stops at the first match.
        """
        table: dict[str, CallTarget] = {}
        for descriptor in descriptors:
            for action, name in descriptor.active_methods():
                existing = table.get(name)
                if existing is not None:
                    logger.warning(
                        "Call name '%s' for %s.%s is shadowed by %s.%s",
                        name,
                        descriptor.singular_name,
                        action.value,
                        existing.kind,
                        existing.action.value,
                    )
                    continue
                table[name] = CallTarget(kind=descriptor.singular_name, action=action)
        return cls(table)

    def resolve(self, name: str) -> CallTarget | None:
        """Return the target for a call name, or None when nothing claims it."""
        return self._table.get(name)

    def names(self) -> list[str]:
        return list(self._table.keys())

    def bind(
        self,
        name: str,
        handlers: Mapping[Action, ActionHandler],
    ) -> Callable[..., Any] | None:
        """Return a callable running the resolved action with its kind prepended."""
        target = self.resolve(name)
        if target is None:
            return None
        handler = handlers[target.action]
        kind = target.kind

        def bound(*args: Any) -> Any:
            return handler(kind, *args)

        bound.__name__ = name
        bound.__qualname__ = name
        return bound

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)
