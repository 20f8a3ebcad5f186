"""Container facade.

`Container` owns a type registry, one typed store per registered kind and the
call-name dispatch table. It initializes lazily: the first public operation
pulls descriptors from the config provider, normalizes them and registers
them, after which configuration is frozen.

Example:

```python
container = Container([
    {"allowed_type": Post, "singular_name": "post", "plural_name": "posts"},
])
container.invoke("addPost", "p1", Post())
container.get_action("post", "p1")
```
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from .config import ProviderSource, resolve_provider
from .descriptor import Action, TypeDescriptor, normalize_descriptor
from .dispatch import CallTarget, Dispatcher
from .errors import ConfigError, TypeNotConfiguredError
from .registry import TypeRegistry
from .store import TypedStore

logger = logging.getLogger(__name__)


class Container:
    """Typed in-memory container with configuration-driven call names."""

    def __init__(self, config_provider: ProviderSource = None) -> None:
        self._provider = resolve_provider(config_provider)
        self._initialized = False
        self._initializing = False
        self._registry = TypeRegistry()
        self._stores: dict[str, TypedStore] = {}
        self._dispatcher = Dispatcher()
        self._methods: dict[str, Callable[..., Any]] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Load descriptors from the provider and freeze the configuration.

        Every descriptor is normalized before any is registered, so a bad
        descriptor leaves the container exactly as it was. The container
        then stays uninitialized and the next call retries.

        Raises:
            ConfigError: If the provider calls back into this container
        """
        with self._lock:
            if self._initialized:
                return
            if self._initializing:
                raise ConfigError(
                    "Config provider re-entered the container during initialization"
                )

            self._initializing = True
            try:
                descriptors = [normalize_descriptor(raw) for raw in self._provider()]
            finally:
                self._initializing = False
            for descriptor in descriptors:
                self._register(descriptor)

            self._dispatcher = Dispatcher.from_descriptors(self._registry.all())
            handlers = self._action_handlers()
            self._methods = {}
            for name in self._dispatcher.names():
                bound = self._dispatcher.bind(name, handlers)
                if bound is not None:
                    self._methods[name] = bound

            self._initialized = True
            logger.debug(
                "Container initialized with types %s and %d call names",
                self._registry.names(),
                len(self._methods),
            )

    def ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def load_config(self, raw: Mapping[str, Any] | TypeDescriptor) -> None:
        """Register one descriptor ahead of initialization.

        Ignored once the container is initialized.
        """
        with self._lock:
            if self._initialized:
                logger.debug("Container already initialized; ignoring late type config")
                return
            self._register(normalize_descriptor(raw))

    def _register(self, descriptor: TypeDescriptor) -> None:
        self._registry.register(descriptor)
        self._stores[descriptor.singular_name] = TypedStore(descriptor)

    def _action_handlers(self) -> dict[Action, Callable[..., Any]]:
        return {
            Action.ADD: self.add_action,
            Action.GET: self.get_action,
            Action.DELETE: self.delete_action,
            Action.LIST: self.list_action,
        }

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_config(self) -> dict[str, TypeDescriptor]:
        """Return the registered descriptors keyed by singular name."""
        self.ensure_initialized()
        return self._registry.as_config()

    def resolve_call(self, name: str) -> CallTarget | None:
        """Return the (kind, action) a call name maps to, or None."""
        self.ensure_initialized()
        return self._dispatcher.resolve(name)

    def method(self, name: str) -> Callable[..., Any] | None:
        """Return the callable bound to a call name, or None."""
        self.ensure_initialized()
        return self._methods.get(name)

    def call_names(self) -> list[str]:
        self.ensure_initialized()
        return list(self._methods)

    def get_data(self) -> dict[str, dict[str, Any]]:
        """Return a snapshot of every store.

        Does not trigger initialization.
        """
        with self._lock:
            return {kind: store.list() for kind, store in self._stores.items()}

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _store_for(self, kind: str) -> TypedStore:
        store = self._stores.get(kind)
        if store is None:
            raise TypeNotConfiguredError(kind)
        return store

    def add_action(self, kind: str, entity_id: str, entity: Any) -> None:
        """Store an entity under an identifier.

        Raises:
            TypeNotConfiguredError: If the kind is not registered
            NotAllowedTypeError: If the entity fails the kind's type guard
        """
        self.ensure_initialized()
        with self._lock:
            self._store_for(kind).add(entity_id, entity)

    def get_action(self, kind: str, entity_id: str) -> Any | None:
        self.ensure_initialized()
        with self._lock:
            return self._store_for(kind).get(entity_id)

    def delete_action(self, kind: str, entity_id: str) -> None:
        self.ensure_initialized()
        with self._lock:
            self._store_for(kind).delete(entity_id)

    def list_action(self, kind: str) -> dict[str, Any]:
        self.ensure_initialized()
        with self._lock:
            return self._store_for(kind).list()

    def invoke(self, name: str, *args: Any) -> Any:
        """Run the action a call name resolves to.

        Unresolved names do nothing and return None. Once a name resolves,
        errors from the action propagate.
        """
        self.ensure_initialized()
        bound = self._methods.get(name)
        if bound is None:
            logger.debug("No type claims call name '%s'; nothing to do", name)
            return None
        return bound(*args)

    def __repr__(self) -> str:
        state = "initialized" if self._initialized else "uninitialized"
        return f"<Container {state} types={self._registry.names()}>"
