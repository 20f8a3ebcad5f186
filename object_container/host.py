"""Host classes that expose a container's call names as attributes.

```python
class Blog(ContainerHost):
    def container_config(self):
        return [
            {"allowed_type": Post, "singular_name": "post", "plural_name": "posts"},
        ]

blog = Blog()
blog.addPost("p1", Post())
blog.getAllPosts()
```

The host holds a `Container` and forwards attribute lookups that miss on the
host itself. Names no kind claims raise AttributeError; use
`host.container.invoke(name, ...)` for the silent no-op behaviour.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .config import RawDescriptor
from .container import Container


class ContainerHost:
    """Base class giving a host object container behaviour by composition.

    Configured call names resolve as attributes. A name no kind claims
    (including a disabled action's default name) raises AttributeError
    rather than returning None; call `self.container.invoke(name, ...)`
    when an unresolved name should be a silent no-op.

    `container_config` must not call back into `self.container`; doing so
    raises ConfigError.
    """

    def container_config(self) -> Iterable[RawDescriptor]:
        """Return the raw type descriptors for this host's container."""
        return []

    @property
    def container(self) -> Container:
        try:
            return self.__dict__["_container"]
        except KeyError:
            container = Container(self.container_config)
            self.__dict__["_container"] = container
            return container

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        bound = self.container.method(name)
        if bound is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return bound
