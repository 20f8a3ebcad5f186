"""Type descriptor normalization.

A raw descriptor is the mapping a host supplies for one entity kind:

```yaml
allowed_type: blog.models.Post
singular_name: post
plural_name: posts
methods:          # optional
  add: insertPost
  get: false      # disabled: no call name reaches this action
  delete: removePost
  list: listAllPosts
```

When `methods` is omitted, call names are derived from the singular and
plural names (`addPost`, `getPost`, `deletePost`, `getAllPosts`). When it is
given, it is taken as-is: actions it does not list are disabled.
"""
from __future__ import annotations

import importlib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from .errors import (
    InvalidDescriptorError,
    MissingAllowedTypeError,
    MissingPluralNameError,
    MissingSingularNameError,
)


class Action(str, Enum):
    """Operations every kind supports."""

    ADD = "add"
    GET = "get"
    DELETE = "delete"
    LIST = "list"


# Dispatch scans slots in this order; earlier slots win ties.
ACTION_ORDER: tuple[Action, ...] = (Action.ADD, Action.GET, Action.DELETE, Action.LIST)

# Method-name value that leaves an action unreachable by call name.
DISABLED = False

EntityGuard = Callable[[Any], bool]

_MethodName = Union[Annotated[str, Field(min_length=1)], Literal[False], None]
_METHOD_NAMES_ADAPTER = TypeAdapter(dict[Action, _MethodName])


@dataclass(frozen=True)
class TypeDescriptor:
    """Normalized configuration for one entity kind."""

    singular_name: str
    plural_name: str
    allowed_type: type
    method_names: Mapping[Action, str | None] = field(hash=False)
    type_matches: EntityGuard | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Read-only copy; the dispatch table is built from this once.
        object.__setattr__(self, "method_names", MappingProxyType(dict(self.method_names)))

    def method_name(self, action: Action | str) -> str | None:
        """Return the call name for an action, or None when disabled."""
        return self.method_names.get(Action(action))

    def active_methods(self) -> list[tuple[Action, str]]:
        """Return (action, call name) pairs in dispatch order, skipping disabled slots."""
        active: list[tuple[Action, str]] = []
        for action in ACTION_ORDER:
            name = self.method_names.get(action)
            if name:
                active.append((action, name))
        return active

    def accepts(self, entity: Any) -> bool:
        if self.type_matches is not None:
            return bool(self.type_matches(entity))
        return isinstance(entity, self.allowed_type)

    def to_config(self) -> dict[str, Any]:
        """Return the normalized record in raw-descriptor form."""
        return {
            "allowed_type": self.allowed_type,
            "singular_name": self.singular_name,
            "plural_name": self.plural_name,
            "methods": {
                action.value: self.method_names.get(action) or DISABLED
                for action in ACTION_ORDER
            },
        }


def _upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def default_method_names(singular_name: str, plural_name: str) -> dict[Action, str | None]:
    """Derive call names from a kind's singular and plural names.

    >>> default_method_names("post", "posts")[Action.LIST]
    'getAllPosts'
    """
    singular = _upper_first(singular_name)
    plural = _upper_first(plural_name)
    return {
        Action.ADD: f"add{singular}",
        Action.GET: f"get{singular}",
        Action.DELETE: f"delete{singular}",
        Action.LIST: f"getAll{plural}",
    }


def _import_class(class_path: str) -> type:
    """Import a class from its fully-qualified dotted path."""
    if "." not in class_path:
        raise InvalidDescriptorError(
            f"allowed_type must be a class or a full class path, got: {class_path!r}"
        )

    module_path, _, class_name = class_path.rpartition(".")
    try:
        module = importlib.import_module(module_path)
        value = getattr(module, class_name)
    except (ImportError, AttributeError) as exc:
        raise InvalidDescriptorError(
            f"Cannot import allowed_type {class_path!r}: {exc}"
        ) from exc

    if not isinstance(value, type):
        raise InvalidDescriptorError(
            f"{class_path!r} did not resolve to a class (got {type(value).__name__})"
        )
    return value


def _resolve_allowed_type(raw: Any) -> type:
    if isinstance(raw, type):
        return raw
    if isinstance(raw, str):
        return _import_class(raw.strip())
    raise InvalidDescriptorError(
        f"allowed_type must be a class or a class path, got {type(raw).__name__}"
    )


def _require_name(raw: Mapping[str, Any], key: str, missing: type[Exception]) -> str:
    value = raw.get(key)
    if value is None:
        raise missing()
    if not isinstance(value, str):
        raise InvalidDescriptorError(f"Invalid {key}: expected string, got {type(value).__name__}")
    if not value.strip():
        raise missing()
    return value


def _parse_method_names(raw: Any, singular_name: str) -> dict[Action, str | None]:
    if not isinstance(raw, Mapping):
        raise InvalidDescriptorError(
            f"Invalid methods for type '{singular_name}': expected a mapping"
        )
    try:
        parsed = _METHOD_NAMES_ADAPTER.validate_python(dict(raw))
    except ValidationError as exc:
        raise InvalidDescriptorError(
            f"Invalid methods for type '{singular_name}': {exc}"
        ) from exc

    # Unlisted actions are disabled, so every slot is present after this.
    return {action: parsed.get(action) or None for action in ACTION_ORDER}


def normalize_descriptor(raw: Mapping[str, Any] | TypeDescriptor) -> TypeDescriptor:
    """Validate a raw descriptor and fill in default call names.

    Args:
        raw: Descriptor mapping. `class` and `method_names` are accepted as
            aliases of `allowed_type` and `methods`.

    Returns:
        The normalized TypeDescriptor

    Raises:
        MissingAllowedTypeError: If no allowed type is given
        MissingSingularNameError: If the singular name is missing or blank
        MissingPluralNameError: If the plural name is missing or blank
        InvalidDescriptorError: If a field is present but malformed
    """
    if isinstance(raw, TypeDescriptor):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidDescriptorError(
            f"Type descriptor must be a mapping, got {type(raw).__name__}"
        )

    allowed_raw = raw.get("allowed_type", raw.get("class"))
    if allowed_raw is None:
        raise MissingAllowedTypeError()
    singular_name = _require_name(raw, "singular_name", MissingSingularNameError)
    plural_name = _require_name(raw, "plural_name", MissingPluralNameError)
    allowed_type = _resolve_allowed_type(allowed_raw)

    methods_raw = raw.get("methods", raw.get("method_names"))
    if methods_raw is None:
        method_names = default_method_names(singular_name, plural_name)
    else:
        method_names = _parse_method_names(methods_raw, singular_name)

    type_matches = raw.get("type_matches")
    if type_matches is not None and not callable(type_matches):
        raise InvalidDescriptorError(
            f"type_matches for type '{singular_name}' must be callable"
        )

    return TypeDescriptor(
        singular_name=singular_name,
        plural_name=plural_name,
        allowed_type=allowed_type,
        method_names=method_names,
        type_matches=type_matches,
    )
