"""object-container: typed in-memory containers with configurable call names.

Main entry points:
- Container: lazily configured container with add/get/delete/list actions
- ContainerHost: base class forwarding configured call names to a Container
- normalize_descriptor: validate a raw type descriptor
"""
from __future__ import annotations

from .config import (
    OBJECT_CONTAINER_CONFIG_ENV,
    ContainerFile,
    YamlConfigProvider,
    load_descriptors,
    resolve_provider,
)
from .container import Container
from .descriptor import (
    ACTION_ORDER,
    DISABLED,
    Action,
    TypeDescriptor,
    default_method_names,
    normalize_descriptor,
)
from .dispatch import CallTarget, Dispatcher
from .errors import (
    ConfigError,
    ConfigFileError,
    ContainerError,
    InvalidDescriptorError,
    MissingAllowedTypeError,
    MissingPluralNameError,
    MissingSingularNameError,
    NotAllowedTypeError,
    TypeNotConfiguredError,
)
from .host import ContainerHost
from .registry import TypeRegistry
from .store import TypedStore

__all__ = [
    # Facade
    "Container",
    "ContainerHost",
    # Descriptors
    "ACTION_ORDER",
    "DISABLED",
    "Action",
    "TypeDescriptor",
    "default_method_names",
    "normalize_descriptor",
    # Building blocks
    "CallTarget",
    "Dispatcher",
    "TypeRegistry",
    "TypedStore",
    # Config sources
    "OBJECT_CONTAINER_CONFIG_ENV",
    "ContainerFile",
    "YamlConfigProvider",
    "load_descriptors",
    "resolve_provider",
    # Errors
    "ConfigError",
    "ConfigFileError",
    "ContainerError",
    "InvalidDescriptorError",
    "MissingAllowedTypeError",
    "MissingPluralNameError",
    "MissingSingularNameError",
    "NotAllowedTypeError",
    "TypeNotConfiguredError",
    # Version
    "__version__",
]

__version__ = "0.1.0"
