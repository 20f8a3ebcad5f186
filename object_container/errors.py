"""Exception types for object containers.

Configuration errors subclass ValueError so callers that already catch
ValueError around config loading keep working. Lookup and guard failures
subclass LookupError and TypeError respectively.
"""
from __future__ import annotations


class ContainerError(Exception):
    """Base exception for all object container errors."""
    pass


class ConfigError(ContainerError, ValueError):
    """Raised when a type descriptor or config source is invalid."""
    pass


class MissingAllowedTypeError(ConfigError):
    """Raised when a descriptor does not name the class its kind accepts."""

    def __init__(self) -> None:
        super().__init__("Type descriptor must have an 'allowed_type' (or 'class') field")


class MissingSingularNameError(ConfigError):
    """Raised when a descriptor has no singular name."""

    def __init__(self) -> None:
        super().__init__("Type descriptor must have a 'singular_name' field")


class MissingPluralNameError(ConfigError):
    """Raised when a descriptor has no plural name."""

    def __init__(self) -> None:
        super().__init__("Type descriptor must have a 'plural_name' field")


class InvalidDescriptorError(ConfigError):
    """Raised when descriptor fields are present but malformed."""
    pass


class ConfigFileError(ConfigError):
    """Raised when a descriptor file cannot be read or has the wrong shape."""
    pass


class TypeNotConfiguredError(ContainerError, LookupError):
    """Raised when an action targets a kind the container does not know."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Container is not configured for type '{kind}'")


class NotAllowedTypeError(ContainerError, TypeError):
    """Raised when an entity does not satisfy its kind's type guard."""

    def __init__(self, kind: str, expected_type: type, actual_type: type) -> None:
        self.kind = kind
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Type '{kind}' accepts {_type_name(expected_type)}, "
            f"got {_type_name(actual_type)}"
        )


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
