"""Descriptor sources for containers.

A container reads its raw type descriptors exactly once, from a provider.
Providers can be:
- a zero-argument callable returning descriptor mappings
- an iterable of descriptor mappings
- a YAML file (see `load_descriptors`)

With no provider, the `OBJECT_CONTAINER_CONFIG` environment variable may
point at a YAML file.
"""
from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .descriptor import TypeDescriptor
from .errors import ConfigFileError

# Environment variable naming a default YAML descriptor file
OBJECT_CONTAINER_CONFIG_ENV = "OBJECT_CONTAINER_CONFIG"

RawDescriptor = Union[Mapping[str, Any], TypeDescriptor]
ConfigProvider = Callable[[], Iterable[RawDescriptor]]
ProviderSource = Union[ConfigProvider, Iterable[RawDescriptor], str, Path, None]


class ContainerFile(BaseModel):
    """Shape of a YAML descriptor file.

    Descriptor contents are validated later, one record at a time, so the
    first bad record aborts initialization with a specific error.
    """

    model_config = ConfigDict(extra="forbid")

    types: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Raw type descriptors, in registration order.",
    )


def load_descriptors(path: str | Path) -> list[dict[str, Any]]:
    """Load raw type descriptors from a YAML file.

    The file holds either a list of descriptors or a mapping with a
    `types` list:

    ```yaml
    types:
      - allowed_type: blog.models.Post
        singular_name: post
        plural_name: posts
    ```

    Raises:
        ConfigFileError: If the file is missing, is not valid YAML, or has the
            wrong shape
    """
    config_path = Path(path)
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(f"Cannot read container config {config_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, list):
        data = {"types": data}

    try:
        parsed = ContainerFile.model_validate(data)
    except ValidationError as e:
        raise ConfigFileError(f"Invalid container configuration in {config_path}: {e}") from e
    return parsed.types


class YamlConfigProvider:
    """Provider reading descriptors from a YAML file when called."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def __call__(self) -> list[dict[str, Any]]:
        return load_descriptors(self.path)

    def __repr__(self) -> str:
        return f"YamlConfigProvider({str(self.path)!r})"


def _empty_provider() -> list[RawDescriptor]:
    return []


def resolve_provider(source: ProviderSource) -> ConfigProvider:
    """Turn any accepted provider form into a zero-argument callable."""
    if source is None:
        env_path = os.environ.get(OBJECT_CONTAINER_CONFIG_ENV, "").strip()
        if env_path:
            return YamlConfigProvider(env_path)
        return _empty_provider
    if isinstance(source, (str, Path)):
        return YamlConfigProvider(source)
    if callable(source):
        return source
    if isinstance(source, Mapping):
        raise ConfigFileError(
            "Config provider must be a sequence of descriptors, not a single mapping"
        )

    records = list(source)
    return lambda: records
