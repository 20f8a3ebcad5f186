"""Tests for descriptor sources."""
from __future__ import annotations

from pathlib import Path

import pytest

from blog_models import Post
from object_container import (
    OBJECT_CONTAINER_CONFIG_ENV,
    Action,
    CallTarget,
    ConfigFileError,
    Container,
    MissingPluralNameError,
    YamlConfigProvider,
    load_descriptors,
    resolve_provider,
)

BLOG_YAML = """\
types:
  - allowed_type: blog_models.Post
    singular_name: post
    plural_name: posts
    methods:
      add: insertPost
      get: false
      delete: removePost
      list: listAllPosts
  - class: blog_models.Category
    singular_name: category
    plural_name: categories
"""


def _write(tmp_path: Path, content: str, name: str = "container.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadDescriptors:
    def test_mapping_with_types(self, tmp_path):
        records = load_descriptors(_write(tmp_path, BLOG_YAML))

        assert [r["singular_name"] for r in records] == ["post", "category"]
        assert records[0]["methods"]["get"] is False

    def test_top_level_list(self, tmp_path):
        path = _write(
            tmp_path,
            "- allowed_type: blog_models.Post\n  singular_name: post\n  plural_name: posts\n",
        )

        assert load_descriptors(path) == [
            {"allowed_type": "blog_models.Post", "singular_name": "post", "plural_name": "posts"}
        ]

    def test_empty_file(self, tmp_path):
        assert load_descriptors(_write(tmp_path, "")) == []

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path, "types: [unclosed\n")

        with pytest.raises(ConfigFileError, match="Invalid YAML"):
            load_descriptors(path)

    def test_unknown_top_level_key(self, tmp_path):
        path = _write(tmp_path, "kinds: []\n")

        with pytest.raises(ConfigFileError, match="Invalid container configuration"):
            load_descriptors(path)

    def test_non_mapping_entries(self, tmp_path):
        path = _write(tmp_path, "types:\n  - post\n")

        with pytest.raises(ConfigFileError):
            load_descriptors(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileError, match="Cannot read"):
            load_descriptors(tmp_path / "missing.yaml")


class TestYamlContainer:
    def test_container_from_yaml_path(self, tmp_path):
        container = Container(_write(tmp_path, BLOG_YAML))
        post = Post()

        container.invoke("insertPost", "p1", post)

        assert container.invoke("getPost", "p1") is None
        assert container.get_action("post", "p1") is post
        assert container.resolve_call("getAllCategories") == CallTarget("category", Action.LIST)

    def test_yaml_descriptor_errors_surface_on_initialize(self, tmp_path):
        path = _write(
            tmp_path,
            "types:\n  - allowed_type: blog_models.Post\n    singular_name: post\n",
        )
        container = Container(YamlConfigProvider(path))

        with pytest.raises(MissingPluralNameError):
            container.initialize()

    def test_env_var_provides_default_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv(OBJECT_CONTAINER_CONFIG_ENV, str(_write(tmp_path, BLOG_YAML)))

        container = Container()

        assert list(container.get_config()) == ["post", "category"]

    def test_no_provider_and_no_env_var(self, monkeypatch):
        monkeypatch.delenv(OBJECT_CONTAINER_CONFIG_ENV, raising=False)

        container = Container()

        assert container.get_config() == {}
        assert container.is_initialized()


class TestResolveProvider:
    def test_callable_is_used_as_is(self):
        def provider():
            return []

        assert resolve_provider(provider) is provider

    def test_iterable_is_materialized_once(self):
        records = iter([{"class": Post, "singular_name": "post", "plural_name": "posts"}])

        provider = resolve_provider(records)

        assert len(provider()) == 1
        assert len(provider()) == 1

    def test_single_mapping_is_rejected(self):
        with pytest.raises(ConfigFileError, match="sequence"):
            resolve_provider({"class": Post, "singular_name": "post", "plural_name": "posts"})

    def test_path_becomes_yaml_provider(self, tmp_path):
        provider = resolve_provider(tmp_path / "container.yaml")

        assert isinstance(provider, YamlConfigProvider)
