"""Tests for ContainerHost attribute forwarding."""
from __future__ import annotations

import pytest

from blog_models import Category, Post
from object_container import ConfigError, Container, ContainerHost, NotAllowedTypeError


class Blog(ContainerHost):
    def __init__(self, title: str = "blog"):
        self.title = title

    def container_config(self):
        return [
            {"class": Post, "singular_name": "post", "plural_name": "posts"},
            {
                "class": Category,
                "singular_name": "category",
                "plural_name": "categories",
                "methods": {"add": "fileUnder", "list": "sections"},
            },
        ]


def test_configured_names_become_methods() -> None:
    blog = Blog()
    post = Post()

    blog.addPost("post-id", post)

    assert blog.getPost("post-id") is post
    assert blog.getAllPosts() == {"post-id": post}

    blog.deletePost("post-id")
    assert blog.getPost("post-id") is None


def test_custom_names() -> None:
    blog = Blog()
    news = Category("news")

    blog.fileUnder("news", news)

    assert blog.sections() == {"news": news}


def test_host_attributes_are_not_shadowed() -> None:
    blog = Blog("my blog")

    assert blog.title == "my blog"


def test_unresolved_name_raises_attribute_error() -> None:
    blog = Blog()

    with pytest.raises(AttributeError, match="getCategory"):
        blog.getCategory("news")
    assert not hasattr(blog, "call_any_method")


def test_private_names_are_not_forwarded() -> None:
    blog = Blog()

    with pytest.raises(AttributeError):
        blog._addPost  # noqa: B018
    assert blog.container.is_initialized() is False


def test_container_is_lazy_and_shared() -> None:
    blog = Blog()

    assert isinstance(blog.container, Container)
    assert blog.container is blog.container
    assert blog.container.is_initialized() is False

    blog.addPost("p", Post())

    assert blog.container.is_initialized()


def test_each_host_has_its_own_container() -> None:
    first, second = Blog(), Blog()

    first.addPost("p", Post())

    assert second.getAllPosts() == {}


def test_type_errors_propagate() -> None:
    blog = Blog()

    with pytest.raises(NotAllowedTypeError):
        blog.addPost("p", Category())


def test_default_host_has_no_kinds() -> None:
    host = ContainerHost()

    assert host.container.get_config() == {}
    with pytest.raises(AttributeError):
        host.addPost("p", Post())


def test_unresolved_name_is_noop_through_container() -> None:
    blog = Blog()

    assert blog.container.invoke("getCategory", "news") is None
    assert blog.sections() == {}


class SelfReferencingBlog(ContainerHost):
    def container_config(self):
        self.container.get_config()
        return []


def test_config_calling_back_into_container_raises() -> None:
    blog = SelfReferencingBlog()

    with pytest.raises(ConfigError, match="re-entered"):
        blog.container.get_config()
