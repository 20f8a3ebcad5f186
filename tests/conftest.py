"""Shared test fixtures for the object-container test suite."""
from __future__ import annotations

import pytest

from blog_models import Category, Post
from object_container import Container


@pytest.fixture
def blog_config():
    """Two kinds: `post` with explicit call names, `category` with defaults."""
    return [
        {
            "class": Post,
            "singular_name": "post",
            "plural_name": "posts",
            "methods": {
                "add": "addPost",
                "get": "getPost",
                "delete": "deletePost",
                "list": "getAllPosts",
            },
        },
        {
            "class": Category,
            "singular_name": "category",
            "plural_name": "categories",
        },
    ]


@pytest.fixture
def custom_post_config():
    """A `post` kind with renamed actions and `get` disabled."""
    return [
        {
            "allowed_type": Post,
            "singular_name": "post",
            "plural_name": "posts",
            "methods": {
                "add": "insertPost",
                "get": False,
                "delete": "removePost",
                "list": "listAllPosts",
            },
        },
    ]


@pytest.fixture
def container(blog_config):
    return Container(blog_config)
