"""Shared fixtures for musicat-i18n tests.

Bundles handed out by the registry are read-only, so tests that need a
broken translation start from ``zh_copy`` (a plain, mutable deep copy of
the shipped Chinese bundle) and edit it with ``set_path``/``delete_path``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import structlog

from musicat_i18n.keys import split_path
from musicat_i18n.locales import load_bundle
from musicat_i18n.schema import thaw


@pytest.fixture
def en_bundle() -> Any:
    return load_bundle("en")


@pytest.fixture
def zh_bundle() -> Any:
    return load_bundle("zh")


@pytest.fixture
def zh_copy() -> dict[str, Any]:
    """Mutable copy of the Chinese bundle."""
    return thaw(load_bundle("zh"))


def _set_path(tree: dict[str, Any], key_path: str, value: Any) -> None:
    *parents, leaf = split_path(key_path)
    node = tree
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = value


def _delete_path(tree: dict[str, Any], key_path: str) -> None:
    *parents, leaf = split_path(key_path)
    node = tree
    for part in parents:
        node = node[part]
    del node[leaf]


@pytest.fixture
def set_path() -> Callable[[dict[str, Any], str, Any], None]:
    return _set_path


@pytest.fixture
def delete_path() -> Callable[[dict[str, Any], str], None]:
    return _delete_path


@pytest.fixture(autouse=True)
def reset_structlog() -> Any:
    """Undo any logging configuration a test (or CLI run) applied."""
    yield
    structlog.reset_defaults()
