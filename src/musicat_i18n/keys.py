"""Key path helpers for nested translation bundles.

A key path is the dotted address of a leaf, e.g. ``sidebar.library``.
Sections are mappings; anything else is a leaf.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from musicat_i18n.errors import KeyPathError

KEY_SEPARATOR = "."

TranslationTree = Mapping[str, Any]


def join_path(*parts: str) -> str:
    return KEY_SEPARATOR.join(part for part in parts if part)


def split_path(key_path: str) -> list[str]:
    if not key_path:
        return []
    return key_path.split(KEY_SEPARATOR)


def iter_leaves(tree: TranslationTree, prefix: str = "") -> Iterator[tuple[str, Any]]:
    """Yield ``(key_path, value)`` for every leaf, in declaration order."""
    for key, value in tree.items():
        path = join_path(prefix, key)
        if isinstance(value, Mapping):
            yield from iter_leaves(value, path)
        else:
            yield path, value


def flatten(tree: TranslationTree) -> dict[str, Any]:
    """Flatten a bundle to ``{key_path: value}``."""
    return dict(iter_leaves(tree))


def key_paths(tree: TranslationTree) -> list[str]:
    """List every leaf key path of a bundle."""
    return [path for path, _ in iter_leaves(tree)]


def get_node(tree: TranslationTree, key_path: str) -> Any:
    """Return the section or leaf at ``key_path``.

    Raises:
        KeyPathError: If any segment is missing or descends into a leaf.
    """
    node: Any = tree
    for segment in split_path(key_path):
        if not isinstance(node, Mapping):
            raise KeyPathError(key_path, "descends into a leaf")
        if segment not in node:
            raise KeyPathError(key_path)
        node = node[segment]
    return node


def get_path(tree: TranslationTree, key_path: str) -> str:
    """Return the leaf string at ``key_path``.

    Raises:
        KeyPathError: If the path is missing or addresses a section.
    """
    value = get_node(tree, key_path)
    if isinstance(value, Mapping):
        raise KeyPathError(key_path, "addresses a section")
    if not isinstance(value, str):
        raise KeyPathError(key_path, "is not a string")
    return value


def freeze(tree: TranslationTree) -> Mapping[str, Any]:
    """Return a deeply read-only view of a bundle."""
    return MappingProxyType(
        {
            key: freeze(value) if isinstance(value, Mapping) else value
            for key, value in tree.items()
        }
    )
