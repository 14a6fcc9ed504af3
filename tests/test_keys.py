"""Tests for key path helpers."""

import pytest

from musicat_i18n.errors import KeyPathError
from musicat_i18n.keys import (
    flatten,
    freeze,
    get_node,
    get_path,
    iter_leaves,
    join_path,
    key_paths,
    split_path,
)

TREE = {
    "sidebar": {"search": "Search", "library": "Library"},
    "library": {"fields": {"title": "Title"}},
    "tagCloud": {"close": "Clear all tags"},
}


class TestPaths:
    """join_path / split_path."""

    def test_join_skips_empty_prefix(self) -> None:
        assert join_path("", "sidebar") == "sidebar"
        assert join_path("library", "fields", "title") == "library.fields.title"

    def test_split(self) -> None:
        assert split_path("library.fields.title") == ["library", "fields", "title"]
        assert split_path("") == []


class TestLeaves:
    """Walking a nested bundle."""

    def test_iter_leaves_in_declaration_order(self) -> None:
        assert list(iter_leaves(TREE)) == [
            ("sidebar.search", "Search"),
            ("sidebar.library", "Library"),
            ("library.fields.title", "Title"),
            ("tagCloud.close", "Clear all tags"),
        ]

    def test_flatten(self) -> None:
        flat = flatten(TREE)
        assert flat["library.fields.title"] == "Title"
        assert len(flat) == 4

    def test_key_paths(self) -> None:
        assert key_paths(TREE)[0] == "sidebar.search"

    def test_empty_tree(self) -> None:
        assert key_paths({}) == []


class TestLookup:
    """get_node / get_path."""

    def test_get_path_returns_leaf(self) -> None:
        assert get_path(TREE, "sidebar.library") == "Library"

    def test_get_node_returns_section(self) -> None:
        assert get_node(TREE, "library.fields") == {"title": "Title"}

    def test_missing_path(self) -> None:
        with pytest.raises(KeyPathError, match="not found: sidebar.podcasts") as exc:
            get_path(TREE, "sidebar.podcasts")
        assert exc.value.details["key_path"] == "sidebar.podcasts"

    def test_section_is_not_a_leaf(self) -> None:
        with pytest.raises(KeyPathError, match="addresses a section"):
            get_path(TREE, "library.fields")

    def test_cannot_descend_into_leaf(self) -> None:
        with pytest.raises(KeyPathError, match="descends into a leaf"):
            get_path(TREE, "sidebar.search.more")

    def test_non_string_leaf(self) -> None:
        with pytest.raises(KeyPathError, match="is not a string"):
            get_path({"settings": {"folder": 3}}, "settings.folder")


class TestFreeze:
    """freeze produces a deeply read-only view."""

    def test_nested_sections_are_read_only(self) -> None:
        frozen = freeze(TREE)
        with pytest.raises(TypeError):
            frozen["sidebar"]["search"] = "Find"  # type: ignore[index]
        with pytest.raises(TypeError):
            frozen["library"]["fields"]["title"] = "Name"  # type: ignore[index]

    def test_freeze_copies(self) -> None:
        source = {"sidebar": {"search": "Search"}}
        frozen = freeze(source)
        source["sidebar"]["search"] = "Find"
        assert frozen["sidebar"]["search"] == "Search"
