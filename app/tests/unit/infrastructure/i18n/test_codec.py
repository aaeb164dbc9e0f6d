"""Tests for infrastructure.i18n.codec module."""

import pytest

from infrastructure.i18n.codec import (
    FLAT,
    NESTED,
    assign,
    find_collision,
    flatten,
    layout_of,
    split_path,
    to_tree,
    unflatten,
    validate_paths,
)
from infrastructure.i18n.errors import PathCollisionError, ValidationError


@pytest.mark.unit
class TestFlatten:
    """Tests for flatten()."""

    def test_flatten_nested_tree(self):
        """Nested sections become dot-joined paths."""
        tree = {"home": {"title": "Home", "menu": {"open": "Open"}}, "ok": "OK"}

        assert flatten(tree) == {
            "home.title": "Home",
            "home.menu.open": "Open",
            "ok": "OK",
        }

    def test_flatten_keeps_arrays_as_leaves(self):
        """Arrays are stored verbatim, never expanded into indexed paths."""
        tree = {"days": ["mon", "tue"], "nested": {"list": [{"a": 1}]}}

        flat = flatten(tree)

        assert flat == {"days": ["mon", "tue"], "nested.list": [{"a": 1}]}

    def test_flatten_preserves_non_string_leaves(self):
        """Numbers, booleans and null are carried as-is."""
        tree = {"count": 3, "enabled": False, "missing": None, "ratio": 0.5}

        assert flatten(tree) == tree

    def test_flatten_empty_section_becomes_placeholder(self):
        """An empty mapping is kept as a {} placeholder leaf."""
        assert flatten({"section": {}, "a": {"b": {}}}) == {"section": {}, "a.b": {}}

    def test_flatten_empty_tree(self):
        assert flatten({}) == {}

    def test_flatten_duplicate_path_raises(self):
        """A dotted key and a nested section naming the same path clash."""
        tree = {"a": {"b": "nested"}, "a.b": "literal", "c": "1"}

        with pytest.raises(PathCollisionError) as exc_info:
            flatten(tree)

        assert exc_info.value.path == "a.b"

    def test_flatten_dotted_keys_without_duplicates(self):
        assert flatten({"home.title": "Casa", "x": "1"}) == {
            "home.title": "Casa",
            "x": "1",
        }


@pytest.mark.unit
class TestUnflatten:
    """Tests for unflatten()."""

    def test_unflatten_builds_nested_tree(self):
        flat = {"home.title": "Home", "home.menu.open": "Open", "ok": "OK"}

        assert unflatten(flat) == {
            "home": {"title": "Home", "menu": {"open": "Open"}},
            "ok": "OK",
        }

    @pytest.mark.parametrize(
        "tree",
        [
            {"a": {"b": "hi"}},
            {"a": {"b": {"c": "deep"}, "d": "x"}, "e": "y"},
            {"list": ["x", "y"], "n": 1, "flag": True, "none": None},
            {"empty": {}, "a": {"inner": {}}},
            {"unicode": {"greeting": "שלום", "emoji": "👋"}},
        ],
    )
    def test_round_trip(self, tree):
        """unflatten(flatten(t)) == t for trees without collisions."""
        assert unflatten(flatten(tree)) == tree

    def test_flatten_of_unflatten_is_identity(self):
        flat = {"a.b": "1", "a.c": "2", "d": "3"}

        assert flatten(unflatten(flat)) == flat

    def test_unflatten_leaf_then_deeper_path_raises(self):
        """A leaf cannot also be a section."""
        with pytest.raises(PathCollisionError) as exc_info:
            unflatten({"a": "leaf", "a.b": "child"})

        assert exc_info.value.path == "a.b"
        assert exc_info.value.conflict == "a"

    def test_unflatten_deeper_path_then_leaf_raises(self):
        with pytest.raises(PathCollisionError) as exc_info:
            unflatten({"a.b": "child", "a": "leaf"})

        assert exc_info.value.path == "a"
        assert exc_info.value.conflict == "a.b"

    def test_unflatten_legacy_replaces_leaf_with_section(self):
        """Legacy mode silently drops the old leaf."""
        assert unflatten({"a": "leaf", "a.b": "child"}, legacy=True) == {
            "a": {"b": "child"}
        }

    def test_unflatten_legacy_replaces_section_with_leaf(self):
        assert unflatten({"a.b": "child", "a": "leaf"}, legacy=True) == {"a": "leaf"}

    def test_unflatten_placeholder_with_children(self):
        """A placeholder next to keys beneath it does not collide."""
        assert unflatten({"a": {}, "a.b": "x"}) == {"a": {"b": "x"}}
        assert unflatten({"a.b": "x", "a": {}}) == {"a": {"b": "x"}}

    def test_unflatten_does_not_alias_placeholders(self):
        """Writing beneath a placeholder never mutates the input mapping."""
        flat = {"a": {}, "a.b": "x"}

        unflatten(flat)

        assert flat == {"a": {}, "a.b": "x"}


@pytest.mark.unit
class TestAssign:
    """Tests for assign()."""

    def test_assign_creates_missing_levels(self):
        tree = {}

        assign(tree, "a.b.c", "value")

        assert tree == {"a": {"b": {"c": "value"}}}

    def test_assign_keeps_siblings(self):
        tree = {"a": {"b": "old", "keep": "me"}}

        assign(tree, "a.b", "new")

        assert tree == {"a": {"b": "new", "keep": "me"}}

    def test_assign_through_array_raises(self):
        """Arrays are leaves, so a path cannot descend into one."""
        with pytest.raises(PathCollisionError):
            assign({"a": ["x"]}, "a.b", "y")


@pytest.mark.unit
class TestPaths:
    """Tests for path validation helpers."""

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a.", None, 3])
    def test_split_path_rejects_malformed(self, path):
        with pytest.raises(ValidationError):
            split_path(path)

    def test_split_path(self):
        assert split_path("a.b.c") == ["a", "b", "c"]

    def test_find_collision_with_ancestor_leaf(self):
        assert find_collision({"a": "leaf"}, "a.b") == "a"

    def test_find_collision_with_descendant(self):
        assert find_collision({"a.b": "x"}, "a") == "a.b"

    def test_find_collision_prefix_is_segment_based(self):
        """'ab' is not a section of 'a'."""
        assert find_collision({"ab": "x", "a-b.c": "y"}, "a") is None

    def test_find_collision_ignores_placeholders(self):
        assert find_collision({"a": {}}, "a.b") is None
        assert find_collision({"a.b": "x"}, "a", {}) is None

    def test_validate_paths_reports_first_collision(self):
        with pytest.raises(PathCollisionError):
            validate_paths(["a.b"], {"a": "leaf", "a.b": "x"})

    def test_validate_paths_accepts_clean_map(self):
        flat = {"a.b": "1", "a.c": "2", "ab": "3"}

        validate_paths(flat, flat)


@pytest.mark.unit
class TestLayout:
    """Tests for layout_of() and to_tree()."""

    def test_plain_keys_are_nested(self):
        assert layout_of({"home": {"title": "Home"}, "ok": "OK"}) == NESTED

    def test_empty_tree_is_nested(self):
        assert layout_of({}) == NESTED

    def test_dotted_leaves_are_flat(self):
        assert layout_of({"home.title": "Casa", "x": "1", "empty.section": {}}) == FLAT

    def test_mixed_layout_is_unknown(self):
        assert layout_of({"home.title": "Casa", "menu": {"open": "Apri"}}) is None

    def test_dotted_key_below_section_is_unknown(self):
        assert layout_of({"menu": {"file.open": "Open"}}) is None

    def test_to_tree_flat_keeps_dotted_keys(self):
        flat = {"home.title": "Casa", "x": "2"}

        tree = to_tree(flat, FLAT)

        assert tree == {"home.title": "Casa", "x": "2"}
        assert tree is not flat

    def test_to_tree_nested_by_default(self):
        assert to_tree({"home.title": "Casa"}) == {"home": {"title": "Casa"}}
