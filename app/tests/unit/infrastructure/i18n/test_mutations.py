"""Tests for infrastructure.i18n.mutations module."""

import pytest

from infrastructure.i18n import replace_all, set_many, set_one
from infrastructure.i18n.errors import PathCollisionError, ValidationError
from infrastructure.i18n.mutations import keep_placeholders
from tests.factories.i18n import make_translation_set


@pytest.mark.unit
class TestSetOne:
    """Tests for set_one."""

    def test_sets_key_and_keeps_others(self):
        translation_set = make_translation_set()

        set_one(translation_set, "fr", "home.subtitle", "Bienvenue")

        assert translation_set.get("fr") == {
            "home.title": "Accueil",
            "home.subtitle": "Bienvenue",
        }
        assert translation_set.get("en")["home.subtitle"] == "Welcome"

    def test_creates_missing_language(self):
        translation_set = make_translation_set()

        set_one(translation_set, "de", "home.title", "Start")

        assert translation_set.get("de") == {"home.title": "Start"}

    def test_is_idempotent(self):
        once = make_translation_set()
        twice = make_translation_set()

        set_one(once, "fr", "x.y", "z")
        set_one(twice, "fr", "x.y", "z")
        set_one(twice, "fr", "x.y", "z")

        assert once.to_dict() == twice.to_dict()

    def test_leaf_under_existing_leaf_raises(self):
        translation_set = make_translation_set({"en": {"a": "leaf"}})

        with pytest.raises(PathCollisionError) as exc_info:
            set_one(translation_set, "en", "a.b", "x")

        assert exc_info.value.conflict == "a"
        assert translation_set.get("en") == {"a": "leaf"}

    def test_leaf_over_section_raises(self):
        translation_set = make_translation_set()

        with pytest.raises(PathCollisionError):
            set_one(translation_set, "en", "home", "flat")

    def test_legacy_replaces_colliding_keys(self):
        translation_set = make_translation_set()

        set_one(translation_set, "en", "home", "flat", legacy=True)

        assert translation_set.get("en") == {"home": "flat"}

    def test_writing_under_placeholder_drops_it(self):
        translation_set = make_translation_set({"en": {"empty": {}}})

        set_one(translation_set, "en", "empty.key", "value")

        assert translation_set.get("en") == {"empty.key": "value"}

    @pytest.mark.parametrize("key", ["", "a..b", ".a", "a."])
    def test_rejects_malformed_keys(self, key):
        with pytest.raises(ValidationError):
            set_one(make_translation_set(), "en", key, "x")

    def test_rejects_mapping_value(self):
        with pytest.raises(ValidationError):
            set_one(make_translation_set(), "en", "a", {"b": "c"})

    def test_rejects_invalid_language(self):
        with pytest.raises(ValidationError):
            set_one(make_translation_set(), "../en", "a", "b")


@pytest.mark.unit
class TestSetMany:
    """Tests for set_many."""

    def test_merge_keeps_untouched_keys(self):
        translation_set = make_translation_set()

        set_many(translation_set, "en", {"home.title": "Start", "footer": "Bye"})

        assert translation_set.get("en") == {
            "home.title": "Start",
            "home.subtitle": "Welcome",
            "footer": "Bye",
        }

    def test_empty_patch_changes_nothing(self):
        translation_set = make_translation_set()
        before = translation_set.to_dict()

        set_many(translation_set, "en", {})

        assert translation_set.to_dict() == before

    def test_is_idempotent(self):
        translation_set = make_translation_set()
        patch = {"home.title": "Start"}

        set_many(translation_set, "en", patch)
        after_once = translation_set.to_dict()
        set_many(translation_set, "en", patch)

        assert translation_set.to_dict() == after_once

    def test_collision_leaves_set_unchanged(self):
        translation_set = make_translation_set()
        before = translation_set.to_dict()

        with pytest.raises(PathCollisionError):
            set_many(translation_set, "en", {"ok": "fine", "home.title.sub": "x"})

        assert translation_set.to_dict() == before

    def test_collision_inside_patch(self):
        with pytest.raises(PathCollisionError):
            set_many(make_translation_set(), "de", {"a": "1", "a.b": "2"})

    def test_legacy_evicts_colliding_keys(self):
        translation_set = make_translation_set()

        set_many(translation_set, "en", {"home": "flat"}, legacy=True)

        assert translation_set.get("en") == {"home": "flat"}

    def test_rejects_non_mapping_patch(self):
        with pytest.raises(ValidationError):
            set_many(make_translation_set(), "en", ["home.title"])


@pytest.mark.unit
class TestReplaceAll:
    """Tests for replace_all."""

    def test_replaces_whole_language(self):
        translation_set = make_translation_set()

        replace_all(translation_set, "en", {"only": "key"})

        assert translation_set.get("en") == {"only": "key"}
        assert translation_set.get("fr") == {"home.title": "Accueil"}

    def test_does_not_alias_input(self):
        translation_set = make_translation_set()
        full = {"only": "key"}

        replace_all(translation_set, "en", full)
        full["other"] = "value"

        assert translation_set.get("en") == {"only": "key"}

    def test_collision_raises(self):
        with pytest.raises(PathCollisionError):
            replace_all(make_translation_set(), "en", {"a": "1", "a.b": "2"})

    def test_legacy_resolves_collision(self):
        translation_set = make_translation_set()

        replace_all(translation_set, "en", {"a": "1", "a.b": "2"}, legacy=True)

        assert translation_set.get("en") == {"a.b": "2"}


@pytest.mark.unit
class TestKeepPlaceholders:
    """Tests for keep_placeholders."""

    def test_restores_dropped_sections(self):
        flat = {"a.b": "x"}

        keep_placeholders(flat, {"a.b": "old", "empty": {}, "deep.empty": {}})

        assert flat == {"a.b": "x", "empty": {}, "deep.empty": {}}

    def test_section_with_new_children_is_not_restored(self):
        flat = {"empty.first": "1"}

        keep_placeholders(flat, {"empty": {}})

        assert flat == {"empty.first": "1"}

    def test_section_replaced_by_leaf_is_not_restored(self):
        flat = {"empty": "now a leaf"}

        keep_placeholders(flat, {"empty": {}})

        assert flat == {"empty": "now a leaf"}

    def test_section_under_new_leaf_is_not_restored(self):
        flat = {"a": "leaf"}

        keep_placeholders(flat, {"a.empty": {}})

        assert flat == {"a": "leaf"}
