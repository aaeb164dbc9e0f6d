"""Mutation applier.

Applies edits to a TranslationSet in memory. Three entry points, each
idempotent:

- ``set_one``: one key of one language.
- ``set_many``: merge a sparse patch into one language; keys absent from
  the patch are kept.
- ``replace_all``: swap in the complete FlatMap of one language.

``keep_placeholders`` re-adds the empty sections a full save leaves out.

Every input is validated before anything changes, so a rejected call leaves
the set as it was. With ``legacy=True`` path collisions are resolved by
dropping the colliding keys instead of raising.
"""

from typing import Any, Dict

from infrastructure.i18n.codec import (
    SEPARATOR,
    FlatMap,
    find_collision,
    flatten,
    is_placeholder,
    split_path,
    unflatten,
    validate_paths,
)
from infrastructure.i18n.errors import PathCollisionError, ValidationError
from infrastructure.i18n.models import TranslationSet, validate_language


def _check_entry(key: str, value: Any) -> None:
    split_path(key)
    if isinstance(value, dict) and value:
        raise ValidationError(f"Value for '{key}' must be a leaf, not a mapping")


def _check_mapping(language: str, flat: Any) -> None:
    if not isinstance(flat, dict):
        raise ValidationError(
            f"Translations for '{language}' must be a mapping of keys to values"
        )
    for key, value in flat.items():
        _check_entry(key, value)


def _drop_placeholders(flat: FlatMap, key: str) -> None:
    """Remove empty-section placeholders above ``key``."""
    segments = key.split(SEPARATOR)
    for depth in range(1, len(segments)):
        ancestor = SEPARATOR.join(segments[:depth])
        if is_placeholder(flat.get(ancestor)):
            del flat[ancestor]


def _evict(flat: FlatMap, key: str, value: Any) -> None:
    """Drop every key that writing ``key`` would collide with."""
    segments = key.split(SEPARATOR)
    for depth in range(1, len(segments)):
        flat.pop(SEPARATOR.join(segments[:depth]), None)
    if is_placeholder(value):
        return
    prefix = key + SEPARATOR
    for existing in [k for k in flat if k.startswith(prefix)]:
        del flat[existing]


def set_one(
    translation_set: TranslationSet,
    language: str,
    key: str,
    value: Any,
    legacy: bool = False,
) -> FlatMap:
    """Set a single key of one language, creating the language if absent.

    Args:
        translation_set: Set to edit in place.
        language: Language code.
        key: Dot-path to set.
        value: Leaf value.
        legacy: Resolve collisions by replacement instead of raising.

    Returns:
        The language's updated FlatMap.

    Raises:
        ValidationError: If the language, key or value is malformed.
        PathCollisionError: If ``key`` collides with an existing key.
    """
    validate_language(language)
    _check_entry(key, value)

    conflict = find_collision(translation_set.get(language), key, value)
    if conflict is not None and not legacy:
        raise PathCollisionError(key, conflict)

    flat = translation_set.ensure(language)
    if conflict is not None:
        _evict(flat, key, value)
    _drop_placeholders(flat, key)
    flat[key] = value
    return flat


def set_many(
    translation_set: TranslationSet,
    language: str,
    patch: Dict[str, Any],
    legacy: bool = False,
) -> FlatMap:
    """Merge ``patch`` into one language.

    Keys of the language that are not in ``patch`` are left untouched.

    Raises:
        ValidationError: If the language or any entry is malformed.
        PathCollisionError: If the merged mapping contains a collision.
    """
    validate_language(language)
    _check_mapping(language, patch)

    merged = dict(translation_set.get(language))
    if legacy:
        for key, value in patch.items():
            _evict(merged, key, value)
            merged[key] = value
    else:
        merged.update(patch)
        validate_paths(merged, merged)

    for key in patch:
        _drop_placeholders(merged, key)

    flat = translation_set.ensure(language)
    flat.clear()
    flat.update(merged)
    return flat


def replace_all(
    translation_set: TranslationSet,
    language: str,
    full: Dict[str, Any],
    legacy: bool = False,
) -> FlatMap:
    """Replace the whole FlatMap of one language.

    Used when the caller holds the complete current state of the language,
    e.g. when the entire sheet is saved.

    Raises:
        ValidationError: If the language or any entry is malformed.
        PathCollisionError: If ``full`` contains a collision.
    """
    validate_language(language)
    _check_mapping(language, full)

    if legacy:
        replacement = flatten(unflatten(full, legacy=True))
    else:
        validate_paths(full, full)
        replacement = dict(full)

    translation_set.translations[language] = replacement
    return replacement


def keep_placeholders(flat: FlatMap, previous: FlatMap) -> FlatMap:
    """Carry the empty sections of ``previous`` over into ``flat``.

    The sheet does not show empty sections, so a full save would otherwise
    drop them. A section is only restored where ``flat`` leaves room for it.
    """
    for key, value in previous.items():
        if not is_placeholder(value) or key in flat:
            continue
        prefix = key + SEPARATOR
        if any(existing.startswith(prefix) for existing in flat):
            continue
        if find_collision(flat, key, value) is None:
            flat[key] = {}
    return flat
