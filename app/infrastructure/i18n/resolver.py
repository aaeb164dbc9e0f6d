"""Key universe resolution.

The key universe is the sorted union of dot-paths across every language of
a TranslationSet. It drives row ordering in the sheet and shows which
translations are missing.
"""

from typing import Dict, List

from infrastructure.i18n.models import TranslationSet


def key_universe(translation_set: TranslationSet) -> List[str]:
    """Return every distinct key of the set, sorted lexicographically."""
    keys = set()
    for flat in translation_set.translations.values():
        keys.update(flat)
    return sorted(keys)


def missing_keys(translation_set: TranslationSet) -> Dict[str, List[str]]:
    """Return, per language, the keys of the universe that language lacks.

    Languages with nothing missing map to an empty list.
    """
    universe = key_universe(translation_set)
    return {
        language: [key for key in universe if key not in flat]
        for language, flat in sorted(translation_set.translations.items())
    }
