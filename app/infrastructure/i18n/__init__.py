"""i18n system - translation resource synchronization engine.

Turns per-language resource files into a flat, key-addressable model and
writes edits back without losing untouched keys.

Main components:
- codec: flatten / unflatten between trees and dot-path mappings
- formats: safe JSON and YAML decoding and encoding
- loader: ResourceLoader reading a translations directory
- resolver: key universe and missing keys across languages
- mutations: set_one, set_many and replace_all
- writer: PersistenceWriter honoring the ignore-list
- service: TranslationService tying them together for the HTTP layer
"""

from infrastructure.i18n.codec import FlatMap, ResourceTree, flatten, unflatten
from infrastructure.i18n.errors import (
    DecodeError,
    PathCollisionError,
    PersistenceError,
    TranslationError,
    ValidationError,
)
from infrastructure.i18n.loader import ResourceLoader
from infrastructure.i18n.models import IgnoreList, TranslationSet, validate_language
from infrastructure.i18n.mutations import replace_all, set_many, set_one
from infrastructure.i18n.resolver import key_universe, missing_keys
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.writer import PersistenceWriter

__all__ = [
    "FlatMap",
    "ResourceTree",
    "flatten",
    "unflatten",
    "TranslationError",
    "DecodeError",
    "PathCollisionError",
    "PersistenceError",
    "ValidationError",
    "ResourceLoader",
    "IgnoreList",
    "TranslationSet",
    "validate_language",
    "replace_all",
    "set_many",
    "set_one",
    "key_universe",
    "missing_keys",
    "TranslationService",
    "PersistenceWriter",
]
