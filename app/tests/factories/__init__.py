"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_settings,
    make_translation_set,
    read_json_resource,
    write_json_resource,
    write_yaml_resource,
)

__all__ = [
    "make_settings",
    "make_translation_set",
    "read_json_resource",
    "write_json_resource",
    "write_yaml_resource",
]
