"""Shared fixtures for the translation editor test suite."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n import TranslationService
from server.server import create_app
from tests.factories.i18n import make_settings, write_json_resource


@pytest.fixture
def translations_dir(tmp_path):
    """Create a translations directory with English and French files.

    - en.json: {"a": {"b": "hi"}, "home": {"title": "Home", "subtitle": "Welcome"}}
    - fr.json: {"a": {"b": "salut"}, "home": {"title": "Accueil"}}
    """
    directory = tmp_path / "locales"
    directory.mkdir()
    write_json_resource(
        directory,
        "en.json",
        {"a": {"b": "hi"}, "home": {"title": "Home", "subtitle": "Welcome"}},
    )
    write_json_resource(
        directory,
        "fr.json",
        {"a": {"b": "salut"}, "home": {"title": "Accueil"}},
    )
    return directory


@pytest.fixture
def settings(translations_dir):
    return make_settings(translations_dir)


@pytest.fixture
def translation_service(settings):
    return TranslationService.from_settings(settings)


@pytest.fixture
def client_factory(translations_dir):
    """Build a TestClient for an app over ``translations_dir``.

    Keyword arguments are EditorSettings overrides, e.g.
    ``client_factory(IGNORE_FILES="fr.json")``.
    """

    def _make(**editor_overrides):
        app = create_app(make_settings(translations_dir, **editor_overrides))
        return TestClient(app)

    return _make


@pytest.fixture
def client(client_factory):
    return client_factory()
