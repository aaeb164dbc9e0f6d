"""Feature-level fixtures for translation engine tests."""

import pytest

from infrastructure.i18n import ResourceLoader
from tests.factories.i18n import write_json_resource, write_yaml_resource


@pytest.fixture
def mixed_translations_dir(tmp_path):
    """Directory mixing formats, a broken file and unrelated entries.

    - en.json: valid JSON
    - de.yml: valid YAML
    - fr.json: malformed JSON
    - notes.txt: unsupported extension
    - nested/: sub-directory
    """
    write_json_resource(tmp_path, "en.json", {"home": {"title": "Home"}, "ok": "OK"})
    write_yaml_resource(tmp_path, "de.yml", {"home": {"title": "Startseite"}})
    (tmp_path / "fr.json").write_text('{"home": {"title": "Accueil"', encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a resource", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    return tmp_path


@pytest.fixture
def loader(translations_dir):
    return ResourceLoader(translations_dir)
