"""Feature-level fixtures for i18n system tests.

Provides language directories, raw translation documents and registries
for resolution and language-switching scenarios.
"""

import json

import pytest

from lingua.i18n import FileSystemResourceLoader, LanguageRegistry

EN_TRANSLATIONS = {
    "welcome": "Welcome",
    "greeting": "Hello, {{name}}!",
    "items_count": "You have {{count}} items",
    "menu": {
        "file": {"open": "Open", "save": "Save", "exit": "Exit"},
        "edit": {"copy": "Copy", "paste": "Paste"},
    },
}

DE_TRANSLATIONS = {
    "welcome": "Willkommen",
    "greeting": "Hallo, {{name}}!",
    "items_count": "Du hast {{count}} Elemente",
    "menu": {
        "file": {"open": "Öffnen", "save": "Speichern", "exit": "Beenden"},
        "edit": {"copy": "Kopieren", "paste": "Einfügen"},
    },
}


def write_language(directory, code, data):
    path = directory / f"{code}.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def en_translations():
    return json.loads(json.dumps(EN_TRANSLATIONS))


@pytest.fixture
def de_translations():
    return json.loads(json.dumps(DE_TRANSLATIONS))


@pytest.fixture
def languages_dir(tmp_path):
    """Create a directory with valid en.json and de.json files.

    Also holds a non-JSON file and a sub-directory that discovery must skip.
    """
    directory = tmp_path / "languages"
    directory.mkdir()
    write_language(directory, "en", EN_TRANSLATIONS)
    write_language(directory, "de", DE_TRANSLATIONS)
    (directory / "README.txt").write_text("not a language", encoding="utf-8")
    (directory / "archive").mkdir()
    return directory


@pytest.fixture
def fs_loader(languages_dir):
    return FileSystemResourceLoader(languages_dir)


@pytest.fixture
def registry():
    """Empty registry with system locale detection disabled."""
    return LanguageRegistry(locale_detector=None)


@pytest.fixture
def ready_registry(languages_dir):
    """Registry initialized from languages_dir, active language "en"."""
    registry = LanguageRegistry(locale_detector=None)
    registry.initialize(languages_dir)
    return registry


@pytest.fixture
def de_registry(registry):
    """Registry holding only the nested German menu table, active as "de"."""
    registry.load_from_text(
        "de", json.dumps({"menu": {"file": {"save": "Speichern"}}})
    )
    registry.set_language("de")
    return registry
