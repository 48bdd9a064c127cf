"""Feature-level fixtures for i18n system tests."""

import json

import pytest
import yaml

from infrastructure.i18n import (
    JSONTranslationLoader,
    LanguagePair,
    LanguageResolver,
    MemoryStorage,
)


@pytest.fixture
def json_translations_dir(tmp_path):
    """Directory with fr.json, en.json and a second English domain file."""
    (tmp_path / "fr.json").write_text(
        json.dumps(
            {
                "hero": {"title": "Bonjour", "subtitle": "Développeur web"},
                "article": {"read_time": "{{minutes}} min de lecture"},
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    (tmp_path / "en.json").write_text(
        json.dumps({"hero": {"title": "Hello", "subtitle": ""}}), encoding="utf-8"
    )
    (tmp_path / "footer.en.json").write_text(
        json.dumps({"footer": {"contact": "Contact me"}}), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def yaml_translations_dir(tmp_path):
    """Directory with home.fr.yml and home.en.yml."""
    with open(tmp_path / "home.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump({"hero": {"title": "Bonjour {name}"}}, f, allow_unicode=True)
    with open(tmp_path / "home.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"hero": {"title": "Hello {name}"}}, f)
    return tmp_path


@pytest.fixture
def json_loader(json_translations_dir):
    return JSONTranslationLoader(json_translations_dir, use_cache=False)


@pytest.fixture
def languages():
    return LanguagePair(default="fr", alternate="en")


@pytest.fixture
def make_resolver(languages):
    """Build a LanguageResolver over in-memory storage."""

    def _make(stored=None, navigator_languages=("fr-FR", "fr"), storage=None):
        if storage is None:
            storage = MemoryStorage({"lang": stored} if stored else None)
        return LanguageResolver(
            languages=languages,
            storage=storage,
            navigator_languages=navigator_languages,
        )

    return _make
