"""Feature-level fixtures for translation system tests.

Provides translation payloads, storage backends and recording callbacks for
resolver and session scenarios.
"""

import json
from unittest.mock import MagicMock

import pytest

from i18n_provider.translation import InMemoryLanguageStorage
from tests.factories.i18n import (
    make_document,
    make_raw_translations,
    make_resolver,
    make_session_config,
    make_translation_trees,
)


@pytest.fixture
def translation_trees():
    """Parsed trees for en (fallback), fr and ar."""
    return make_translation_trees()


@pytest.fixture
def raw_translations(translation_trees):
    """Raw JSON payloads for en (fallback), fr and ar."""
    return make_raw_translations(translation_trees)


@pytest.fixture
def greeting_translations():
    """Minimal two-language payloads used by the switching scenarios."""
    return {
        "en": json.dumps({"greeting": "Hello"}),
        "fr": json.dumps({"greeting": "Bonjour"}),
    }


@pytest.fixture
def resolver(translation_trees):
    """Resolver over the sample trees, fallback language selected."""
    return make_resolver(translation_trees)


@pytest.fixture
def memory_storage():
    """Empty session-style storage."""
    return InMemoryLanguageStorage()


@pytest.fixture
def document():
    """Document-like object recording the `dir` attribute."""
    return make_document()


@pytest.fixture
def on_change():
    """Recording change callback."""
    return MagicMock(name="on_change")


@pytest.fixture
def on_error():
    """Recording error callback."""
    return MagicMock(name="on_error")


@pytest.fixture
def session_config(raw_translations, memory_storage, on_change, on_error):
    """SessionConfig wired to in-memory storage and recording callbacks."""
    return make_session_config(
        translations=raw_translations,
        storage=memory_storage,
        on_change=on_change,
        on_error=on_error,
    )


@pytest.fixture
def translations_dir(tmp_path, translation_trees):
    """Directory with one JSON file per language.

    Returns a directory structure like:
    - ar.json
    - en.json
    - fr.json
    """
    for language, tree in translation_trees.items():
        (tmp_path / f"{language}.json").write_text(
            json.dumps(tree, ensure_ascii=False), encoding="utf-8"
        )
    return tmp_path
