"""Shared fixtures for the translation engine test suite."""

import pytest

from infrastructure.i18n.service import TranslationService
from infrastructure.persistence import InMemoryTranslationStore
from tests.factories.i18n import make_language, make_seeded_store


@pytest.fixture
def polish():
    """Polish language (one / few / many)."""
    return make_language("pl-PL")


@pytest.fixture
def english():
    """English language (one / other)."""
    return make_language("en-US")


@pytest.fixture
def memory_store():
    """Empty in-memory translation store."""
    return InMemoryTranslationStore()


@pytest.fixture
def seeded_store():
    """In-memory store holding the Polish "{{count}} file" forms."""
    return make_seeded_store()


@pytest.fixture
def translation_service(seeded_store):
    """TranslationService backed by the seeded store."""
    return TranslationService(seeded_store)


@pytest.fixture(autouse=True)
def translation_env(monkeypatch):
    """Keep translation settings from leaking in through the environment."""
    for name in (
        "TRANSLATION_MAX_CACHE_SIZE_KB",
        "TRANSLATION_SAVE_DEFAULT_ON_MISS",
        "TRANSLATION_SAVE_DESCRIPTION_ON_MISS",
        "TRANSLATION_DEFAULT_LANGUAGE",
        "TRANSLATION_STORE_BACKEND",
        "TRANSLATION_TABLE_NAME",
        "DYNAMODB_ENDPOINT_URL",
    ):
        monkeypatch.delenv(name, raising=False)
