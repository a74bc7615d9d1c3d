"""Feature-level fixtures for translation engine tests."""

import pytest

from infrastructure.i18n import TranslationCache
from infrastructure.i18n.service import TranslationService
from tests.factories.i18n import RecordingCacheMonitor


@pytest.fixture
def cache():
    """Translation cache with the default 8MB budget."""
    return TranslationCache()


@pytest.fixture
def small_cache():
    """Translation cache with a 20-character budget."""
    return TranslationCache(max_size_bytes=20)


@pytest.fixture
def cache_monitor():
    """Cache monitor recording its notifications."""
    return RecordingCacheMonitor()


@pytest.fixture
def auditing_service(memory_store):
    """Service recording defaults and descriptions on miss records."""
    return TranslationService(
        memory_store,
        save_default_on_miss=True,
        save_description_on_miss=True,
    )


@pytest.fixture
def named_arguments():
    """Named interpolation scenarios: (template, values, expected)."""
    return [
        (
            "{{number}} {{adjective}} {{name}}",
            {"number": 3, "adjective": "colored", "name": "toucans"},
            "3 colored toucans",
        ),
        (
            "%{number} %{adjective} %{name}",
            {"number": 3, "adjective": "colorati", "name": "tucani"},
            "3 colorati tucani",
        ),
        (
            "{{name}} has {{count}} dogs",
            {"name": "Nicola", "count": 1},
            "Nicola has 1 dogs",
        ),
    ]
