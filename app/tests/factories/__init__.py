"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    POLISH_FILE_FORMS,
    RecordingCacheMonitor,
    make_language,
    make_seeded_store,
    make_translation_key,
    make_translation_record,
)

__all__ = [
    "POLISH_FILE_FORMS",
    "RecordingCacheMonitor",
    "make_language",
    "make_seeded_store",
    "make_translation_key",
    "make_translation_record",
]
