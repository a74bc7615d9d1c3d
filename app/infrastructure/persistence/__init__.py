"""Persistence layer for view translations.

Provides storage backends for translation records, including the miss
records used to audit untranslated strings.
"""

from infrastructure.persistence.translation_store import (
    DuplicateTranslationError,
    TranslationStore,
)
from infrastructure.persistence.memory import InMemoryTranslationStore
from infrastructure.persistence.dynamodb_translations import DynamoDBTranslationStore
from infrastructure.persistence.conversion import convert_legacy_placeholders

__all__ = [
    "TranslationStore",
    "DuplicateTranslationError",
    "InMemoryTranslationStore",
    "DynamoDBTranslationStore",
    "convert_legacy_placeholders",
]
