"""Factory functions for creating translation components.

Provides convenience functions for building a TranslationService from
application settings.
"""

from typing import Optional

import structlog

from infrastructure.configuration import Settings
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.service import CacheMonitor, TranslationService
from infrastructure.persistence.dynamodb_translations import DynamoDBTranslationStore
from infrastructure.persistence.memory import InMemoryTranslationStore
from infrastructure.persistence.translation_store import TranslationStore

logger = structlog.get_logger()


def create_translation_store(settings: Settings) -> TranslationStore:
    """Create the translation store selected by settings.

    Args:
        settings: Application settings.

    Returns:
        InMemoryTranslationStore or DynamoDBTranslationStore.
    """
    backend = settings.translations.STORE_BACKEND
    if backend == "dynamodb":
        return DynamoDBTranslationStore(
            table_name=settings.translations.TABLE_NAME,
            region=settings.aws.AWS_REGION,
            endpoint_url=settings.aws.DYNAMODB_ENDPOINT_URL,
        )
    return InMemoryTranslationStore()


def create_translation_service(
    settings: Optional[Settings] = None,
    store: Optional[TranslationStore] = None,
    cache_monitor: Optional[CacheMonitor] = None,
) -> TranslationService:
    """Create and configure a TranslationService instance.

    Args:
        settings: Application settings (default: loaded from the environment).
        store: Optional pre-configured store. If not provided, the backend
            named by TRANSLATION_STORE_BACKEND is created.
        cache_monitor: Optional hook notified before capacity-triggered clears.

    Returns:
        TranslationService: Configured translation service

    Usage:
        # Settings from the environment, store chosen by TRANSLATION_STORE_BACKEND
        service = create_translation_service()

        # Explicit store (tests, seeded stores)
        service = create_translation_service(store=InMemoryTranslationStore())
    """
    if settings is None:
        settings = Settings()
    if store is None:
        store = create_translation_store(settings)

    translation_settings = settings.translations
    service = TranslationService(
        store=store,
        cache=TranslationCache(max_size_bytes=translation_settings.max_cache_size_bytes),
        save_default_on_miss=translation_settings.SAVE_DEFAULT_ON_MISS,
        save_description_on_miss=translation_settings.SAVE_DESCRIPTION_ON_MISS,
        cache_monitor=cache_monitor,
        default_language=translation_settings.DEFAULT_LANGUAGE,
    )

    logger.info(
        "translation_service_created",
        store_backend=type(store).__name__,
        max_cache_size_bytes=translation_settings.max_cache_size_bytes,
        save_default_on_miss=translation_settings.SAVE_DEFAULT_ON_MISS,
        save_description_on_miss=translation_settings.SAVE_DESCRIPTION_ON_MISS,
    )
    return service
