"""Process-wide providers for settings and the translation service.

The translation cache only pays off when every caller shares one service,
so the service is built once per process from the environment. Tests build
their own service, or call cache_clear() on the providers.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translation_service
from infrastructure.i18n.service import TranslationService


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once from the environment."""
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """Shared TranslationService configured from get_settings().

    Returns:
        The same TranslationService instance on every call.
    """
    return create_translation_service(settings=get_settings())
