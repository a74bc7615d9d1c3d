"""Translation engine infrastructure settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class TranslationSettings(InfrastructureSettings):
    """Translation cache and store configuration.

    Environment Variables:
        TRANSLATION_MAX_CACHE_SIZE_KB: Cache budget in kilobytes (default: 8192 = 8MB).
            This is a rough estimate, the cache can grow slightly past it before
            being cleared.
        TRANSLATION_SAVE_DEFAULT_ON_MISS: Store the caller's default text on miss records
        TRANSLATION_SAVE_DESCRIPTION_ON_MISS: Store the caller's description on miss records
        TRANSLATION_DEFAULT_LANGUAGE: Language code used by TranslationService.translate
        TRANSLATION_STORE_BACKEND: Persistent store backend ("memory" or "dynamodb")
        TRANSLATION_TABLE_NAME: DynamoDB table holding translation records

    Example:
        ```python
        from infrastructure.services.providers import get_settings

        settings = get_settings()

        max_bytes = settings.translations.max_cache_size_bytes
        ```
    """

    MAX_CACHE_SIZE_KB: int = Field(
        default=8192, ge=0, alias="TRANSLATION_MAX_CACHE_SIZE_KB"
    )
    SAVE_DEFAULT_ON_MISS: bool = Field(
        default=False, alias="TRANSLATION_SAVE_DEFAULT_ON_MISS"
    )
    SAVE_DESCRIPTION_ON_MISS: bool = Field(
        default=False, alias="TRANSLATION_SAVE_DESCRIPTION_ON_MISS"
    )
    DEFAULT_LANGUAGE: str = Field(default="en-US", alias="TRANSLATION_DEFAULT_LANGUAGE")
    STORE_BACKEND: Literal["memory", "dynamodb"] = Field(
        default="memory", alias="TRANSLATION_STORE_BACKEND"
    )
    TABLE_NAME: str = Field(default="view_translations", alias="TRANSLATION_TABLE_NAME")

    @property
    def max_cache_size_bytes(self) -> int:
        """Cache budget converted to bytes.

        Returns:
            MAX_CACHE_SIZE_KB * 1024
        """
        return self.MAX_CACHE_SIZE_KB * 1024
