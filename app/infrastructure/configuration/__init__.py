"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the translation
engine using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Translation cache/store settings class
    AwsSettings: AWS integration settings class

Example:
    ```python
    from infrastructure.services.providers import get_settings

    settings = get_settings()

    max_bytes = settings.translations.max_cache_size_bytes
    backend = settings.translations.STORE_BACKEND
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.translations import (
    TranslationSettings,
)
from infrastructure.configuration.integrations.aws import AwsSettings

__all__ = ["Settings", "TranslationSettings", "AwsSettings"]
