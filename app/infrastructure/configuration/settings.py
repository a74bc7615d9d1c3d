"""Top-level Settings object aggregating every configuration section."""

from typing import Dict, Type

from pydantic_settings import BaseSettings

from infrastructure.configuration.base import ENV_SETTINGS_CONFIG
from infrastructure.configuration.infrastructure import TranslationSettings
from infrastructure.configuration.integrations import AwsSettings

_SECTIONS: Dict[str, Type[BaseSettings]] = {
    "aws": AwsSettings,
    "translations": TranslationSettings,
}


class Settings(BaseSettings):
    """Translation engine settings.

    Each section reads its own environment variables:

    - ``aws``: AWS region and optional DynamoDB endpoint
    - ``translations``: cache budget, miss recording, default language,
      store backend

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        settings = Settings()
        store_backend = settings.translations.STORE_BACKEND

        # override a section in tests
        settings = Settings(translations=TranslationSettings(TRANSLATION_MAX_CACHE_SIZE_KB=1))
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    aws: AwsSettings
    translations: TranslationSettings

    model_config = ENV_SETTINGS_CONFIG

    def __init__(self, **kwargs):
        """Load every section not passed explicitly from the environment."""
        for name, section in _SECTIONS.items():
            kwargs.setdefault(name, section())
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no deployment prefix is set."""
        return not self.PREFIX
