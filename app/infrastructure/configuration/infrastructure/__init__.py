"""Settings for the translation engine's own components."""

from infrastructure.configuration.infrastructure.translations import (
    TranslationSettings,
)

__all__ = ["TranslationSettings"]
