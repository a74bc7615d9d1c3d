"""i18n system - database-backed view translations.

Resolves (key, language, argument) into localized text through a bounded
in-memory cache in front of a persistent translation store.

Main components:
- models: Language, TranslationKey, TranslationRecord, CacheEntry
- plurals: per-language plural rules
- arguments: interpolation argument variants
- formatter: interpolate() for positional, named and legacy placeholders
- cache: TranslationCache with size accounting and hit statistics
- service: TranslationService (fetch, set, translate), imported from
  infrastructure.i18n.service
- factory: create_translation_service from settings
"""

from infrastructure.i18n.arguments import (
    NO_ARGUMENT,
    CountArgument,
    NamedArgument,
    NoArgument,
    PositionalArgument,
    ScalarArgument,
    classify_argument,
)
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.formatter import interpolate
from infrastructure.i18n.models import (
    CacheEntry,
    Language,
    TranslationKey,
    TranslationRecord,
)
from infrastructure.i18n.plurals import get_plural_rule

__all__ = [
    "Language",
    "TranslationKey",
    "TranslationRecord",
    "CacheEntry",
    "get_plural_rule",
    "CountArgument",
    "PositionalArgument",
    "NamedArgument",
    "ScalarArgument",
    "NoArgument",
    "NO_ARGUMENT",
    "classify_argument",
    "interpolate",
    "TranslationCache",
]
