"""Translation service: cached, pluralized, interpolated view translations.

The service resolves (key, language, argument) into text: cache first, then
the persistent store, then the caller default. Lookups of variants that do
not exist leave a miss record in the store for auditing.

One instance is meant to be shared by every caller of the process so the
cache amortizes across requests. Construct it explicitly (or through
infrastructure.i18n.factory) and pass it where it is needed.

Consistency: set() invalidates the cache entry before writing the store,
and both fetch() resolution and each set() slot run under the service lock.
Sequential callers always read their own writes; a reader racing a writer
may get the previous text once.
"""

import threading
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from infrastructure.i18n.arguments import argument_count, classify_argument
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.formatter import interpolate
from infrastructure.i18n.models import Language, TranslationKey, TranslationRecord
from infrastructure.logging import get_module_logger
from infrastructure.persistence.translation_store import (
    DuplicateTranslationError,
    TranslationStore,
)

logger = get_module_logger()

LanguageLike = Union[Language, str]


class CacheMonitor(Protocol):
    """Instrumentation hook notified when the cache is about to be cleared.

    Implementations must not mutate the cache.
    """

    def on_full_cache(self, service: "TranslationService") -> None: ...


def _as_language(language: Optional[LanguageLike]) -> Optional[Language]:
    if language is None or isinstance(language, Language):
        return language
    return Language.from_code(language)


class TranslationService:
    """Resolves and stores view translations.

    Usage:
        store = InMemoryTranslationStore()
        service = TranslationService(store)

        polish = Language.from_code("pl-PL")
        service.set("{{count}} file", polish, ["{{count}} plik", "{{count}} pliki", "{{count}} plików"])
        service.fetch("{{count}} file", polish, arg={"count": 22})  # "22 pliki"
    """

    def __init__(
        self,
        store: TranslationStore,
        cache: Optional[TranslationCache] = None,
        save_default_on_miss: bool = False,
        save_description_on_miss: bool = False,
        cache_monitor: Optional[CacheMonitor] = None,
        default_language: Optional[LanguageLike] = None,
    ):
        """Initialize TranslationService.

        Args:
            store: Persistent translation store (source of truth).
            cache: Optional pre-configured cache (default: 8MB budget).
            save_default_on_miss: Record the caller default on miss records.
            save_description_on_miss: Record the caller description on miss records.
            cache_monitor: Optional hook notified before a capacity-triggered clear.
                An on_full callback already set on the cache is kept and runs first.
            default_language: Language used by translate().
        """
        self._store = store
        self._cache = cache if cache is not None else TranslationCache()
        self._cache_on_full = self._cache.on_full
        self._cache.on_full = self._on_full_cache
        self._lock = threading.RLock()
        self.save_default_on_miss = save_default_on_miss
        self.save_description_on_miss = save_description_on_miss
        self.cache_monitor = cache_monitor
        self.default_language = _as_language(default_language)
        logger.info(
            "initialized_translation_service",
            max_cache_size_bytes=self._cache.max_size_bytes,
            default_language=str(self.default_language),
        )

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    @property
    def store(self) -> TranslationStore:
        return self._store

    def fetch(
        self,
        key: str,
        language: Optional[LanguageLike],
        default: Optional[str] = None,
        arg: Any = None,
        namespace: Optional[str] = None,
        description: Optional[str] = None,
    ) -> str:
        """Resolve and interpolate a translation.

        A number, or a mapping with a "count" entry, selects the plural
        form. A count of zero looks up the zero-form first and falls back to
        the language's plural form. Unknown variants resolve to the default
        (or the key) and are recorded as misses.

        Args:
            key: Source text or message identifier.
            language: Language (or locale code). None returns the default
                without touching the cache or the store.
            default: Text used when no translation exists (default: key).
            arg: Interpolation argument: number, list/tuple, mapping, or scalar.
            namespace: Optional namespace.
            description: Context recorded on miss records when enabled.

        Returns:
            Translated and interpolated text.
        """
        real_default = default if default is not None else key
        language = _as_language(language)
        if language is None:
            return real_default

        argument = classify_argument(arg)
        text = self._resolve(
            key, language, real_default, argument_count(argument), namespace, description
        )
        return interpolate(text, argument)

    def translate(
        self,
        key: str,
        default: Optional[str] = None,
        arg: Any = None,
        namespace: Optional[str] = None,
        description: Optional[str] = None,
    ) -> str:
        """Fetch a translation in the service's default language.

        Args:
            key: Source text or message identifier.
            default: Text used when no translation exists (default: key).
            arg: Interpolation argument.
            namespace: Optional namespace.
            description: Context recorded on miss records when enabled.

        Returns:
            Translated and interpolated text.
        """
        return self.fetch(
            key,
            self.default_language,
            default=default,
            arg=arg,
            namespace=namespace,
            description=description,
        )

    def set(
        self,
        key: str,
        language: Optional[LanguageLike],
        translations: Union[str, Sequence[Optional[str]], None],
        zero_form: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> None:
        """Store translations for every plural form of a key.

        A list or tuple fills plural forms 1..n, a single value fills form 1
        only. Index 0 always receives zero_form (None when not given).

        Args:
            key: Source text or message identifier.
            language: Language (or locale code).
            translations: One translation, or one per plural form.
            zero_form: Optional zero-form translation.
            namespace: Optional namespace.

        Raises:
            ValueError: If no language is given.
        """
        language = _as_language(language)
        if language is None:
            raise ValueError("No language set")

        if isinstance(translations, (list, tuple)):
            forms = [zero_form, *translations]
        else:
            forms = [zero_form, translations]

        for plural_index, text in enumerate(forms):
            self._set_pluralized(key, language, plural_index, text, namespace)

        logger.info(
            "translations_set",
            key=key,
            language_code=language.code,
            namespace=namespace,
            forms=len(forms),
        )

    def missing_translations(
        self, language: Optional[LanguageLike] = None
    ) -> List[TranslationRecord]:
        """List recorded misses, optionally for one language."""
        language = _as_language(language)
        return self._store.missing(language_code=language.code if language else None)

    def cache_count(self) -> int:
        """Number of entries in the cache."""
        return self._cache.count

    def cache_reset(self) -> None:
        """Clear the cache and its hit statistics."""
        self._cache.reset()

    def hit_ratio(self) -> float:
        """Cache hits / cache queries (NaN before the first query)."""
        return self._cache.hit_ratio()

    def cache_stats(self) -> Dict[str, Any]:
        return self._cache.get_stats()

    def _resolve(
        self,
        key: str,
        language: Language,
        real_default: str,
        count: Optional[Any],
        namespace: Optional[str],
        description: Optional[str],
    ) -> str:
        zero_form = count is not None and count == 0
        plural_index = language.plural_index(count)
        lookup_index = 0 if zero_form else plural_index
        lookup = TranslationKey(key, language.code, lookup_index, namespace)

        with self._lock:
            cached = self._cache.get(lookup)
            if cached is not None:
                return cached

            result = self._fetch_text(
                key, language, lookup_index, namespace, real_default, description
            )
            # no zero-form stored: use the language's plural form
            if result is None and zero_form:
                result = self._fetch_text(
                    key, language, plural_index, namespace, real_default, description
                )
            if result is None:
                result = real_default

            self._cache.put(lookup, result)
            return result

    def _fetch_text(
        self,
        key: str,
        language: Language,
        plural_index: int,
        namespace: Optional[str],
        real_default: str,
        description: Optional[str],
    ) -> Optional[str]:
        with self._store.transaction():
            record = self._store.pick(key, language.code, plural_index, namespace)
            # zero-forms are optional, never audited as missing
            if record is None and plural_index != 0:
                record = self._record_miss(
                    key, language, plural_index, namespace, real_default, description
                )
        return record.text if record else None

    def _record_miss(
        self,
        key: str,
        language: Language,
        plural_index: int,
        namespace: Optional[str],
        real_default: str,
        description: Optional[str],
    ) -> Optional[TranslationRecord]:
        record = TranslationRecord(
            key=key,
            language_code=language.code,
            plural_index=plural_index,
            text=None,
            namespace=namespace,
        )
        if self.save_default_on_miss:
            record.default_text = real_default
        if self.save_description_on_miss:
            record.description = description

        try:
            record = self._store.create(record)
        except DuplicateTranslationError:
            # another process recorded it first
            return self._store.pick(key, language.code, plural_index, namespace)

        logger.info(
            "translation_miss_recorded",
            key=key,
            language_code=language.code,
            plural_index=plural_index,
            namespace=namespace,
        )
        return record

    def _set_pluralized(
        self,
        key: str,
        language: Language,
        plural_index: int,
        text: Optional[str],
        namespace: Optional[str],
    ) -> None:
        lookup = TranslationKey(key, language.code, plural_index, namespace)
        with self._lock:
            self._cache.invalidate(lookup)
            with self._store.transaction():
                record = self._store.pick(key, language.code, plural_index, namespace)
                if record is None:
                    try:
                        self._create_text(key, language, plural_index, text, namespace)
                        return
                    except DuplicateTranslationError:
                        record = self._store.pick(key, language.code, plural_index, namespace)
                if record is None:
                    # the conflicting record was deleted before it could be read
                    self._create_text(key, language, plural_index, text, namespace)
                else:
                    self._store.update(record, text)

    def _create_text(
        self,
        key: str,
        language: Language,
        plural_index: int,
        text: Optional[str],
        namespace: Optional[str],
    ) -> None:
        self._store.create(
            TranslationRecord(
                key=key,
                language_code=language.code,
                plural_index=plural_index,
                text=text,
                namespace=namespace,
            )
        )

    def _on_full_cache(self) -> None:
        if self._cache_on_full is not None:
            self._cache_on_full()
        if self.cache_monitor is not None:
            self.cache_monitor.on_full_cache(self)
