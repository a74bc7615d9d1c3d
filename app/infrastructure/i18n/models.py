"""Translation models for the view translation engine.

Defines the core data structures shared by the cache, the persistent store
and the translation service.
"""

from dataclasses import dataclass, field
from typing import Optional

from infrastructure.i18n.plurals import PluralRule, get_plural_rule, plural_index


@dataclass(frozen=True)
class Language:
    """A locale and its pluralization capability.

    Attributes:
        code: Locale identifier (e.g., "en-US", "pl-PL").
        plural_rule: Callable mapping a count to a plural-form index.
    """

    code: str
    plural_rule: Optional[PluralRule] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Create a Language using the built-in plural rule for its code.

        Args:
            code: Locale identifier (e.g., "pl-PL").

        Returns:
            Language instance.
        """
        return cls(code=code, plural_rule=get_plural_rule(code))

    def plural_index(self, count: Optional[float]) -> int:
        """Return the plural-form index for a count.

        Args:
            count: Count to pluralize, or None when no count was given.

        Returns:
            Plural-form index; 1 when count is None.
        """
        return plural_index(self.plural_rule, count)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class TranslationKey:
    """Identifies one stored or cached text variant.

    Frozen to ensure immutability and hashability for caching.

    Attributes:
        key: Source text or message identifier.
        language_code: Locale identifier.
        plural_index: Plural-form index (0 is the zero-form).
        namespace: Optional namespace.
    """

    key: str
    language_code: str
    plural_index: int
    namespace: Optional[str] = None

    @property
    def cache_key(self) -> str:
        """Composite string key used by the cache and the DynamoDB store.

        Every part is length-prefixed, so keys or namespaces containing the
        separator cannot collide with other tuples. A missing namespace is
        encoded differently from an empty one.

        Returns:
            Composite key (e.g., "4:file|5:pl-PL|1:2|-").
        """
        parts = [self.key, self.language_code, str(self.plural_index)]
        encoded = [f"{len(part)}:{part}" for part in parts]
        if self.namespace is None:
            encoded.append("-")
        else:
            encoded.append(f"{len(self.namespace)}:{self.namespace}")
        return "|".join(encoded)

    def __str__(self) -> str:
        parts = [self.key, self.language_code, str(self.plural_index)]
        if self.namespace is not None:
            parts.append(self.namespace)
        return ":".join(parts)


@dataclass
class TranslationRecord:
    """A persisted translation variant.

    A record whose text is None is a miss record: the translation was
    requested but never supplied. An empty zero-form slot (plural index 0)
    is optional and never counts as a miss.

    Attributes:
        key: Source text or message identifier.
        language_code: Locale identifier.
        plural_index: Plural-form index (0 is the zero-form).
        text: Translated text, or None for a miss record.
        default_text: Caller default recorded on miss (optional).
        description: Caller description recorded on miss (optional).
        namespace: Optional namespace.
    """

    key: str
    language_code: str
    plural_index: int
    text: Optional[str] = None
    default_text: Optional[str] = None
    description: Optional[str] = None
    namespace: Optional[str] = None

    @property
    def translation_key(self) -> TranslationKey:
        return TranslationKey(
            key=self.key,
            language_code=self.language_code,
            plural_index=self.plural_index,
            namespace=self.namespace,
        )

    @property
    def is_missing(self) -> bool:
        return self.text is None and self.plural_index != 0


@dataclass
class CacheEntry:
    """A resolved text held by the translation cache.

    Attributes:
        cache_key: Composite key of the variant.
        value: Resolved text.
        size_bytes: Measured size, len(key) + len(value).
    """

    cache_key: str
    value: str
    size_bytes: int
