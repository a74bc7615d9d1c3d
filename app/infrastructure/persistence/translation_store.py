"""Translation store abstract base class.

A translation store persists TranslationRecords. It is the source of truth;
the translation cache is only an accelerator in front of it.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Dict, List, Optional

from infrastructure.i18n.models import TranslationKey, TranslationRecord


class DuplicateTranslationError(Exception):
    """Raised by create() when a record already exists for the same key."""

    def __init__(self, key: TranslationKey):
        self.key = key
        super().__init__(f"Translation record already exists: {key}")


class TranslationStore(ABC):
    """Abstract base class for translation store implementations.

    Implementations must keep at most one record per
    (key, language_code, plural_index, namespace). pick(), create() and
    update() called inside one transaction() block form one atomic unit.
    """

    @abstractmethod
    def pick(
        self,
        key: str,
        language_code: str,
        plural_index: int,
        namespace: Optional[str] = None,
    ) -> Optional[TranslationRecord]:
        """Exact lookup of one translation variant.

        Args:
            key: Source text or message identifier.
            language_code: Locale identifier.
            plural_index: Plural-form index.
            namespace: Optional namespace.

        Returns:
            The record, or None if not found.
        """
        pass

    @abstractmethod
    def create(self, record: TranslationRecord) -> TranslationRecord:
        """Persist a new record.

        Args:
            record: Record to persist.

        Returns:
            The persisted record.

        Raises:
            DuplicateTranslationError: If a record for the same key exists.
        """
        pass

    @abstractmethod
    def update(self, record: TranslationRecord, text: Optional[str]) -> TranslationRecord:
        """Replace the text of an existing record.

        Args:
            record: Record previously returned by pick() or create().
            text: New text (None turns the record back into a miss record).

        Returns:
            The updated record.
        """
        pass

    @abstractmethod
    def save(self, record: TranslationRecord) -> TranslationRecord:
        """Overwrite every attribute of an existing record.

        Args:
            record: Record with updated attributes.

        Returns:
            The saved record.
        """
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """Context manager grouping store calls into one atomic unit."""
        pass

    @abstractmethod
    def records(
        self,
        language_code: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> List[TranslationRecord]:
        """List stored records, optionally filtered.

        Args:
            language_code: Only records of this locale.
            namespace: Only records of this namespace.

        Returns:
            Matching records.
        """
        pass

    def missing(self, language_code: Optional[str] = None) -> List[TranslationRecord]:
        """List miss records (requested but untranslated variants).

        Args:
            language_code: Only misses of this locale.

        Returns:
            Records whose text is None.
        """
        return [r for r in self.records(language_code=language_code) if r.is_missing]

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics.

        Returns:
            Dict with store statistics (implementation-specific).
        """
        pass
