"""In-memory translation store.

Suitable for tests, local development and single-process deployments where
translations are seeded at startup.
"""

import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from infrastructure.i18n.models import TranslationKey, TranslationRecord
from infrastructure.logging import get_module_logger
from infrastructure.persistence.translation_store import (
    DuplicateTranslationError,
    TranslationStore,
)

logger = get_module_logger()


class InMemoryTranslationStore(TranslationStore):
    """Dict-backed translation store guarded by a re-entrant lock.

    transaction() holds the lock, so a pick followed by a create inside it
    cannot interleave with another thread doing the same. Records are
    copied in and out; callers never share the stored instances.
    """

    def __init__(self):
        self._records: Dict[TranslationKey, TranslationRecord] = {}
        self._lock = threading.RLock()
        logger.info("initialized_memory_translation_store")

    def pick(
        self,
        key: str,
        language_code: str,
        plural_index: int,
        namespace: Optional[str] = None,
    ) -> Optional[TranslationRecord]:
        lookup = TranslationKey(key, language_code, plural_index, namespace)
        with self._lock:
            record = self._records.get(lookup)
            return replace(record) if record else None

    def create(self, record: TranslationRecord) -> TranslationRecord:
        with self._lock:
            if record.translation_key in self._records:
                raise DuplicateTranslationError(record.translation_key)
            self._records[record.translation_key] = replace(record)
        logger.debug(
            "translation_record_created",
            key=record.key,
            language_code=record.language_code,
            plural_index=record.plural_index,
            missing=record.is_missing,
        )
        return replace(record)

    def update(self, record: TranslationRecord, text: Optional[str]) -> TranslationRecord:
        with self._lock:
            stored = self._records.get(record.translation_key)
            if stored is None:
                raise KeyError(f"Translation record not found: {record.translation_key}")
            stored.text = text
            record.text = text
            return replace(stored)

    def save(self, record: TranslationRecord) -> TranslationRecord:
        with self._lock:
            if record.translation_key not in self._records:
                raise KeyError(f"Translation record not found: {record.translation_key}")
            self._records[record.translation_key] = replace(record)
            return replace(record)

    def transaction(self) -> threading.RLock:
        return self._lock

    def records(
        self,
        language_code: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> List[TranslationRecord]:
        with self._lock:
            return [
                replace(record)
                for record in self._records.values()
                if (language_code is None or record.language_code == language_code)
                and (namespace is None or record.namespace == namespace)
            ]

    def clear(self) -> None:
        """Drop every record (for testing)."""
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            missing = sum(1 for record in self._records.values() if record.is_missing)
            return {
                "backend": "memory",
                "records": len(self._records),
                "missing": missing,
            }
