"""Unit tests for the in-memory translation store."""

import pytest

from infrastructure.persistence import DuplicateTranslationError
from tests.factories.i18n import make_translation_record

pytestmark = pytest.mark.unit


class TestPickAndCreate:
    """Tests for pick() and create()."""

    def test_pick_absent(self, memory_store):
        assert memory_store.pick("Save", "en-US", 1) is None

    def test_create_then_pick(self, memory_store):
        memory_store.create(make_translation_record())
        record = memory_store.pick("{{count}} file", "pl-PL", 1)
        assert record.text == "{{count}} plik"

    def test_create_duplicate_raises(self, memory_store):
        memory_store.create(make_translation_record())
        with pytest.raises(DuplicateTranslationError) as exc_info:
            memory_store.create(make_translation_record(text="other"))
        assert exc_info.value.key == make_translation_record().translation_key

    def test_namespace_is_part_of_identity(self, memory_store):
        memory_store.create(make_translation_record(namespace="admin"))
        assert memory_store.pick("{{count}} file", "pl-PL", 1) is None
        assert memory_store.pick("{{count}} file", "pl-PL", 1, "admin") is not None

    def test_returned_records_are_copies(self, memory_store):
        memory_store.create(make_translation_record())
        picked = memory_store.pick("{{count}} file", "pl-PL", 1)
        picked.text = "changed"
        assert memory_store.pick("{{count}} file", "pl-PL", 1).text == "{{count}} plik"


class TestUpdateAndSave:
    """Tests for update() and save()."""

    def test_update_text(self, seeded_store):
        record = seeded_store.pick("{{count}} file", "pl-PL", 2)
        seeded_store.update(record, "{{count}} dokumenty")
        assert record.text == "{{count}} dokumenty"
        assert seeded_store.pick("{{count}} file", "pl-PL", 2).text == "{{count}} dokumenty"

    def test_update_absent_raises(self, memory_store):
        with pytest.raises(KeyError):
            memory_store.update(make_translation_record(), "x")

    def test_save_replaces_record(self, seeded_store):
        record = seeded_store.pick("{{count}} file", "pl-PL", 1)
        record.default_text = "{{count}} file"
        seeded_store.save(record)
        assert seeded_store.pick("{{count}} file", "pl-PL", 1).default_text == "{{count}} file"

    def test_save_absent_raises(self, memory_store):
        with pytest.raises(KeyError):
            memory_store.save(make_translation_record())


class TestListing:
    """Tests for records(), missing() and stats."""

    def test_records_filter(self, memory_store):
        memory_store.create(make_translation_record(language_code="pl-PL"))
        memory_store.create(make_translation_record(language_code="de-DE"))
        memory_store.create(make_translation_record(language_code="de-DE", namespace="admin"))

        assert len(memory_store.records()) == 3
        assert len(memory_store.records(language_code="de-DE")) == 2
        assert len(memory_store.records(namespace="admin")) == 1

    def test_missing(self, memory_store):
        memory_store.create(make_translation_record(plural_index=1, text=None))
        memory_store.create(make_translation_record(plural_index=2))
        memory_store.create(make_translation_record(plural_index=0, text=None))

        assert [r.plural_index for r in memory_store.missing()] == [1]

    def test_stats_and_clear(self, seeded_store):
        seeded_store.create(make_translation_record(key="Save", text=None))
        assert seeded_store.get_stats() == {"backend": "memory", "records": 4, "missing": 1}

        seeded_store.clear()
        assert len(seeded_store) == 0

    def test_transaction_is_reentrant(self, seeded_store):
        with seeded_store.transaction():
            with seeded_store.transaction():
                assert seeded_store.pick("{{count}} file", "pl-PL", 1) is not None
