"""Unit tests for InMemoryOverrideRepository."""

import pytest

from modules.localization.overrides import InMemoryOverrideRepository, OverrideRecord
from modules.localization.overrides.models import override_id_for


MAIN_BODY_CAPTION = "/contenttypes/icontentdata/properties/mainbody/caption"


def _record(key=MAIN_BODY_CAPTION, language="en", value="Body"):
    return OverrideRecord(key=key, language=language, value=value)


@pytest.mark.unit
class TestOverrideRecord:
    """Tests for OverrideRecord defaults."""

    def test_id_is_derived_from_key_and_language(self):
        record = _record()

        assert record.id == override_id_for(record.key, "en")
        assert record.id == _record(value="Other").id
        assert record.id != _record(language="sv").id

    def test_modified_at_defaults_to_utc_now(self):
        record = _record()

        assert record.modified_at is not None
        assert record.modified_at.tzinfo is not None
        assert record.modified_by == "System"
        assert record.cache_key == f"{record.key}|en"


@pytest.mark.unit
class TestInMemoryOverrideRepository:
    """Tests for the in-memory repository."""

    def test_upsert_replaces_same_key_and_language(self):
        repository = InMemoryOverrideRepository()
        repository.upsert(_record(value="One"))
        repository.upsert(_record(value="Two"))

        records = repository.list_all()

        assert len(records) == 1
        assert records[0].value == "Two"

    def test_get(self):
        repository = InMemoryOverrideRepository()
        record = repository.upsert(_record())

        assert repository.get(record.key, "en") is record
        assert repository.get(record.key, "sv") is None

    def test_delete_and_delete_by_id(self):
        repository = InMemoryOverrideRepository()
        first = repository.upsert(_record())
        second = repository.upsert(_record(language="sv"))

        assert repository.delete(first.key, "en")
        assert not repository.delete(first.key, "en")
        assert repository.delete_by_id(second.id)
        assert repository.list_all() == []

    def test_delete_all_returns_count(self):
        repository = InMemoryOverrideRepository()
        repository.upsert(_record())
        repository.upsert(_record(language="sv"))

        assert repository.delete_all() == 2
        assert repository.delete_all() == 0
