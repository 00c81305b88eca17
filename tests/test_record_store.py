import pytest

from johar.database import get_db_context
from johar.models.database import CollectionRecord


def test_load_missing_collection_is_empty(store):
    assert store.load("guides") == []
    assert not store.exists("guides")


def test_save_then_load_preserves_order(store):
    records = [{"id": "b"}, {"id": "a"}, {"id": "c"}]
    assert store.save("market_items", records)

    assert store.load("market_items") == records
    assert store.exists("market_items")


def test_save_replaces_whole_collection(store):
    store.save("transactions", [{"tx_id": "1"}, {"tx_id": "2"}])
    store.save("transactions", [{"tx_id": "3"}])

    assert store.load("transactions") == [{"tx_id": "3"}]


def test_loaded_records_are_copies(store):
    store.save("guides", [{"reg_id": "GID1", "verified": False}])

    loaded = store.load("guides")
    loaded[0]["verified"] = True
    loaded.append({"reg_id": "GID2"})

    assert store.load("guides") == [{"reg_id": "GID1", "verified": False}]


def test_collections_are_independent(store):
    store.save("guides", [{"reg_id": "GID1"}])
    store.save("market_items", [{"id": "prod_1"}])

    assert store.load("guides") == [{"reg_id": "GID1"}]
    assert store.load("market_items") == [{"id": "prod_1"}]


@pytest.mark.parametrize("payload", ["{not json", '{"a": 1}', '"text"'])
def test_corrupt_payload_reads_as_empty(store, session_factory, payload):
    with get_db_context(session_factory) as db:
        db.add(CollectionRecord(name="guides", payload=payload))

    assert store.load("guides") == []


@pytest.mark.parametrize("payload, expected", [
    ("[1, 2]", []),
    ('[{"reg_id": "GID1"}, 7, "x", null]', [{"reg_id": "GID1"}]),
])
def test_non_object_records_are_dropped(store, session_factory, payload, expected):
    with get_db_context(session_factory) as db:
        db.add(CollectionRecord(name="guides", payload=payload))

    assert store.load("guides") == expected
    assert store.find("guides", "reg_id", "GID2") is None


def test_corrupt_collection_recovers_on_next_save(store, session_factory):
    with get_db_context(session_factory) as db:
        db.add(CollectionRecord(name="guides", payload="garbage"))

    store.append("guides", {"reg_id": "GID1"})

    assert store.load("guides") == [{"reg_id": "GID1"}]


def test_unavailable_storage_degrades_quietly(broken_store):
    assert broken_store.load("guides") == []
    assert broken_store.exists("guides") is False
    assert broken_store.save("guides", [{"reg_id": "GID1"}]) is False


def test_edit_saves_on_exit(store):
    with store.edit("feedback") as records:
        records.append({"text": "nice"})

    assert store.load("feedback") == [{"text": "nice"}]


def test_edit_skips_save_when_block_raises(store):
    store.save("feedback", [{"text": "before"}])

    with pytest.raises(RuntimeError):
        with store.edit("feedback") as records:
            records.clear()
            raise RuntimeError("boom")

    assert store.load("feedback") == [{"text": "before"}]


def test_find_append_update(store):
    store.append("guides", {"reg_id": "GID1", "name": "Asha"})
    store.append("guides", {"reg_id": "GID2", "name": "Ravi"})

    assert store.find("guides", "reg_id", "GID2")["name"] == "Ravi"
    assert store.find("guides", "reg_id", "GID9") is None

    updated = store.update("guides", "reg_id", "GID1", lambda r: {**r, "name": "Asha Devi"})
    assert updated == {"reg_id": "GID1", "name": "Asha Devi"}
    assert store.load("guides")[0]["name"] == "Asha Devi"


def test_update_missing_record_returns_none(store):
    store.append("guides", {"reg_id": "GID1"})

    assert store.update("guides", "reg_id", "nope", lambda r: r) is None
    assert store.load("guides") == [{"reg_id": "GID1"}]
