# tests/test_storage.py

import json
import os

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

import storage.adapter as adapter_module
from core.config import OWNER_ID, RemoteConfig, save_remote_config
from storage.adapter import StorageAdapter, open_storage
from storage.backend import COLLECTION_NAMES
from storage.local_store import LocalStore
from storage.remote_store import RemoteStore

# === local store ===


def test_local_store_seeds_on_first_access(seeded_store):
    students = seeded_store.list("students")

    assert {s["first_name"] for s in students} == {"Alex", "María"}
    assert os.path.exists(seeded_store.path)
    assert seeded_store.list("grades") == []


def test_local_store_without_seed_starts_empty(local_store):
    assert local_store.list("students") == []


def test_local_store_create_assigns_id(local_store):
    created = local_store.create("notes", {"content": "Call home", "owner_id": OWNER_ID})

    assert len(created["id"]) == 9
    assert local_store.list("notes") == [created]


def test_local_store_persists_between_instances(local_store, data_dir):
    local_store.create("notes", {"content": "Call home", "owner_id": OWNER_ID})

    reopened = LocalStore(data_dir)

    assert [n["content"] for n in reopened.list("notes")] == ["Call home"]


def test_local_store_list_hides_other_owners(local_store):
    local_store.create("notes", {"content": "Mine", "owner_id": OWNER_ID})
    local_store.create("notes", {"content": "Theirs", "owner_id": "someone_else"})

    assert [n["content"] for n in local_store.list("notes")] == ["Mine"]


def test_local_store_update_merges_fields(local_store):
    created = local_store.create(
        "notes", {"content": "Call home", "color": "#fef9c3", "owner_id": OWNER_ID}
    )

    local_store.update("notes", created["id"], {"is_archived": True})

    (note,) = local_store.list("notes")
    assert note["is_archived"] is True
    assert note["content"] == "Call home"


def test_local_store_missing_collection_or_id_is_noop(local_store):
    created = local_store.create("notes", {"content": "Call home", "owner_id": OWNER_ID})

    local_store.update("events", "nope", {"title": "x"})
    local_store.update("notes", "nope", {"content": "x"})
    local_store.delete("events", "nope")
    local_store.delete("notes", "nope")

    assert local_store.list("notes") == [created]
    assert local_store.list("events") == []


def test_local_store_delete_removes_record(local_store):
    created = local_store.create("notes", {"content": "Call home", "owner_id": OWNER_ID})

    local_store.delete("notes", created["id"])

    assert local_store.list("notes") == []


def test_local_store_writes_readable_json(local_store):
    local_store.create("students", {"first_name": "María", "owner_id": OWNER_ID})

    with open(local_store.path, encoding="utf-8") as f:
        raw = f.read()

    assert "María" in raw
    assert "students" in json.loads(raw)


# === remote store ===


def test_remote_store_list_filters_by_owner_and_maps_id(remote_store, mongo_db):
    oid = ObjectId()
    collection = mongo_db.__getitem__.return_value
    collection.find.return_value = [{"_id": oid, "title": "Exam", "owner_id": OWNER_ID}]

    records = remote_store.list("events")

    mongo_db.__getitem__.assert_called_with("events")
    collection.find.assert_called_once_with({"owner_id": OWNER_ID})
    assert records == [{"id": str(oid), "title": "Exam", "owner_id": OWNER_ID}]


def test_remote_store_list_failure_returns_empty(remote_store, mongo_db):
    mongo_db.__getitem__.return_value.find.side_effect = PyMongoError("down")

    assert remote_store.list("events") == []


def test_remote_store_create_returns_string_id(remote_store, mongo_db):
    oid = ObjectId()
    collection = mongo_db.__getitem__.return_value
    collection.insert_one.return_value.inserted_id = oid

    created = remote_store.create("notes", {"content": "Call home"})

    assert created == {"id": str(oid), "content": "Call home"}
    collection.insert_one.assert_called_once_with({"content": "Call home"})


def test_remote_store_update_and_delete_use_object_ids(remote_store, mongo_db):
    oid = ObjectId()
    collection = mongo_db.__getitem__.return_value

    remote_store.update("notes", str(oid), {"is_archived": True})
    remote_store.delete("notes", str(oid))

    collection.update_one.assert_called_once_with(
        {"_id": oid}, {"$set": {"is_archived": True}}
    )
    collection.delete_one.assert_called_once_with({"_id": oid})


def test_remote_store_write_failure_propagates(remote_store, mongo_db):
    mongo_db.__getitem__.return_value.delete_one.side_effect = PyMongoError("down")

    with pytest.raises(PyMongoError):
        remote_store.delete("events", str(ObjectId()))


# === adapter ===


@pytest.mark.parametrize("collection", COLLECTION_NAMES)
def test_adapter_create_stamps_owner(storage, collection):
    created = storage.create(collection, {"title": "x", "owner_id": "intruder", "id": "x1"})

    assert created["owner_id"] == OWNER_ID
    assert created["id"] != "x1"
    assert storage.list(collection) == [created]
    assert created["title"] == "x"


def test_adapter_update_cannot_touch_protected_fields(storage):
    created = storage.create("notes", {"content": "Call home"})

    storage.update(
        "notes", created["id"], {"id": "other", "owner_id": "intruder", "content": "Done"}
    )

    (note,) = storage.list("notes")
    assert note["id"] == created["id"]
    assert note["owner_id"] == OWNER_ID
    assert note["content"] == "Done"


def test_adapter_reports_status(storage, remote_store):
    assert storage.status == "mock"
    assert not storage.is_connected
    assert StorageAdapter(remote_store).is_connected


# === open_storage ===


def test_open_storage_without_config_uses_local(data_dir):
    storage = open_storage(data_dir)

    assert isinstance(storage.backend, LocalStore)
    assert storage.status == "mock"


def test_open_storage_placeholder_uri_uses_local(data_dir, monkeypatch):
    monkeypatch.setenv("TEACHERMATE_MONGODB_URI", "YOUR_MONGODB_URI")

    assert open_storage(data_dir).status == "mock"


def test_open_storage_connects_with_saved_config(data_dir, remote_store, monkeypatch):
    seen = []

    def fake_connect(config):
        seen.append(config)
        return remote_store

    monkeypatch.setattr(adapter_module.RemoteStore, "connect", fake_connect)
    save_remote_config(RemoteConfig("mongodb://localhost:27017", "school"), data_dir)

    storage = open_storage(data_dir)

    assert storage.backend is remote_store
    assert seen == [RemoteConfig("mongodb://localhost:27017", "school")]


def test_open_storage_falls_back_when_client_fails(data_dir, monkeypatch):
    def broken_connect(config):
        raise ValueError("bad uri")

    monkeypatch.setattr(adapter_module.RemoteStore, "connect", broken_connect)
    monkeypatch.setenv("TEACHERMATE_MONGODB_URI", "not-a-mongo-uri")

    storage = open_storage(data_dir)

    assert isinstance(storage.backend, LocalStore)
    assert not isinstance(storage.backend, RemoteStore)
