from __future__ import annotations

import json

import pytest

from src.school_portal.school_portal.core.exceptions import SerializationError


def test_missing_collection_reads_empty(store):
    assert store.read("students") == []
    assert store.has("students") is False


def test_write_replaces_whole_collection(store, storage):
    store.write("subjects", [{"code": "A"}, {"code": "B"}])
    store.write("subjects", [{"code": "C"}])

    assert store.read("subjects") == [{"code": "C"}]
    assert json.loads(storage.get("subjects")) == [{"code": "C"}]


def test_empty_collection_is_present(store):
    store.write("marks", [])
    assert store.has("marks") is True
    assert store.read("marks") == []


def test_corrupt_collection_raises_serialization_error(store, storage):
    storage.set("students", "{not json")

    with pytest.raises(SerializationError) as exc:
        store.read("students")
    assert exc.value.collection == "students"


def test_non_list_collection_raises_serialization_error(store, storage):
    storage.set("students", '{"id": "STU001"}')

    with pytest.raises(SerializationError):
        store.read("students")


def test_unencodable_record_leaves_collection_untouched(store):
    store.write("marks", [{"studentId": "STU001"}])

    with pytest.raises(SerializationError):
        store.write("marks", [{"studentId": object()}])

    assert store.read("marks") == [{"studentId": "STU001"}]


def test_slot_roundtrip_and_clear(store):
    assert store.read_slot("currentUser") is None

    store.write_slot("currentUser", {"username": "admin", "role": "admin"})
    assert store.read_slot("currentUser") == {"username": "admin", "role": "admin"}

    store.clear_slot("currentUser")
    assert store.read_slot("currentUser") is None
