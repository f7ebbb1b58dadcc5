from __future__ import annotations

import pytest

from src.school_portal.school_portal.core.exceptions import SerializationError
from src.school_portal.school_portal.database.json_file_storage import JsonFileStorage
from src.school_portal.school_portal.database.memory_storage import InMemoryStorage
from src.school_portal.school_portal.records.store import RecordStore


def test_json_file_storage_roundtrip(tmp_path):
    storage = JsonFileStorage(tmp_path / "data")

    assert storage.get("students") is None
    storage.set("students", '[{"id": "STU001", "name": "Ánh"}]')

    assert (tmp_path / "data" / "students.json").exists()
    assert storage.get("students") == '[{"id": "STU001", "name": "Ánh"}]'
    assert list(storage.keys()) == ["students"]

    storage.remove("students")
    assert storage.get("students") is None


def test_json_file_storage_survives_reopen(tmp_path):
    RecordStore(JsonFileStorage(tmp_path)).write("subjects", [{"code": "CS301"}])

    reopened = RecordStore(JsonFileStorage(tmp_path))
    assert reopened.read("subjects") == [{"code": "CS301"}]


def test_json_file_storage_rejects_path_like_keys(tmp_path):
    storage = JsonFileStorage(tmp_path)

    with pytest.raises(ValueError):
        storage.set("../outside", "[]")


def test_memory_storage_remove_missing_is_noop():
    storage = InMemoryStorage({"users": "[]"})
    storage.remove("students")

    assert list(storage.keys()) == ["users"]


def test_json_file_storage_keys_skip_foreign_files(tmp_path):
    storage = JsonFileStorage(tmp_path)
    storage.set("marks", "[]")
    (tmp_path / "foo bar.json").write_text("[]", encoding="utf-8")

    assert list(storage.keys()) == ["marks"]


def test_invalid_utf8_file_raises_serialization_error(tmp_path):
    (tmp_path / "students.json").write_bytes(b'[{"name": "\xff\xfe"}]')
    (tmp_path / "currentUser.json").write_bytes(b'{"name": "\xff"}')
    store = RecordStore(JsonFileStorage(tmp_path))

    with pytest.raises(SerializationError) as exc:
        store.read("students")
    assert exc.value.collection == "students"

    with pytest.raises(SerializationError):
        store.has("students")

    with pytest.raises(SerializationError):
        store.read_slot("currentUser")


class BytesBackedStorage(InMemoryStorage):
    """Decodes raw bytes on read, like a LONGTEXT column returned as bytes."""

    def __init__(self, raw: dict[str, bytes]):
        super().__init__()
        self._raw = raw

    def get(self, key):
        value = self._raw.get(key)
        return value.decode("utf-8") if value is not None else None


def test_undecodable_backend_value_raises_serialization_error():
    store = RecordStore(BytesBackedStorage({"marks": b"[\xff]"}))

    with pytest.raises(SerializationError) as exc:
        store.read("marks")
    assert exc.value.collection == "marks"
