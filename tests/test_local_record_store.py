"""Tests for LocalRecordStore functionality."""

from pathlib import Path

import pytest

from neuronpad.errors import StorageReadError, StorageWriteError
from neuronpad.storage.local import LocalRecordStore


@pytest.fixture(params=["memory", "disk"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> LocalRecordStore:
    """Run each test against the in-memory and the on-disk store."""
    if request.param == "memory":
        return LocalRecordStore()
    return LocalRecordStore(tmp_path / "records")


def test_missing_record_is_none(store: LocalRecordStore) -> None:
    assert store.get_item("notes") is None


def test_set_and_get(store: LocalRecordStore) -> None:
    store.set_item("notes", "[]")
    store.set_item("notes", '[{"id": "a"}]')

    assert store.get_item("notes") == '[{"id": "a"}]', "Second write should replace the first"


def test_records_are_independent(store: LocalRecordStore) -> None:
    store.set_item("notes", "[]")
    store.set_item("auth", "true")

    store.remove_item("auth")

    assert store.get_item("auth") is None
    assert store.get_item("notes") == "[]"


def test_remove_missing_record(store: LocalRecordStore) -> None:
    store.remove_item("nothing")
    assert store.get_item("nothing") is None


def test_records_persist_across_instances(tmp_path: Path) -> None:
    LocalRecordStore(tmp_path).set_item("notes", '["x"]')

    assert LocalRecordStore(tmp_path).get_item("notes") == '["x"]'
    assert (tmp_path / "notes.json").read_text() == '["x"]'


def test_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    store = LocalRecordStore(tmp_path)
    for i in range(3):
        store.set_item("notes", str(i))

    assert [p.name for p in tmp_path.iterdir()] == ["notes.json"]


def test_invalid_key_is_rejected(tmp_path: Path) -> None:
    store = LocalRecordStore(tmp_path)
    with pytest.raises(ValueError, match="Invalid record key"):
        store.set_item("../outside", "x")


def test_invalid_key_is_rejected_on_every_operation(tmp_path: Path) -> None:
    store = LocalRecordStore(tmp_path)
    with pytest.raises(ValueError, match="Invalid record key"):
        store.get_item("../outside")
    with pytest.raises(ValueError, match="Invalid record key"):
        store.remove_item("a/b")


def test_unreadable_record_raises_read_error(tmp_path: Path) -> None:
    (tmp_path / "notes.json").mkdir()
    store = LocalRecordStore(tmp_path)

    with pytest.raises(StorageReadError):
        store.get_item("notes")


def test_unwritable_directory_raises_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = LocalRecordStore(blocker / "records")

    with pytest.raises(StorageWriteError):
        store.set_item("notes", "[]")
