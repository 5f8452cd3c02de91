"""
Tests for the file-backed and in-memory phone stores.
"""
from __future__ import annotations

import json
import threading

import pytest

from phone_store_api.app.core.store import (
    InMemoryPhoneStore,
    JSONFilePhoneStore,
    StoreParseError,
    StoreReadError,
    StoreWriteError,
)


def test_load_missing_file_raises(tmp_path):
    store = JSONFilePhoneStore(tmp_path / "phones.json")
    with pytest.raises(StoreReadError, match="Phones file not found"):
        store.load()


def test_load_does_not_create_file(tmp_path):
    path = tmp_path / "phones.json"
    with pytest.raises(StoreReadError):
        JSONFilePhoneStore(path).load()
    assert not path.exists()


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "phones.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(StoreParseError):
        JSONFilePhoneStore(path).load()


def test_load_rejects_non_array_document(tmp_path):
    path = tmp_path / "phones.json"
    path.write_text('{"id": "1"}', encoding="utf-8")
    with pytest.raises(StoreParseError, match="array"):
        JSONFilePhoneStore(path).load()


def test_save_writes_indented_utf8(tmp_path):
    path = tmp_path / "phones.json"
    store = JSONFilePhoneStore(path)
    store.save([{"id": "1", "model": "Xiaomi 14 Ультра"}])
    text = path.read_text(encoding="utf-8")
    assert text == '[\n  {\n    "id": "1",\n    "model": "Xiaomi 14 Ультра"\n  }\n]\n'
    assert store.load() == [{"id": "1", "model": "Xiaomi 14 Ультра"}]


def test_save_into_missing_directory_raises(tmp_path):
    store = JSONFilePhoneStore(tmp_path / "missing" / "phones.json")
    with pytest.raises(StoreWriteError):
        store.save([])


def test_replace_raw_writes_bytes_unchanged(tmp_path):
    path = tmp_path / "phones.json"
    path.write_text("[]", encoding="utf-8")
    store = JSONFilePhoneStore(path)
    store.replace_raw(b"not json at all")
    assert path.read_bytes() == b"not json at all"
    with pytest.raises(StoreParseError):
        store.load()


def test_in_memory_store_round_trips_copies():
    store = InMemoryPhoneStore([{"id": "1"}])
    phones = store.load()
    phones[0]["model"] = "changed"
    assert store.load() == [{"id": "1"}]


def test_in_memory_store_missing_behaves_like_absent_file():
    store = InMemoryPhoneStore(missing=True)
    with pytest.raises(StoreReadError):
        store.load()


def test_in_memory_store_raw_document():
    store = InMemoryPhoneStore(raw=json.dumps([{"id": "r"}]).encode("utf-8"))
    assert store.load() == [{"id": "r"}]
    store.replace_raw(b"{")
    with pytest.raises(StoreParseError):
        store.load()


def test_locked_is_exclusive():
    store = InMemoryPhoneStore()
    acquired = []

    def worker():
        with store.locked():
            acquired.append(True)

    with store.locked():
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join(timeout=0.2)
        assert acquired == []
    thread.join(timeout=2)
    assert acquired == [True]
