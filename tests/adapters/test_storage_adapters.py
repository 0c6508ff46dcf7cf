from __future__ import annotations

import json
from pathlib import Path

import pytest

from counter_contract.adapters.storage import InMemoryStorage, JsonFileStorage
from counter_contract.domain.errors import StorageError


def test_in_memory_set_get_roundtrip() -> None:
    storage = InMemoryStorage()
    assert storage.get(b"number") is None
    storage.set(b"number", b"\x00\x00\x00\x07")
    assert storage.get(b"number") == b"\x00\x00\x00\x07"


def test_json_file_missing_file_reads_empty(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "state.json")
    assert storage.get(b"number") is None
    assert not (tmp_path / "state.json").exists()


def test_json_file_persists_across_instances(tmp_path: Path) -> None:
    # A second adapter over the same file sees the first one's writes.
    path = tmp_path / "nested" / "state.json"
    JsonFileStorage(path).set(b"number", b"\xff\xff\xff\xfe")
    assert JsonFileStorage(path).get(b"number") == b"\xff\xff\xff\xfe"
    assert json.loads(path.read_text(encoding="utf-8")) == {b"number".hex(): "fffffffe"}
    assert not path.with_suffix(".json.tmp").exists()


def test_json_file_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    storage = JsonFileStorage(path)
    storage.set(b"a", b"\x01")
    storage.set(b"b", b"\x02")
    assert storage.get(b"a") == b"\x01"
    assert storage.get(b"b") == b"\x02"


@pytest.mark.parametrize("text", ["[]", "not json", json.dumps({b"number".hex(): "zz"})])
def test_json_file_corrupt_state_is_storage_error(tmp_path: Path, text: str) -> None:
    # A damaged state file surfaces as the contract's storage failure, not a raw parse error.
    path = tmp_path / "state.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStorage(path).get(b"number")
