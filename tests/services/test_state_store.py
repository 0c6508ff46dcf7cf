from __future__ import annotations

import pytest

# StateStore owns exactly one key and decodes it through the codec.
from counter_contract.adapters.storage import InMemoryStorage
from counter_contract.domain.errors import Overflow, StorageError
from counter_contract.services.state_store import COUNTER_KEY, StateStore


def test_write_then_read() -> None:
    storage = InMemoryStorage()
    store = StateStore(storage)
    store.write(-42)
    assert store.read() == -42
    assert storage.get(COUNTER_KEY) == (-42).to_bytes(4, "big", signed=True)


def test_write_touches_only_counter_key() -> None:
    storage = InMemoryStorage()
    storage.set(b"other", b"keep")
    StateStore(storage).write(1)
    assert storage.get(b"other") == b"keep"
    assert set(storage._data) == {b"other", COUNTER_KEY}


def test_read_absent_key_fails() -> None:
    with pytest.raises(StorageError):
        StateStore(InMemoryStorage()).read()


def test_read_short_value_fails() -> None:
    storage = InMemoryStorage()
    storage.set(COUNTER_KEY, b"\x01\x02")
    with pytest.raises(StorageError):
        StateStore(storage).read()


def test_out_of_range_write_leaves_store_untouched() -> None:
    storage = InMemoryStorage()
    store = StateStore(storage)
    store.write(9)
    with pytest.raises(Overflow):
        store.write(2**31)
    assert store.read() == 9


def test_custom_key() -> None:
    storage = InMemoryStorage()
    StateStore(storage, key=b"alt").write(3)
    assert storage.get(b"alt") == b"\x00\x00\x00\x03"
    assert storage.get(COUNTER_KEY) is None
