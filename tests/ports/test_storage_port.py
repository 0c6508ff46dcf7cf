from __future__ import annotations

import pytest

# Storage port contract: byte-oriented get/set owned by the host.
from counter_contract.adapters.storage import InMemoryStorage, JsonFileStorage
from counter_contract.ports.storage import Storage


def test_storage_adapters_conform(tmp_path) -> None:
    assert isinstance(InMemoryStorage(), Storage)
    assert isinstance(JsonFileStorage(tmp_path / "state.json"), Storage)


def test_storage_port_default_raises() -> None:
    # Direct port calls without adapter wiring should raise.
    class _PortOnly(Storage):
        pass

    port = _PortOnly()
    with pytest.raises(NotImplementedError):
        port.get(b"number")
    with pytest.raises(NotImplementedError):
        port.set(b"number", b"\x00\x00\x00\x00")
