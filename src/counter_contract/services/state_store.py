from __future__ import annotations

from dataclasses import dataclass

from counter_contract.domain import codec
from counter_contract.ports.storage import Storage

COUNTER_KEY = b"number"


@dataclass
class StateStore:
    # Sole owner of the counter key; every access goes through read/write.
    storage: Storage
    key: bytes = COUNTER_KEY

    def read(self) -> int:
        return codec.decode(self.storage.get(self.key))

    def write(self, value: int) -> None:
        # Encode first so an out-of-range value never produces a partial write.
        data = codec.encode(value)
        self.storage.set(self.key, data)
