from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from counter_contract.domain.errors import StorageError
from counter_contract.ports.storage import Storage


@dataclass
class InMemoryStorage(Storage):
    # In-memory adapter for deterministic local runs and tests.
    _data: dict[bytes, bytes] = field(default_factory=dict)

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self._data[key] = bytes(value)


@dataclass
class JsonFileStorage(Storage):
    # File-backed adapter so state survives between CLI invocations.
    # Keys and values are hex-encoded; the whole file is replaced on every write.
    path: Path

    def get(self, key: bytes) -> bytes | None:
        raw = self._load().get(key.hex())
        if raw is None:
            return None
        try:
            return bytes.fromhex(raw)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"State file holds a non-hex value for {key!r}: {self.path}") from exc

    def set(self, key: bytes, value: bytes) -> None:
        data = self._load()
        data[key.hex()] = bytes(value).hex()
        self._dump(data)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"State file is unreadable: {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StorageError(f"State file root must be a mapping: {self.path}")
        return payload

    def _dump(self, data: dict[str, str]) -> None:
        # Atomic replace keeps the file readable if the process dies mid-write.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        temp_path.write_text(json.dumps(data, sort_keys=True), encoding="utf-8")
        temp_path.replace(self.path)
