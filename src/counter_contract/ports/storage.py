from __future__ import annotations

from typing import Protocol, runtime_checkable


# Storage port is the byte-oriented key-value boundary owned by the host.
@runtime_checkable
class Storage(Protocol):
    def get(self, key: bytes) -> bytes | None:
        """Return the bytes stored under key, or None when absent."""
        raise NotImplementedError("Storage is a port; use a concrete adapter.")

    def set(self, key: bytes, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        raise NotImplementedError("Storage is a port; use a concrete adapter.")
