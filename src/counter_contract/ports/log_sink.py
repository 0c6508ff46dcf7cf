from __future__ import annotations

from typing import Protocol, runtime_checkable

from counter_contract.domain.logging import LogMessage


# LogSink port receives one structured record per contract invocation.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Write a structured log record."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
