from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

from counter_contract.domain.logging import LogMessage
from counter_contract.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Minimal structured log sink writing one JSON object per line.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        line = json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False)
        print(line, file=self._stream)


class JsonlLogSink(LogSink):
    # File-backed structured log sink; opened lazily so construction does not touch the filesystem.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._file: TextIO | None = None

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self._path.open("a", encoding="utf-8")
        payload = json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent; safe to call multiple times.
        if self._file is None:
            return
        self._file.close()
        self._file = None


class MemoryLogSink(LogSink):
    # Collects records in memory; used by tests and embedding hosts.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)
