from __future__ import annotations

from pathlib import Path

from counter_contract.adapters.log_sinks import JsonlLogSink, StdoutLogSink
from counter_contract.adapters.storage import InMemoryStorage, JsonFileStorage
from counter_contract.config.models import AppConfig, LoggingConfig, StorageConfig
from counter_contract.ports.log_sink import LogSink
from counter_contract.ports.storage import Storage
from counter_contract.usecases.contract import CounterContract


def build_storage(config: StorageConfig) -> Storage:
    # Factory for the configured storage backend.
    if config.kind == "file":
        assert config.path is not None
        return JsonFileStorage(Path(config.path))
    return InMemoryStorage()


def build_log_sink(config: LoggingConfig) -> LogSink | None:
    # Factory for the configured log sink; "none" disables logging entirely.
    if config.sink == "stdout":
        return StdoutLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return None


def build_contract(config: AppConfig, *, storage: Storage | None = None) -> CounterContract:
    # Composition root: explicit storage wins over config so tests can inject their own.
    return CounterContract(
        storage if storage is not None else build_storage(config.storage),
        key=config.storage.key.encode("utf-8"),
        log_sink=build_log_sink(config.logging),
    )
