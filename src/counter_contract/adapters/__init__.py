from .factory import build_contract, build_log_sink, build_storage
from .log_sinks import JsonlLogSink, MemoryLogSink, StdoutLogSink
from .storage import InMemoryStorage, JsonFileStorage

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "JsonlLogSink",
    "MemoryLogSink",
    "StdoutLogSink",
    "build_contract",
    "build_log_sink",
    "build_storage",
]
