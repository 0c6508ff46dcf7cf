from .invocation import CallablePoints, MessageEntryPoints
from .log_sink import LogSink
from .storage import Storage

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "CallablePoints",
    "LogSink",
    "MessageEntryPoints",
    "Storage",
]
