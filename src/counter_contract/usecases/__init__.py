from .contract import REGISTRY, CounterContract
from .envelope import Host, decode_execute, decode_instantiate, decode_query
from .serialization import to_binary

__all__ = [
    "CounterContract",
    "Host",
    "REGISTRY",
    "decode_execute",
    "decode_instantiate",
    "decode_query",
    "to_binary",
]
