from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass

from counter_contract.domain.errors import SerializationError


def to_binary(obj: object) -> bytes:
    # Compact JSON is the response wire format for every query and metadata call.
    payload = asdict(obj) if is_dataclass(obj) and not isinstance(obj, type) else obj
    try:
        return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot serialize {type(obj).__name__}: {exc}") from exc
