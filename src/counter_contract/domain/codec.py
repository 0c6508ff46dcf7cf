from __future__ import annotations

from .errors import Overflow, StorageError

VALUE_WIDTH = 4
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def encode(value: int) -> bytes:
    # Fixed-width big-endian two's complement; out-of-range values never reach storage.
    if not I32_MIN <= value <= I32_MAX:
        raise Overflow(f"value {value} does not fit in a signed 32-bit integer")
    return value.to_bytes(VALUE_WIDTH, "big", signed=True)


def decode(data: bytes | None) -> int:
    # Absent key and wrong width are both storage errors, never a partial read.
    if data is None:
        raise StorageError("counter key is absent")
    if len(data) != VALUE_WIDTH:
        raise StorageError(f"expected {VALUE_WIDTH} bytes, got {len(data)}")
    return int.from_bytes(data, "big", signed=True)
