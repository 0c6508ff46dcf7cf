from __future__ import annotations

import pytest

# Stored value is a fixed 4-byte big-endian two's-complement integer.
from counter_contract.domain.codec import I32_MAX, I32_MIN, decode, encode
from counter_contract.domain.errors import Overflow, StorageError


def test_encode_is_big_endian_twos_complement() -> None:
    # Byte layout must match what other hosts read back.
    assert encode(5) == b"\x00\x00\x00\x05"
    assert encode(-1) == b"\xff\xff\xff\xff"
    assert encode(I32_MAX) == b"\x7f\xff\xff\xff"
    assert encode(I32_MIN) == b"\x80\x00\x00\x00"


def test_decode_reads_boundary_values() -> None:
    assert decode(b"\x7f\xff\xff\xff") == I32_MAX
    assert decode(b"\x80\x00\x00\x00") == I32_MIN
    assert decode(b"\x00\x00\x01\x00") == 256


def test_decode_absent_key_is_storage_error() -> None:
    with pytest.raises(StorageError):
        decode(None)


@pytest.mark.parametrize("data", [b"", b"\x00\x00\x01", b"\x00\x00\x00\x00\x01"])
def test_decode_wrong_width_is_storage_error(data: bytes) -> None:
    # Short or long payloads are rejected rather than truncated or over-read.
    with pytest.raises(StorageError):
        decode(data)


@pytest.mark.parametrize("value", [I32_MAX + 1, I32_MIN - 1])
def test_encode_rejects_out_of_range(value: int) -> None:
    with pytest.raises(Overflow):
        encode(value)
