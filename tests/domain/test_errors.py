from __future__ import annotations

import pytest

# Every contract failure carries a stable code; the base class claims no specific cause.
from counter_contract.domain.codes import ErrorCode
from counter_contract.domain.errors import (
    ContractError,
    InvalidOperand,
    MessageDecodeError,
    Overflow,
    SerializationError,
    StorageError,
    UnknownOperationError,
)


def test_base_error_has_neutral_code() -> None:
    error = ContractError()
    assert error.code == ErrorCode.CONTRACT_ERROR
    assert error.to_dict() == {"error": "CONTRACT_ERROR", "message": "contract error"}


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (StorageError(), ErrorCode.STORAGE_ERROR),
        (Overflow(), ErrorCode.OVERFLOW),
        (SerializationError(), ErrorCode.SERIALIZATION_ERROR),
        (InvalidOperand(), ErrorCode.INVALID_OPERAND),
        (MessageDecodeError(), ErrorCode.INVALID_MESSAGE),
        (UnknownOperationError("reset"), ErrorCode.UNKNOWN_OPERATION),
    ],
)
def test_subclasses_carry_their_own_code(error: ContractError, code: ErrorCode) -> None:
    assert error.code == code
    assert error.code != ErrorCode.CONTRACT_ERROR


def test_unknown_operation_is_a_key_error_with_plain_message() -> None:
    error = UnknownOperationError("reset")
    assert isinstance(error, KeyError)
    assert str(error) == "unknown operation: 'reset'"
