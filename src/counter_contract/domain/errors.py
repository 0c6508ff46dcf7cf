from __future__ import annotations

from .codes import ErrorCode


class ContractError(Exception):
    # Base for every recoverable contract failure; callers switch on `code`.
    code: ErrorCode = ErrorCode.CONTRACT_ERROR
    default_message = "contract error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code.value, "message": self.message}


class StorageError(ContractError):
    code = ErrorCode.STORAGE_ERROR
    default_message = "stored value is missing or malformed"


class Overflow(ContractError):
    code = ErrorCode.OVERFLOW
    default_message = "arithmetic overflow"


class SerializationError(ContractError):
    code = ErrorCode.SERIALIZATION_ERROR
    default_message = "response could not be serialized"


class InvalidOperand(ContractError):
    code = ErrorCode.INVALID_OPERAND
    default_message = "operand must be a 32-bit signed integer"


class MessageDecodeError(ContractError):
    code = ErrorCode.INVALID_MESSAGE
    default_message = "message could not be decoded"


class UnknownOperationError(ContractError, KeyError):
    code = ErrorCode.UNKNOWN_OPERATION
    default_message = "unknown operation"

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown operation: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.message
