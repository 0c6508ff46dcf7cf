from __future__ import annotations

from enum import Enum


# Stable error codes shared by every surface (message envelope, direct calls, CLI).
class ErrorCode(str, Enum):
    CONTRACT_ERROR = "CONTRACT_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    OVERFLOW = "OVERFLOW"
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    INVALID_MESSAGE = "INVALID_MESSAGE"
    INVALID_OPERAND = "INVALID_OPERAND"
