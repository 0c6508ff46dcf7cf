from .arithmetic import checked_add, checked_mul, checked_sub, fits_i32, require_i32
from .codec import I32_MAX, I32_MIN, VALUE_WIDTH, decode, encode
from .codes import ErrorCode
from .logging import LogMessage
from .errors import (
    ContractError,
    InvalidOperand,
    MessageDecodeError,
    Overflow,
    SerializationError,
    StorageError,
    UnknownOperationError,
)
from .messages import Add, ExecuteMsg, InstantiateMsg, Mul, Number, NumberResponse, QueryMsg, Response, Sub
from .operations import OperationDescriptor, OperationRegistry, get_operation, operation

# Public domain exports keep imports explicit across layers.
__all__ = [
    "Add",
    "ContractError",
    "ErrorCode",
    "ExecuteMsg",
    "I32_MAX",
    "I32_MIN",
    "InstantiateMsg",
    "InvalidOperand",
    "LogMessage",
    "MessageDecodeError",
    "Mul",
    "Number",
    "NumberResponse",
    "OperationDescriptor",
    "OperationRegistry",
    "Overflow",
    "QueryMsg",
    "Response",
    "SerializationError",
    "StorageError",
    "Sub",
    "UnknownOperationError",
    "VALUE_WIDTH",
    "checked_add",
    "checked_mul",
    "checked_sub",
    "decode",
    "encode",
    "fits_i32",
    "get_operation",
    "operation",
    "require_i32",
]
