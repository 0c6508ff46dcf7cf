from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from counter_contract.domain.arithmetic import checked_add, checked_mul, checked_sub, require_i32
from counter_contract.domain.errors import ContractError, InvalidOperand, UnknownOperationError
from counter_contract.domain.logging import LogMessage
from counter_contract.domain.messages import (
    Add,
    ExecuteMsg,
    InstantiateMsg,
    Mul,
    Number,
    NumberResponse,
    QueryMsg,
    Response,
    Sub,
)
from counter_contract.domain.operations import OperationRegistry, operation
from counter_contract.ports.invocation import CallablePoints, MessageEntryPoints
from counter_contract.ports.log_sink import LogSink
from counter_contract.ports.storage import Storage
from counter_contract.services.state_store import COUNTER_KEY, StateStore
from counter_contract.usecases.serialization import to_binary

R = TypeVar("R")

_ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "add": checked_add,
    "sub": checked_sub,
    "mul": checked_mul,
}


class CounterContract(MessageEntryPoints, CallablePoints):
    """Persistent signed 32-bit counter with overflow-checked arithmetic.

    Two surfaces share one implementation: message entry points
    (instantiate/execute/query) and direct callables (add/sub/mul/number).
    Both raise the same ContractError subclasses. A failed mutation writes
    nothing.
    """

    def __init__(self, storage: Storage, *, key: bytes = COUNTER_KEY, log_sink: LogSink | None = None) -> None:
        self._state = StateStore(storage, key)
        self._log_sink = log_sink

    # Message-based entry points.

    def instantiate(self, msg: InstantiateMsg) -> Response:
        self._run("instantiate", {"value": msg.value}, lambda: self._state.write(require_i32(msg.value)))
        return Response()

    def execute(self, msg: ExecuteMsg) -> Response:
        if not isinstance(msg, (Add, Sub, Mul)):
            raise UnknownOperationError(type(msg).__name__)
        self._mutate(msg.op, msg.value)
        return Response(attributes=(("action", msg.op),))

    def query(self, msg: QueryMsg) -> bytes:
        if not isinstance(msg, Number):
            raise UnknownOperationError(type(msg).__name__)
        return to_binary(self.query_number())

    def query_number(self) -> NumberResponse:
        return NumberResponse(value=self._run("number", {}, self._state.read))

    # Metadata is answered from the registry alone; storage is never touched.

    @property
    def registry(self) -> OperationRegistry:
        return REGISTRY

    def operations(self) -> dict[str, bool]:
        return REGISTRY.enumerate()

    def mutates(self, name: str) -> bool:
        return REGISTRY.lookup(name)

    def is_read_only(self, name: str) -> bool:
        return REGISTRY.is_read_only(name)

    # Direct callable entry points.

    @operation(name="add", mutates=True)
    def add(self, by: int) -> None:
        self._mutate("add", by)

    @operation(name="sub", mutates=True)
    def sub(self, by: int) -> None:
        self._mutate("sub", by)

    @operation(name="mul", mutates=True)
    def mul(self, by: int) -> None:
        self._mutate("mul", by)

    @operation(name="number", mutates=False)
    def number(self) -> int:
        return self.query_number().value

    def call(self, name: str, *args: int) -> int | None:
        # Dispatch by name goes through the registry, so unregistered names cannot run.
        descriptor = REGISTRY.descriptor(name)
        # Mutating operations take the operand; read-only ones take nothing.
        arity = 1 if descriptor.mutates else 0
        if len(args) != arity:
            raise InvalidOperand(f"{name} takes {arity} argument(s), got {len(args)}")
        handler = getattr(self, descriptor.name)
        return handler(*args)

    def _mutate(self, op: str, by: int) -> None:
        apply = _ARITHMETIC[op]

        def _read_apply_write() -> None:
            # The write only happens after the checked result exists.
            result = apply(self._state.read(), by)
            self._state.write(result)

        self._run(op, {"by": by}, _read_apply_write)

    def _run(self, op: str, fields: dict[str, object], action: Callable[[], R]) -> R:
        try:
            result = action()
        except ContractError as exc:
            self._log("error", op, {**fields, "code": exc.code.value, "error": exc.message})
            raise
        self._log("info", op, fields if result is None else {**fields, "result": result})
        return result

    def close(self) -> None:
        # Release sink resources (open log files); the contract stays usable for metadata.
        close = getattr(self._log_sink, "close", None)
        if callable(close):
            close()

    def _log(self, level: str, op: str, fields: dict[str, object]) -> None:
        if self._log_sink is None:
            return
        self._log_sink.emit(LogMessage(level=level, message=op, fields={"operation": op, **fields}))


# Handlers are the registry: every @operation method is listed and nothing else.
REGISTRY = OperationRegistry.from_handlers(
    [CounterContract.add, CounterContract.sub, CounterContract.mul, CounterContract.number]
)
