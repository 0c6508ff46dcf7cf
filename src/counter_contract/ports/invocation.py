from __future__ import annotations

from typing import Protocol, runtime_checkable

from counter_contract.domain.messages import ExecuteMsg, InstantiateMsg, QueryMsg, Response


# Message-based entry points: the host decodes an envelope and hands over a typed request.
@runtime_checkable
class MessageEntryPoints(Protocol):
    def instantiate(self, msg: InstantiateMsg) -> Response:
        raise NotImplementedError("MessageEntryPoints is a port; use a concrete contract.")

    def execute(self, msg: ExecuteMsg) -> Response:
        raise NotImplementedError("MessageEntryPoints is a port; use a concrete contract.")

    def query(self, msg: QueryMsg) -> bytes:
        raise NotImplementedError("MessageEntryPoints is a port; use a concrete contract.")

    def operations(self) -> dict[str, bool]:
        raise NotImplementedError("MessageEntryPoints is a port; use a concrete contract.")

    def is_read_only(self, name: str) -> bool:
        raise NotImplementedError("MessageEntryPoints is a port; use a concrete contract.")


# Direct callable entry points: invoked by name and argument, bypassing the envelope.
@runtime_checkable
class CallablePoints(Protocol):
    def add(self, by: int) -> None:
        raise NotImplementedError("CallablePoints is a port; use a concrete contract.")

    def sub(self, by: int) -> None:
        raise NotImplementedError("CallablePoints is a port; use a concrete contract.")

    def mul(self, by: int) -> None:
        raise NotImplementedError("CallablePoints is a port; use a concrete contract.")

    def number(self) -> int:
        raise NotImplementedError("CallablePoints is a port; use a concrete contract.")
