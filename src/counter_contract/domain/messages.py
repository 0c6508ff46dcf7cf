from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class InstantiateMsg:
    # Initial value written verbatim; no prior state is read.
    value: int


@dataclass(frozen=True, slots=True)
class Add:
    op: ClassVar[str] = "add"
    value: int


@dataclass(frozen=True, slots=True)
class Sub:
    op: ClassVar[str] = "sub"
    value: int


@dataclass(frozen=True, slots=True)
class Mul:
    op: ClassVar[str] = "mul"
    value: int


ExecuteMsg = Union[Add, Sub, Mul]


@dataclass(frozen=True, slots=True)
class Number:
    op: ClassVar[str] = "number"


QueryMsg = Number


@dataclass(frozen=True, slots=True)
class NumberResponse:
    value: int


@dataclass(frozen=True, slots=True)
class Response:
    # Execution result returned to the host; mutating calls carry no payload.
    data: bytes | None = None
    attributes: tuple[tuple[str, str], ...] = ()
