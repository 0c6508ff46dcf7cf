from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, model_validator

from counter_contract.domain.codec import I32_MAX, I32_MIN
from counter_contract.domain.errors import MessageDecodeError
from counter_contract.domain.messages import Add, ExecuteMsg, InstantiateMsg, Mul, Number, QueryMsg, Sub
from counter_contract.usecases.contract import CounterContract
from counter_contract.usecases.serialization import to_binary

# Wire models mirror the JSON envelope the host sends to each entry point.

I32 = Annotated[StrictInt, Field(ge=I32_MIN, le=I32_MAX)]


class _ValueBody(BaseModel):
    model_config = ConfigDict(extra="forbid")
    value: I32


class _EmptyBody(BaseModel):
    model_config = ConfigDict(extra="forbid")


class _ExecuteEnvelope(BaseModel):
    # Exactly one variant key is allowed: {"add": {"value": 3}}.
    model_config = ConfigDict(extra="forbid")
    add: _ValueBody | None = None
    sub: _ValueBody | None = None
    mul: _ValueBody | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> _ExecuteEnvelope:
        chosen = [name for name in ("add", "sub", "mul") if getattr(self, name) is not None]
        if len(chosen) != 1:
            raise ValueError("execute message must contain exactly one of add, sub, mul")
        return self


class _QueryEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid")
    number: _EmptyBody


class _LookupEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: StrictStr


_EXECUTE_VARIANTS = {"add": Add, "sub": Sub, "mul": Mul}


def _parse(model: type[BaseModel], raw: bytes | str) -> Any:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MessageDecodeError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise MessageDecodeError("message root must be a JSON object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MessageDecodeError(_first_error(exc)) from exc


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"]) or "<root>"
    return f"{location}: {error['msg']}"


def decode_instantiate(raw: bytes | str) -> InstantiateMsg:
    body = _parse(_ValueBody, raw)
    return InstantiateMsg(value=body.value)


def decode_execute(raw: bytes | str) -> ExecuteMsg:
    envelope = _parse(_ExecuteEnvelope, raw)
    for name, variant in _EXECUTE_VARIANTS.items():
        body = getattr(envelope, name)
        if body is not None:
            return variant(value=body.value)
    raise MessageDecodeError("execute message has no variant")


def decode_query(raw: bytes | str) -> QueryMsg:
    _parse(_QueryEnvelope, raw)
    return Number()


class Host:
    """Invocation port: routes raw JSON envelopes to a contract by entry name.

    Mutating entries return None (no payload); read entries return JSON
    bytes. Failures surface as the contract's own ContractError subclasses.
    """

    ENTRIES = ("instantiate", "execute", "query", "operations", "is_read_only")

    def __init__(self, contract: CounterContract) -> None:
        self.contract = contract

    def handle(self, entry: str, raw: bytes | str = b"{}") -> bytes | None:
        if entry == "instantiate":
            self.contract.instantiate(decode_instantiate(raw))
            return None
        if entry == "execute":
            self.contract.execute(decode_execute(raw))
            return None
        if entry == "query":
            return self.contract.query(decode_query(raw))
        if entry == "operations":
            return self.contract.registry.to_json()
        if entry == "is_read_only":
            lookup = _parse(_LookupEnvelope, raw)
            return to_binary(self.contract.is_read_only(lookup.name))
        raise MessageDecodeError(f"unknown entry point: {entry!r}")
