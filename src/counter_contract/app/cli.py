from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from counter_contract.adapters.factory import build_contract
from counter_contract.config.loader import ConfigError, load_config
from counter_contract.config.models import AppConfig, StorageConfig
from counter_contract.domain.errors import ContractError
from counter_contract.domain.messages import Add, InstantiateMsg, Mul, Number, Sub
from counter_contract.ports.storage import Storage
from counter_contract.usecases.contract import CounterContract
from counter_contract.usecases.envelope import Host

# NOTE: This CLI plays the role of the host runtime: it sequences one invocation per process
# and owns the storage handle. Contract semantics live in usecases/.

_EXECUTE_VARIANTS = {"add": Add, "sub": Sub, "mul": Mul}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="counter-contract", description="Persistent 32-bit counter contract")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--state", help="Override storage with a JSON state file")
    commands = parser.add_subparsers(dest="command", required=True)

    instantiate = commands.add_parser("instantiate", help="Write the initial value")
    instantiate.add_argument("value", type=int)

    execute = commands.add_parser("execute", help="Apply a checked arithmetic operation")
    execute.add_argument("op", choices=sorted(_EXECUTE_VARIANTS))
    execute.add_argument("value", type=int)

    commands.add_parser("query", help="Print the current value")
    commands.add_parser("operations", help="List operations and whether each one mutates state")

    lookup = commands.add_parser("is-read-only", help="Report whether an operation is read-only")
    lookup.add_argument("name")

    call = commands.add_parser("call", help="Invoke a direct callable entry point by name")
    call.add_argument("name")
    call.add_argument("value", type=int, nargs="?")

    raw = commands.add_parser("raw", help="Send a raw JSON envelope to an entry point")
    raw.add_argument("entry", choices=Host.ENTRIES)
    raw.add_argument("payload", nargs="?", default="{}")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    # CLI overrides take precedence over config.
    config = load_config(Path(args.config)) if args.config else AppConfig.default()
    if args.state is not None:
        config.storage = StorageConfig(kind="file", path=args.state, key=config.storage.key)
    return config


def dispatch(contract: CounterContract, args: argparse.Namespace) -> object:
    # Returns a JSON-serializable result, or ready-made JSON bytes, for printing.
    if args.command == "instantiate":
        contract.instantiate(InstantiateMsg(value=args.value))
        return {"ok": True}
    if args.command == "execute":
        contract.execute(_EXECUTE_VARIANTS[args.op](value=args.value))
        return {"ok": True}
    if args.command == "query":
        return json.loads(contract.query(Number()))
    if args.command == "operations":
        return contract.registry.to_json()
    if args.command == "is-read-only":
        return {"name": args.name, "read_only": contract.is_read_only(args.name)}
    if args.command == "call":
        call_args = () if args.value is None else (args.value,)
        result = contract.call(args.name, *call_args)
        return {"ok": True} if result is None else {"value": result}
    if args.command == "raw":
        data = Host(contract).handle(args.entry, args.payload)
        return {"ok": True} if data is None else json.loads(data)
    raise ValueError(f"Unhandled command: {args.command}")


def run(argv: Sequence[str] | None = None, *, storage: Storage | None = None) -> int:
    # Thin orchestration wrapper: parse, wire, invoke once, print.
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return 2

    contract = build_contract(config, storage=storage)
    try:
        result = dispatch(contract, args)
    except ContractError as exc:
        print(json.dumps(exc.to_dict()), file=sys.stderr)
        return 1
    finally:
        contract.close()
    print(result.decode("utf-8") if isinstance(result, bytes) else json.dumps(result))
    return 0
