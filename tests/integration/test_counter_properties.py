from __future__ import annotations

import random

# End-to-end properties over random non-overflowing operation sequences.
from counter_contract.adapters.storage import InMemoryStorage
from counter_contract.domain.arithmetic import fits_i32
from counter_contract.domain.messages import Add, InstantiateMsg, Mul, Sub
from counter_contract.usecases.contract import CounterContract
from counter_contract.usecases.envelope import Host


def test_random_sequences_match_integer_semantics() -> None:
    rng = random.Random(1234)
    for _ in range(50):
        start = rng.randint(-1000, 1000)
        contract = CounterContract(InMemoryStorage())
        contract.instantiate(InstantiateMsg(value=start))
        expected = start
        for _ in range(20):
            variant = rng.choice((Add, Sub, Mul))
            by = rng.randint(-5, 5) if variant is Mul else rng.randint(-10_000, 10_000)
            candidate = {Add: expected + by, Sub: expected - by, Mul: expected * by}[variant]
            if not fits_i32(candidate):
                continue
            contract.execute(variant(value=by))
            expected = candidate
        assert contract.number() == expected


def test_message_and_direct_surfaces_share_state() -> None:
    storage = InMemoryStorage()
    contract = CounterContract(storage)
    host = Host(contract)
    host.handle("instantiate", b'{"value": 3}')
    contract.mul(5)
    host.handle("execute", b'{"sub": {"value": 20}}')
    assert contract.call("number") == -5
    assert CounterContract(storage).number() == -5
