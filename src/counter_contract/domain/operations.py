from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from .errors import UnknownOperationError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    name: str
    mutates: bool

    @property
    def read_only(self) -> bool:
        return not self.mutates


def operation(*, name: str, mutates: bool) -> Callable[[T], T]:
    # Decorator attaches an OperationDescriptor to a handler for registry discovery.
    descriptor = OperationDescriptor(name=name, mutates=mutates)

    def _decorate(target: T) -> T:
        setattr(target, "__operation__", descriptor)
        return target

    return _decorate


def get_operation(target: object) -> OperationDescriptor | None:
    descriptor = getattr(target, "__operation__", None)
    if isinstance(descriptor, OperationDescriptor):
        return descriptor
    return None


class OperationRegistry:
    """Canonical table of callable operations and whether each one mutates state.

    Enumeration, lookup and dispatch all read the same mapping, so the
    metadata surface cannot drift from what is actually executable.
    """

    def __init__(self, descriptors: Iterable[OperationDescriptor]) -> None:
        table: dict[str, OperationDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in table:
                raise ValueError(f"Duplicate operation registration: {descriptor.name}")
            table[descriptor.name] = descriptor
        self._table: Mapping[str, OperationDescriptor] = MappingProxyType(table)

    @classmethod
    def from_handlers(cls, handlers: Iterable[object]) -> OperationRegistry:
        descriptors = []
        for handler in handlers:
            descriptor = get_operation(handler)
            if descriptor is None:
                raise ValueError(f"Handler is not annotated with @operation: {handler!r}")
            descriptors.append(descriptor)
        return cls(descriptors)

    def enumerate(self) -> dict[str, bool]:
        # Fresh copy per call; callers cannot mutate the registry through it.
        return {name: descriptor.mutates for name, descriptor in self._table.items()}

    def descriptor(self, name: str) -> OperationDescriptor:
        try:
            return self._table[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def lookup(self, name: str) -> bool:
        return self.descriptor(name).mutates

    def is_read_only(self, name: str) -> bool:
        return self.descriptor(name).read_only

    def names(self) -> tuple[str, ...]:
        return tuple(self._table)

    def to_json(self) -> bytes:
        # Pretty-printed callee list exported to hosts that introspect the contract.
        return json.dumps(self.enumerate(), indent=2).encode("utf-8")

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)
