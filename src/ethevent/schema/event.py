"""Declaring events as typed records.

In Solidity an event is declared as::

    event Transfer(address indexed from, address indexed to, uint value);

The equivalent declaration here::

    @event("Transfer")
    class Transfer(Event):
        sender: str | None = arg("address", indexed=True)
        receiver: str | None = arg("address", indexed=True)
        value: int | None = arg("uint")

`@event` turns the class into a frozen, keyword-only dataclass and attaches its
`EventMetadata` as `Transfer.__event__` (canonical name
`Transfer(address,address,uint256)`). Every record also carries the log header
(`address`, `block_hash`, `block_number`, `log_index`, `status`, `extra`).

Set indexed fields to filter a query; `None` matches any value::

    Transfer(receiver="0x8ca8...").build_query(from_block=0, to_block=39)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from ethevent.core.types import EncodedType
from ethevent.schema.metadata import HEADER_FIELDS, ArgumentSpec, EventMetadata
from ethevent.schema.query import LATEST, build_query
from ethevent.schema.result import build_result
from ethevent.schema.signature import parse_type

# Key under which `arg` stores the ABI declaration in the dataclass field metadata.
ABI_KEY = "ethevent.abi"

E = TypeVar("E", bound="Event")


@dataclass(frozen=True, kw_only=True)
class Event:
    """Base record: the log header shared by every event."""

    __event__: ClassVar[EventMetadata]
    __method__: ClassVar[str] = "eth_getLogs"

    address: str | list[str] | None = None  # contract address (or addresses to filter on)
    block_hash: str | None = None
    block_number: int | str | None = None
    log_index: int | None = None
    status: str | None = None  # "mined" | "pending"
    extra: Any = None

    def build_query(self, *, from_block: int | str | None = LATEST, to_block: int | str | None = LATEST) -> list[Any]:
        """JSON-RPC parameters to request this event."""
        return build_query(self, from_block=from_block, to_block=to_block)

    def build_result(self, result: Any) -> Any:
        """Records built from the JSON-RPC `result` of this event's query."""
        return build_result(self, result)

    @classmethod
    def copy_header(cls: type[E], other: Event, **changes: Any) -> E:
        """New record of this class with the header of `other` (plus `changes`)."""
        header = {name: getattr(other, name) for name in HEADER_FIELDS}
        header.update(changes)
        return cls(**header)

    def header(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in HEADER_FIELDS}

    def arguments(self) -> dict[str, Any]:
        """Declared argument values by name, in declaration order."""
        return {a.name: getattr(self, a.name) for a in type(self).__event__.arguments}


def arg(type_: str | EncodedType, *, indexed: bool = False) -> Any:
    """Declare an event argument (a dataclass field defaulting to `None`)."""
    resolved = parse_type(type_) if isinstance(type_, str) else type_
    return field(default=None, metadata={ABI_KEY: (resolved, indexed)})


def event(name: str, *, method: str = "eth_getLogs") -> Callable[[type[E]], type[E]]:
    """Class decorator declaring the event `name` from `arg` fields."""

    def wrap(cls: type[E]) -> type[E]:
        record_cls = dataclass(frozen=True, kw_only=True)(cls)
        arguments = [
            ArgumentSpec(name=f.name, type=f.metadata[ABI_KEY][0], indexed=f.metadata[ABI_KEY][1])
            for f in dataclasses.fields(record_cls)
            if ABI_KEY in f.metadata
        ]
        record_cls.__event__ = EventMetadata.build(name, arguments)
        record_cls.__method__ = method
        return record_cls

    return wrap


ArgumentLike = ArgumentSpec | tuple[str, str | EncodedType, bool] | tuple[str, str | EncodedType]


def make_event(
    name: str,
    arguments: Iterable[ArgumentLike],
    *,
    method: str = "eth_getLogs",
    base: type[Event] = Event,
) -> type[Event]:
    """Builder form of `@event` for events only known at runtime.

    `arguments` are `ArgumentSpec`s or `(name, type)` / `(name, type, indexed)`
    tuples, in declaration order.
    """
    specs = [_to_spec(a) for a in arguments]
    namespace: dict[str, Any] = {
        "__module__": __name__,
        "__qualname__": name,
        "__annotations__": {s.name: Any for s in specs},
    }
    namespace.update({s.name: arg(s.type, indexed=s.indexed) for s in specs})
    return event(name, method=method)(type(name, (base,), namespace))


def _to_spec(argument: ArgumentLike) -> ArgumentSpec:
    if isinstance(argument, ArgumentSpec):
        return argument
    arg_name, type_, *rest = argument
    resolved = parse_type(type_) if isinstance(type_, str) else type_
    return ArgumentSpec(name=arg_name, type=resolved, indexed=bool(rest and rest[0]))
