from __future__ import annotations

from .api import Balance, Block
from .codec import cast, decode, encode
from .core.config import Settings
from .core.errors import EthEventError
from .core.types import Address, Array, Bool, Bytes, Int, Quantity, Topic, Uint
from .schema.event import Event, arg, event, make_event
from .schema.metadata import ArgumentSpec, EventMetadata

__all__ = [
    "Balance",
    "Block",
    "cast",
    "decode",
    "encode",
    "Settings",
    "EthEventError",
    "Address",
    "Array",
    "Bool",
    "Bytes",
    "Int",
    "Quantity",
    "Topic",
    "Uint",
    "Event",
    "arg",
    "event",
    "make_event",
    "ArgumentSpec",
    "EventMetadata",
]
