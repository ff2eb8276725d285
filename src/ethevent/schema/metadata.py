"""Static descriptors of declared events.

`EventMetadata` is built once per event type (see `ethevent.schema.event`) and
never changes afterwards; it is safe to share between any number of callers.
"""

from __future__ import annotations

import keyword
from collections.abc import Iterable
from dataclasses import dataclass

from ethevent.core.types import EncodedType
from ethevent.schema.signature import canonical_name, signature

# Header fields present on every record; arguments may not reuse them.
HEADER_FIELDS: tuple[str, ...] = ("address", "block_hash", "block_number", "log_index", "status", "extra")
# Record methods; an argument of the same name would shadow them.
RECORD_METHODS: tuple[str, ...] = ("build_query", "build_result", "copy_header", "header", "arguments")
RESERVED_NAMES = frozenset(HEADER_FIELDS + RECORD_METHODS)


@dataclass(frozen=True)
class ArgumentSpec:
    """One declared event argument."""

    name: str
    type: EncodedType
    indexed: bool = False


@dataclass(frozen=True)
class EventMetadata:
    """Everything the query builder and the decoder need to know about an event."""

    id: str
    canonical_name: str
    signature: str  # topic zero, 0x + 64 lower-case hex digits
    arguments: tuple[ArgumentSpec, ...]

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def indexed_arguments(self) -> tuple[ArgumentSpec, ...]:
        return tuple(a for a in self.arguments if a.indexed)

    @property
    def data_arguments(self) -> tuple[ArgumentSpec, ...]:
        return tuple(a for a in self.arguments if not a.indexed)

    @classmethod
    def build(cls, name: str, arguments: Iterable[ArgumentSpec]) -> EventMetadata:
        """Validate `arguments` and compute the canonical name and signature."""
        args = tuple(arguments)
        seen: set[str] = set()
        for a in args:
            if a.name in RESERVED_NAMES or a.name.startswith("__"):
                raise ValueError(f"{a.name!r} is reserved. Use other name for the argument")
            if not a.name.isidentifier() or keyword.iskeyword(a.name):
                raise ValueError(f"{a.name!r} is not a valid argument name")
            if a.name in seen:
                raise ValueError(f"Duplicated argument {a.name!r} in event {name}")
            seen.add(a.name)

        canonical = canonical_name(name, (a.type for a in args))
        return cls(
            id=name,
            canonical_name=canonical,
            signature=signature(canonical),
            arguments=args,
        )
