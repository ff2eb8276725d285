"""Build `eth_getLogs` filter parameters from an event record.

Options:
- `from_block` - first block to search (defaults to `"latest"`, `None` omits it)
- `to_block`   - last block to search (defaults to `"latest"`, `None` omits it)

Indexed fields set on the record become topic filters; unset ones are `null`
wildcards. Non-indexed fields never appear in the topics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ethevent.codec.encode import encode
from ethevent.core.errors import InvalidValueError
from ethevent.core.types import ADDRESS, QUANTITY, Array, Topic

if TYPE_CHECKING:
    from ethevent.schema.event import Event

LATEST = "latest"


def build_query(
    record: Event,
    *,
    from_block: int | str | None = LATEST,
    to_block: int | str | None = LATEST,
) -> list[dict[str, Any]]:
    """Return the `params` list for an `eth_getLogs` call."""
    params: dict[str, Any] = {}
    params.update(address_clause(record.address))
    if from_block is not None:
        params["fromBlock"] = encode(QUANTITY, from_block)
    if to_block is not None:
        params["toBlock"] = encode(QUANTITY, to_block)
    params["topics"] = build_topics(record)
    return [params]


def address_clause(address: Any) -> dict[str, Any]:
    """`{"address": ...}` for one address or a list of them, `{}` for `None`."""
    if address is None:
        return {}
    if isinstance(address, str):
        return {"address": encode(ADDRESS, address)}
    if isinstance(address, (list, tuple)):
        return {"address": encode(Array(ADDRESS), list(address))}
    raise InvalidValueError(f"Invalid contract address {address!r}")


def build_topics(record: Event) -> list[str | None]:
    """Topic filter: the event signature followed by one entry per indexed argument."""
    metadata = type(record).__event__
    topics: list[str | None] = [metadata.signature]
    for argument in metadata.indexed_arguments:
        value = getattr(record, argument.name)
        topics.append(None if value is None else encode(Topic(argument.type), value))
    return topics
