"""Decode raw `eth_getLogs` results into event records.

`build_result` maps each raw log independently: logs of other events and
malformed entries are dropped, so one bad entry never aborts the batch.
`decode_log` decodes a single log and raises on any problem.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from ethevent.codec.decode import cast, decode
from ethevent.core.errors import EthEventError, MalformedLogError, SignatureMismatchError
from ethevent.core.types import ADDRESS, UINT256

if TYPE_CHECKING:
    from ethevent.schema.event import Event

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Event")

_LOG_FIELDS = ("address", "blockHash", "blockNumber", "data", "logIndex", "topics")


def build_result(template: E, results: Any) -> list[E]:
    """Decode every log of `results` matching the template's event, in input order."""
    if not isinstance(results, list):
        raise MalformedLogError(f"Expected a list of logs, got {type(results).__name__}")

    event_cls = type(template)
    records: list[E] = []
    for position, raw in enumerate(results):
        try:
            records.append(decode_log(event_cls, raw))
        except SignatureMismatchError:
            logger.debug("Skipping log %d: not a %s event", position, event_cls.__event__.id)
        except EthEventError as e:
            logger.warning("Dropping malformed log %d for %s: %s", position, event_cls.__event__.id, e)
    return records


def decode_log(event_cls: type[E], raw: Any) -> E:
    """Decode one raw log into an `event_cls` record."""
    metadata = event_cls.__event__
    if not isinstance(raw, Mapping):
        raise MalformedLogError(f"Expected a log object, got {type(raw).__name__}")
    missing = [name for name in _LOG_FIELDS if name not in raw]
    if missing:
        raise MalformedLogError(f"Log is missing {', '.join(missing)}")

    topics = raw["topics"]
    if not isinstance(topics, list) or not topics or not isinstance(topics[0], str):
        raise MalformedLogError("Log topics must be a non-empty list")
    if topics[0].lower() != metadata.signature:
        raise SignatureMismatchError(f"Topic zero {topics[0]} is not {metadata.canonical_name}")

    indexed = metadata.indexed_arguments
    if len(topics) - 1 != len(indexed):
        raise MalformedLogError(f"Expected {len(indexed)} indexed topics, got {len(topics) - 1}")

    values = decode_header(raw)
    for argument, topic in zip(indexed, topics[1:]):
        values[argument.name] = cast(argument.type, topic)

    data_arguments = metadata.data_arguments
    decoded, leftover = decode([a.type for a in data_arguments], raw["data"])
    if leftover is not None:
        raise MalformedLogError(f"Unconsumed log data {leftover}")
    for argument, value in zip(data_arguments, decoded):
        values[argument.name] = value

    return event_cls(**values)


def decode_header(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Header fields of a raw log (contract address, block, index, status)."""
    block_number = raw["blockNumber"]
    pending = block_number is None or block_number == "pending"
    log_index = raw["logIndex"]
    return {
        "address": cast(ADDRESS, raw["address"]),
        "block_hash": raw["blockHash"],
        "block_number": None if pending else cast(UINT256, block_number),
        "log_index": None if log_index is None else cast(UINT256, log_index),
        "status": "pending" if pending else "mined",
    }
