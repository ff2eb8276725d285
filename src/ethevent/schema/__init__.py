"""Event schema engine.

This package provides:
- Event declaration (Event, arg, event, make_event)
- Static metadata (ArgumentSpec, EventMetadata)
- Canonical names and topic-zero signatures
- Query building (build_query) and log decoding (build_result, decode_log)
"""

from ethevent.schema.event import Event, arg, event, make_event
from ethevent.schema.metadata import HEADER_FIELDS, RESERVED_NAMES, ArgumentSpec, EventMetadata
from ethevent.schema.query import LATEST, build_query
from ethevent.schema.result import build_result, decode_log
from ethevent.schema.signature import (
    canonical_name,
    keccak256,
    normalize_signature,
    parse_signature,
    parse_type,
    signature,
    type_name,
)

__all__ = [
    "Event",
    "arg",
    "event",
    "make_event",
    "HEADER_FIELDS",
    "RESERVED_NAMES",
    "ArgumentSpec",
    "EventMetadata",
    "LATEST",
    "build_query",
    "build_result",
    "decode_log",
    "canonical_name",
    "keccak256",
    "normalize_signature",
    "parse_signature",
    "parse_type",
    "signature",
    "type_name",
]
