import json
import keyword
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel

from ethevent.core.errors import UnrecognizedTypeError
from ethevent.schema.event import Event, make_event
from ethevent.schema.metadata import RESERVED_NAMES, ArgumentSpec
from ethevent.schema.signature import parse_type

logger = logging.getLogger(__name__)


class AbiInput(BaseModel):
    indexed: bool = False
    internalType: str | None = None
    name: str = ""
    type: str


class AbiEvent(BaseModel):
    anonymous: bool = False
    inputs: Sequence[AbiInput]
    name: str
    type: Literal["event"]


def get_event_signature(event: AbiEvent):
    return f"{event.name}({','.join(event_input.type for event_input in event.inputs)})"


def get_event_topic0(event: AbiEvent) -> str:
    """Topic zero of `event`, hashed over its canonical name."""
    return make_event_from_abi(event).__event__.signature


def get_field_name(event_input: AbiInput, position: int) -> str:
    """Python field name for an ABI input (`from` → `from_`, `""` → `arg0`)."""
    name = event_input.name or f"arg{position}"
    if keyword.iskeyword(name) or name in RESERVED_NAMES:
        name += "_"
    return name


def get_event_arguments(event: AbiEvent) -> list[ArgumentSpec]:
    return [
        ArgumentSpec(
            name=get_field_name(event_input, event_input_idx),
            type=parse_type(event_input.type),
            indexed=event_input.indexed,
        )
        for event_input_idx, event_input in enumerate(event.inputs)
    ]


def make_event_from_abi(event: AbiEvent) -> type[Event]:
    if event.anonymous:
        raise UnrecognizedTypeError(f"Anonymous event {event.name} has no signature topic")
    return make_event(event.name, get_event_arguments(event))


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path


def _load_abi(abi: AbiSpec) -> AbiJson:
    if isinstance(abi, Path):
        return json.loads(abi.read_text())
    return abi


def get_events_from_abi(abi: AbiSpec) -> dict[str, AbiEvent]:
    abi = _load_abi(abi)
    return {entry["name"]: AbiEvent.model_validate(entry) for entry in abi if entry.get("type") == "event"}


def make_events_from_abi(abi: AbiSpec) -> dict[str, type[Event]]:
    """Declare one event class per supported ABI event, keyed by event name."""
    events: dict[str, type[Event]] = {}

    for name, event in get_events_from_abi(abi).items():
        try:
            events[name] = make_event_from_abi(event)
        except ValueError as e:
            logger.warning("Skipping event %s: %s", get_event_signature(event), e)

    return events
