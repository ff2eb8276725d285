"""Canonical event names and their Keccak-256 topic-zero signatures."""

from __future__ import annotations

import re
from collections.abc import Iterable

from eth_utils import keccak
from eth_utils.abi import event_signature_to_log_topic

from ethevent.core.errors import UnrecognizedTypeError
from ethevent.core.types import ADDRESS, BOOL, Address, Bool, Bytes, EncodedType, Int, Uint

SIGNATURE_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*\((.*)\)\s*$")
_SIZED_RE = re.compile(r"^(uint|int|bytes)(\d*)$")


def type_name(type_: EncodedType) -> str:
    """Solidity spelling of `type_`."""
    match type_:
        case Bool():
            return "bool"
        case Address():
            return "address"
        case Uint(bits=bits):
            return f"uint{bits}"
        case Int(bits=bits):
            return f"int{bits}"
        case Bytes(size=size):
            return f"bytes{size}"
    raise UnrecognizedTypeError(f"{type_!r} has no Solidity spelling")


def parse_type(spelling: str) -> EncodedType:
    """Parse a Solidity spelling (`uint`, `int24`, `bytes32`, `address`...)."""
    text = spelling.strip()
    if text == "bool":
        return BOOL
    if text == "address":
        return ADDRESS
    m = _SIZED_RE.match(text)
    if m is None:
        raise UnrecognizedTypeError(f"Invalid type {spelling!r}")
    kind, digits = m.groups()
    if not digits:
        if kind == "bytes":
            # dynamic `bytes` is not a fixed-width type
            raise UnrecognizedTypeError("Invalid type 'bytes'")
        return Uint(256) if kind == "uint" else Int(256)
    n = int(digits)
    if kind == "uint":
        return Uint(n)
    if kind == "int":
        return Int(n)
    return Bytes(n)


def canonical_name(name: str, types: Iterable[EncodedType]) -> str:
    """Render `Name(type1,type2,...)`."""
    return f"{name}({','.join(type_name(t) for t in types)})"


def keccak256(text: str) -> str:
    """Solidity compatible keccak256 over UTF-8 `text`, as a 0x hex string."""
    return "0x" + keccak(text=text).hex()


def signature(name: str) -> str:
    """Topic zero of the event with canonical name `name`."""
    return "0x" + event_signature_to_log_topic(name).hex()


def parse_signature(text: str) -> tuple[str, list[tuple[EncodedType, bool]]]:
    """Parse `Name(type [indexed] [name], ...)` into the name and typed arguments.

    Argument names are accepted and ignored; `indexed` marks an indexed argument.
    """
    m = SIGNATURE_RE.match(text)
    if m is None:
        raise UnrecognizedTypeError(f"Invalid event signature {text!r}")
    name, inner = m.groups()
    arguments: list[tuple[EncodedType, bool]] = []
    if not inner.strip():
        return name, arguments
    for raw in inner.split(","):
        tokens = raw.split()
        if not tokens:
            raise UnrecognizedTypeError(f"Empty argument in {text!r}")
        arguments.append((parse_type(tokens[0]), "indexed" in tokens[1:]))
    return name, arguments


def normalize_signature(text: str) -> str:
    """Canonical spelling of a signature, e.g. `Transfer(address,address,uint)`."""
    name, arguments = parse_signature(text)
    return canonical_name(name, (t for t, _ in arguments))
