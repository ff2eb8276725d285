"""Decode EVM hex strings into Python values.

Two entry points:

- `decode(types, data)` reads packed fixed-width values left to right:

      >>> decode([Uint(8), Int(8)], "0x6481")
      ([100, -1], None)

  The second element is `None` when `data` was consumed exactly, otherwise the
  unconsumed `0x` tail.

- `cast(type, value)` reads one value that may arrive padded to a full word:

      >>> cast(Int(8), "0x" + "0" * 62 + "81")
      -1
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ethevent.codec.hexcodec import parse_signed, require_hex, strip_prefix, tail, take
from ethevent.core.errors import InvalidValueError, UnrecognizedTypeError
from ethevent.core.types import Address, Bool, Bytes, EncodedType, Int, Topic, Uint, hex_width


def decode(types: Sequence[EncodedType], data: str) -> tuple[list[Any], str | None]:
    """Decode packed `data` according to `types`, in order."""
    rest = require_hex(strip_prefix(data))
    values: list[Any] = []
    for type_ in types:
        value, rest = decode_digits(type_, rest)
        values.append(value)
    return values, ("0x" + rest if rest else None)


def cast(type_: EncodedType, value: str) -> Any:
    """Decode a single value, ignoring left padding beyond the type's width."""
    if isinstance(type_, Topic):
        return cast(type_.inner, value)
    digits = require_hex(strip_prefix(value))
    decoded, _ = decode_digits(type_, tail(digits, hex_width(type_)))
    return decoded


def decode_digits(type_: EncodedType, data: str) -> tuple[Any, str]:
    """Read one fixed-width value from the head of bare hex `data`."""
    match type_:
        case Bool():
            chunk, rest = take(data, 2)
            flag = int(chunk, 16)
            if flag not in (0, 1):
                raise InvalidValueError(f"Invalid boolean 0x{chunk}")
            return flag == 1, rest
        case Uint():
            chunk, rest = take(data, hex_width(type_))
            return int(chunk, 16), rest
        case Int():
            chunk, rest = take(data, hex_width(type_))
            return parse_signed(chunk), rest
        case Address() | Bytes():
            chunk, rest = take(data, hex_width(type_))
            return "0x" + chunk, rest
    raise UnrecognizedTypeError(f"Cannot decode {type_!r}")
