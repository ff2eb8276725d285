"""Encode Python values into EVM hex strings.

    >>> encode(Int(8), -1)
    '0x81'
    >>> encode(Topic(Int(16)), -1)
    '0x0000000000000000000000000000000000000000000000000000000000008001'
    >>> encode(QUANTITY, 100)
    '0x64'

Signed integers keep their magnitude and carry the sign in the most
significant nibble (`0-7` positive, `8-f` negative).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ethevent.codec.hexcodec import flip_sign, pad, require_hex, strip_prefix
from ethevent.core.errors import CodecOverflowError, InvalidValueError, UnrecognizedTypeError
from ethevent.core.types import Address, Array, Bool, Bytes, EncodedType, Int, Quantity, Topic, Uint

BLOCK_TAGS = frozenset({"latest", "pending", "earliest", "safe", "finalized"})


def encode(type_: EncodedType, value: Any) -> Any:
    """Encode `value` as `type_`.

    Returns a `0x` string, or a list of them for `Array`.
    """
    match type_:
        case Quantity():
            return _encode_quantity(value)
        case Array(inner=inner):
            return encode_array(inner, value)
        case Topic(inner=inner):
            encoded = encode(inner, value)
            if not isinstance(encoded, str):
                raise UnrecognizedTypeError(f"Cannot encode {inner!r} as a topic")
            if not encoded.startswith("0x"):
                raise InvalidValueError(f"Cannot encode {value!r} as a topic")
            return "0x" + pad(require_hex(encoded[2:]), 64)
        case Bool() | Address() | Uint() | Int() | Bytes():
            return "0x" + encode_digits(type_, value)
    raise UnrecognizedTypeError(f"Unrecognized type {type_!r}")


def encode_array(type_: EncodedType, values: Sequence[Any]) -> list[Any]:
    """Encode every element of `values`; the first failure propagates."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidValueError(f"Expected a list of values, got {values!r}")
    return [encode(type_, value) for value in values]


def encode_digits(type_: EncodedType, value: Any) -> str:
    """Encode a fixed-width type without the `0x` prefix."""
    match type_:
        case Bool():
            if not isinstance(value, bool):
                raise InvalidValueError(f"Invalid value {value!r} for boolean")
            return "01" if value else "00"
        case Uint(bits=bits):
            return _uint_digits(bits, value)
        case Int(bits=bits):
            _require_int(value)
            return flip_sign(_uint_digits(bits, abs(value)), negative=value < 0)
        case Address():
            if not isinstance(value, str):
                raise InvalidValueError(f"Invalid address {value!r}")
            digits = value[2:] if value.startswith("0x") else value
            return pad(require_hex(digits), 40)
        case Bytes(size=size):
            return pad(_bytes_digits(value), 2 * size, side="right")
    raise UnrecognizedTypeError(f"Unrecognized fixed-width type {type_!r}")


# ---------- helpers ----------


def _require_int(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f"Expected an integer, got {value!r}")


def _uint_digits(bits: int, value: Any) -> str:
    _require_int(value)
    if value < 0 or value.bit_length() > bits:
        raise CodecOverflowError(f"{value} does not fit in uint{bits}")
    return format(value, "x").rjust(bits // 4, "0")


def _bytes_digits(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if not isinstance(value, str):
        raise InvalidValueError(f"Invalid bytes value {value!r}")
    if value.startswith("0x"):
        return require_hex(value[2:]).lower()
    return value.encode("utf-8").hex()


def _encode_quantity(value: Any) -> str:
    if isinstance(value, str):
        if value in BLOCK_TAGS:
            return value
        digits = require_hex(strip_prefix(value)).lower().lstrip("0")
        return "0x" + (digits or "0")
    digits = _uint_digits(256, value).lstrip("0")
    return "0x" + (digits or "0")
