"""Solidity types understood by the codec.

Each variant is a small frozen dataclass; `EncodedType` is their union and
every dispatch over it is a `match` statement:

- `Bool()`          - 1 byte boolean
- `Address()`       - 20 byte address
- `Uint(bits)`      - unsigned integer, `0 < bits <= 256`, `bits % 8 == 0`
- `Int(bits)`       - signed integer, same bounds as `Uint`
- `Bytes(size)`     - fixed byte string, `0 < size <= 32`
- `Quantity()`      - JSON-RPC quantity (no left zero padding, admits tags)
- `Topic(inner)`    - `inner` left zero padded to a 32 byte word
- `Array(inner)`    - list of `inner` values
"""

from __future__ import annotations

from dataclasses import dataclass

from ethevent.core.errors import UnrecognizedTypeError


@dataclass(frozen=True)
class Bool:
    pass


@dataclass(frozen=True)
class Address:
    pass


@dataclass(frozen=True)
class Uint:
    bits: int = 256

    def __post_init__(self) -> None:
        if not _valid_bits(self.bits):
            raise UnrecognizedTypeError(f"Invalid uint{self.bits} (0 < n <= 256 and n % 8 == 0)")


@dataclass(frozen=True)
class Int:
    bits: int = 256

    def __post_init__(self) -> None:
        if not _valid_bits(self.bits):
            raise UnrecognizedTypeError(f"Invalid int{self.bits} (0 < n <= 256 and n % 8 == 0)")


@dataclass(frozen=True)
class Bytes:
    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or not 0 < self.size <= 32:
            raise UnrecognizedTypeError(f"Invalid bytes{self.size} (0 < n <= 32)")


@dataclass(frozen=True)
class Quantity:
    pass


@dataclass(frozen=True)
class Topic:
    inner: EncodedType


@dataclass(frozen=True)
class Array:
    inner: EncodedType


EncodedType = Bool | Address | Uint | Int | Bytes | Quantity | Topic | Array


def _valid_bits(bits: object) -> bool:
    return isinstance(bits, int) and not isinstance(bits, bool) and 0 < bits <= 256 and bits % 8 == 0


BOOL = Bool()
ADDRESS = Address()
QUANTITY = Quantity()
UINT256 = Uint(256)


def hex_width(type_: EncodedType) -> int:
    """Number of hex digits a fixed-width type occupies."""
    match type_:
        case Bool():
            return 2
        case Address():
            return 40
        case Uint(bits=bits) | Int(bits=bits):
            return bits // 4
        case Bytes(size=size):
            return 2 * size
        case Topic():
            return 64
    raise UnrecognizedTypeError(f"{type_!r} has no fixed width")
