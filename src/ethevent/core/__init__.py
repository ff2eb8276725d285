"""Core types, errors and configuration.

This package provides:
- Solidity type variants (Bool, Address, Uint, Int, Bytes, Quantity, Topic, Array)
- The EthEventError hierarchy
- Node settings (Settings)
"""

from ethevent.core.config import Settings
from ethevent.core.errors import (
    CodecOverflowError,
    EthEventError,
    InvalidValueError,
    MalformedLogError,
    RPCError,
    SignatureMismatchError,
    TooLongError,
    TruncatedError,
    UnrecognizedTypeError,
)
from ethevent.core.types import (
    ADDRESS,
    BOOL,
    QUANTITY,
    UINT256,
    Address,
    Array,
    Bool,
    Bytes,
    EncodedType,
    Int,
    Quantity,
    Topic,
    Uint,
    hex_width,
)

__all__ = [
    "Settings",
    "CodecOverflowError",
    "EthEventError",
    "InvalidValueError",
    "MalformedLogError",
    "RPCError",
    "SignatureMismatchError",
    "TooLongError",
    "TruncatedError",
    "UnrecognizedTypeError",
    "ADDRESS",
    "BOOL",
    "QUANTITY",
    "UINT256",
    "Address",
    "Array",
    "Bool",
    "Bytes",
    "EncodedType",
    "Int",
    "Quantity",
    "Topic",
    "Uint",
    "hex_width",
]
