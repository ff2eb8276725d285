"""Fixed-width hex primitives: padding, chunking, truncation and the sign nibble.

All helpers work on bare hex digits (no `0x` prefix) except `strip_prefix`.
"""

from __future__ import annotations

import re
from typing import Literal

from ethevent.core.errors import CodecOverflowError, InvalidValueError, TooLongError, TruncatedError

HEX_RE = re.compile(r"[0-9a-fA-F]*")

Side = Literal["left", "right"]


def strip_prefix(value: str) -> str:
    """Return the digits after the mandatory `0x` prefix."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise InvalidValueError(f"Expected a 0x-prefixed hex string, got {value!r}")
    return value[2:]


def require_hex(digits: str) -> str:
    """Return `digits` unchanged if they are all hex digits."""
    if not HEX_RE.fullmatch(digits):
        raise InvalidValueError(f"Invalid hex digits {digits!r}")
    return digits


def pad(value: str, size: int, side: Side = "left") -> str:
    """Zero-pad `value` to `size` digits on the given side."""
    if len(value) > size:
        raise TooLongError(f"{value!r} is longer than {size} hex digits")
    if side == "left":
        return value.rjust(size, "0")
    return value.ljust(size, "0")


def take(data: str, size: int) -> tuple[str, str]:
    """Split `data` into its first `size` digits and the remainder."""
    if len(data) < size:
        raise TruncatedError(f"Expected {size} hex digits, only {len(data)} left")
    return data[:size], data[size:]


def tail(value: str, size: int) -> str:
    """Keep the right-most `size` digits, left-padding shorter input."""
    return value[-size:].rjust(size, "0")


def flip_sign(digits: str, negative: bool) -> str:
    """Mark `digits` (an unsigned magnitude) as negative through its leading nibble.

    The leading nibble must be in `0-7`; negatives move it to `8-f`.
    """
    lead = int(digits[0], 16)
    if lead >= 8:
        raise CodecOverflowError(f"Overflow in int: 0x{digits}")
    if not negative:
        return digits
    return format(lead + 8, "x") + digits[1:]


def parse_signed(digits: str) -> int:
    """Inverse of `flip_sign`: a leading nibble `>= 8` means negative."""
    lead = int(digits[0], 16)
    if lead < 8:
        return int(digits, 16)
    return -int(format(lead - 8, "x") + digits[1:], 16)
