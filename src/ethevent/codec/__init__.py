"""ABI codec.

This package provides:
- Hex primitives (pad, take, tail, sign nibble) in `hexcodec`
- `encode` for Python values → EVM hex strings
- `decode` (packed data) and `cast` (single padded word) for the way back
"""

from ethevent.codec.decode import cast, decode
from ethevent.codec.encode import BLOCK_TAGS, encode

__all__ = [
    "BLOCK_TAGS",
    "cast",
    "decode",
    "encode",
]
