"""The `Block` event (`eth_getBlockByNumber`).

Set `block_number` to request a specific block (defaults to `"latest"`)::

    block = await rpc.query(Block(block_number=0))
    block.timestamp  # datetime in UTC
    block.extra      # the block's transaction hashes
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from ethevent.codec.decode import cast
from ethevent.codec.encode import encode
from ethevent.core.errors import MalformedLogError
from ethevent.core.types import QUANTITY, UINT256
from ethevent.schema.event import Event, arg, event
from ethevent.schema.query import LATEST


@event("Block", method="eth_getBlockByNumber")
class Block(Event):
    timestamp: datetime | None = arg("uint")

    def build_query(self, **options: Any) -> list[Any]:
        """`[block, False]`: only transaction hashes are requested."""
        block = LATEST if self.block_number is None else self.block_number
        return [encode(QUANTITY, block), False]

    def build_result(self, result: Any) -> Block:
        """Decode a block object; blocks without number or hash are pending."""
        if not isinstance(result, Mapping) or "timestamp" not in result or "transactions" not in result:
            raise MalformedLogError("Invalid block result")

        timestamp = datetime.fromtimestamp(cast(UINT256, result["timestamp"]), tz=timezone.utc)
        number, block_hash = result.get("number"), result.get("hash")
        if number is None or block_hash is None:
            return Block(
                block_hash="pending",
                block_number="pending",
                status="pending",
                timestamp=timestamp,
                extra=result["transactions"],
            )
        return Block(
            block_hash=block_hash,
            block_number=cast(UINT256, number),
            status="mined",
            timestamp=timestamp,
            extra=result["transactions"],
        )
