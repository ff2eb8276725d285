"""The `Balance` event (`eth_getBalance`).

Set the account `address` and optionally a `block_number` (defaults to
`"latest"`)::

    balance = await rpc.query(Balance(address="0x93ec..."))
    balance.balance  # in Wei

Balances compose with other records carrying a block header::

    block = await rpc.query(Block())
    balance = await rpc.query(Balance.copy_header(block, address="0x93ec..."))
"""

from __future__ import annotations

import dataclasses
from typing import Any

from ethevent.codec.decode import cast
from ethevent.codec.encode import encode
from ethevent.core.errors import InvalidValueError
from ethevent.core.types import ADDRESS, QUANTITY, UINT256
from ethevent.schema.event import Event, arg, event
from ethevent.schema.query import LATEST


@event("Balance", method="eth_getBalance")
class Balance(Event):
    balance: int | None = arg("uint256")

    def build_query(self, **options: Any) -> list[Any]:
        """`[address, block]` parameters; block options are ignored."""
        if self.address is None:
            raise InvalidValueError("Address not specified")
        if not isinstance(self.address, str):
            raise InvalidValueError(f"Balance needs a single address, got {self.address!r}")
        block = LATEST if self.block_number is None else self.block_number
        return [encode(ADDRESS, self.address), encode(QUANTITY, block)]

    def build_result(self, result: Any) -> Balance:
        """Place the hex balance `result` into a copy of this record."""
        if not isinstance(result, str):
            raise InvalidValueError(f"Invalid balance result {result!r}")
        return dataclasses.replace(self, balance=cast(UINT256, result))
