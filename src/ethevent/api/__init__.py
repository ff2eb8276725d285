"""Built-in node queries expressed as events."""

from ethevent.api.balance import Balance
from ethevent.api.block import Block

__all__ = ["Balance", "Block"]
