from ethevent.schema.event import Event, arg, event

TRANSFER_SIG = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
FROM_TOPIC = "0x0000000000000000000000008ca88e083ec89a8110b722ec46aace1c1d1b260e"
TO_TOPIC = "0x00000000000000000000000006560813995c81ef86cf850b365bc6817a6cb5bd"


@event("Transfer")
class Transfer(Event):
    sender: str | None = arg("address", indexed=True)
    receiver: str | None = arg("address", indexed=True)
    value: int | None = arg("uint256")
