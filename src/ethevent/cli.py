import asyncio
import logging

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ethevent.api import Balance, Block
from ethevent.clients.rpc import RPC
from ethevent.codec import cast, encode
from ethevent.core.config import Settings
from ethevent.core.errors import EthEventError
from ethevent.core.types import QUANTITY, Address, Bool, Bytes, EncodedType, Topic
from ethevent.schema import make_event, normalize_signature, parse_signature, parse_type, signature

console = Console()


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING - 10 * min(verbose, 2)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _resolve_type(spelling: str) -> EncodedType:
    if spelling == "quantity":
        return QUANTITY
    return parse_type(spelling)


def _parse_value(type_: EncodedType, raw: str):
    """Turn a command line string into the Python value `encode` expects."""
    if isinstance(type_, Bool):
        if raw.lower() not in ("true", "false"):
            raise click.BadParameter(f"{raw!r} is not a boolean")
        return raw.lower() == "true"
    if isinstance(type_, (Address, Bytes)) or raw in ("latest", "pending", "earliest", "safe", "finalized"):
        return raw
    if raw.startswith("0x") and type_ == QUANTITY:
        return raw
    try:
        return int(raw, 0)
    except ValueError as e:
        raise click.BadParameter(f"{raw!r} is not an integer") from e


def _rpc(rpc_url: str | None, key: str | None) -> RPC:
    settings = Settings.from_env()
    return RPC(
        rpc_url or settings.node_url,
        key=settings.node_key if key is None else key,
        timeout_s=settings.timeout_s,
        max_connections=settings.max_connections,
    )


def _run(coro):
    try:
        return asyncio.run(coro)
    except (EthEventError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """ethevent: typed Ethereum events over JSON-RPC."""
    _setup_logging(verbose)


@cli.command("signature")
@click.argument("text")
def signature_cmd(text: str) -> None:
    """Print the canonical name and topic zero of an event signature."""
    try:
        canonical = normalize_signature(text)
    except EthEventError as e:
        raise click.ClickException(str(e)) from e
    console.print(canonical)
    console.print(signature(canonical))


@cli.command("encode")
@click.argument("type_name", metavar="TYPE")
@click.argument("value")
@click.option("--topic", is_flag=True, help="Left pad the encoding to a 32 byte topic")
def encode_cmd(type_name: str, value: str, topic: bool) -> None:
    """Encode VALUE as TYPE (e.g. int8, address, bytes4, quantity)."""
    try:
        type_ = _resolve_type(type_name)
        encoded = encode(Topic(type_) if topic else type_, _parse_value(type_, value))
    except EthEventError as e:
        raise click.ClickException(str(e)) from e
    console.print(encoded)


@cli.command("cast")
@click.argument("type_name", metavar="TYPE")
@click.argument("hex_value", metavar="HEX")
def cast_cmd(type_name: str, hex_value: str) -> None:
    """Decode one (possibly word padded) HEX value as TYPE."""
    try:
        console.print(repr(cast(parse_type(type_name), hex_value)))
    except EthEventError as e:
        raise click.ClickException(str(e)) from e


@cli.command("balance")
@click.argument("address")
@click.option("--block", "block_number", type=int, default=None, help="Block number (default latest)")
@click.option("--rpc", "rpc_url", default=None, help="RPC endpoint URL (default $ETH_EVENT_NODE_URL)")
@click.option("--key", default=None, help="Node API key (default $ETH_EVENT_NODE_KEY)")
def balance_cmd(address: str, block_number: int | None, rpc_url: str | None, key: str | None) -> None:
    """Print the balance of ADDRESS in Wei."""

    async def run() -> Balance:
        async with _rpc(rpc_url, key) as rpc:
            return await rpc.query(Balance(address=address, block_number=block_number))

    result = _run(run())
    console.print(f"[bold]{result.address}[/]: {result.balance} wei")


@cli.command("block")
@click.option("--number", "block_number", type=int, default=None, help="Block number (default latest)")
@click.option("--rpc", "rpc_url", default=None, help="RPC endpoint URL (default $ETH_EVENT_NODE_URL)")
@click.option("--key", default=None, help="Node API key (default $ETH_EVENT_NODE_KEY)")
def block_cmd(block_number: int | None, rpc_url: str | None, key: str | None) -> None:
    """Print the number, hash and timestamp of a block."""

    async def run() -> Block:
        async with _rpc(rpc_url, key) as rpc:
            return await rpc.query(Block(block_number=block_number))

    block = _run(run())
    console.print(f"[bold]block[/] {block.block_number} ({block.status})")
    console.print(f"hash: {block.block_hash}")
    console.print(f"timestamp: {block.timestamp.isoformat()}")
    console.print(f"transactions: {len(block.extra or [])}")


@cli.command("logs")
@click.argument("text", metavar="SIGNATURE")
@click.option("--contract", default=None, help="Emitter contract address")
@click.option("--from-block", default="latest", show_default=True)
@click.option("--to-block", default="latest", show_default=True)
@click.option("--rpc", "rpc_url", default=None, help="RPC endpoint URL (default $ETH_EVENT_NODE_URL)")
@click.option("--key", default=None, help="Node API key (default $ETH_EVENT_NODE_KEY)")
def logs_cmd(
    text: str,
    contract: str | None,
    from_block: str,
    to_block: str,
    rpc_url: str | None,
    key: str | None,
) -> None:
    """Fetch and decode logs of SIGNATURE, e.g. 'Transfer(address indexed,address indexed,uint256)'."""
    try:
        name, arguments = parse_signature(text)
        event_cls = make_event(name, [(f"arg{i}", t, indexed) for i, (t, indexed) in enumerate(arguments)])
        from_b = _parse_value(QUANTITY, from_block)
        to_b = _parse_value(QUANTITY, to_block)
    except EthEventError as e:
        raise click.ClickException(str(e)) from e

    async def run() -> list:
        async with _rpc(rpc_url, key) as rpc:
            return await rpc.query(event_cls(address=contract), from_block=from_b, to_block=to_b)

    records = _run(run())

    table = Table(title=event_cls.__event__.canonical_name)
    table.add_column("block")
    table.add_column("index")
    table.add_column("contract")
    for i in range(len(arguments)):
        table.add_column(f"arg{i}")
    for record in records:
        table.add_row(
            str(record.block_number),
            str(record.log_index),
            str(record.address),
            *(str(v) for v in record.arguments().values()),
        )
    console.print(table)
    console.print(f"[bold]done[/]: {len(records)} logs")
