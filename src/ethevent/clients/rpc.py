"""Lightweight JSON-RPC client for Ethereum-compatible nodes.

This module provides:
- `RPC`: an async client with sane timeouts/connection limits
- `RPC.query`: send an event's query and decode the result into records

The client only moves JSON around; encoding and decoding belong to the events.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from ethevent.core.config import Settings
from ethevent.core.errors import RPCError
from ethevent.schema.event import Event

logger = logging.getLogger(__name__)


class RPC:
    """Minimal async RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    key : str
        Optional API key appended to the URL path.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    max_connections : int
        Maximum concurrent connections to keep in the pool.
    transport : httpx.AsyncBaseTransport | None
        Custom transport (e.g. `httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        url: str,
        *,
        key: str = "",
        timeout_s: int = 20,
        max_connections: int = 64,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = Settings(node_url=url, node_key=key).endpoint
        self._ids = itertools.count(1)
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=timeout_s,
                read=timeout_s,
                write=timeout_s,
                pool=max(30, timeout_s * 3),
            ),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            http2=transport is None,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> RPC:
        return cls(
            settings.node_url,
            key=settings.node_key,
            timeout_s=settings.timeout_s,
            max_connections=settings.max_connections,
            **kwargs,
        )

    async def call(self, method: str, params: Any = None) -> Any:
        """Execute the remote `method` and return its `result`."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": [] if params is None else params,
        }
        logger.debug("-> %s %s", method, payload["params"])
        r = await self.client.post(self.url, json=payload)
        r.raise_for_status()
        try:
            data = r.json()
        except ValueError as e:
            raise RPCError("Malformed response") from e
        return build_response(data)

    async def query(self, record: Event, **options: Any) -> Any:
        """Query the node for `record`'s event and decode the answer."""
        params = record.build_query(**options)
        result = await self.call(type(record).__method__, params)
        return record.build_result(result)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> RPC:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def build_response(data: Any) -> Any:
    """Extract the result of a decoded JSON-RPC response."""
    if isinstance(data, dict):
        if "result" in data:
            return data["result"]
        error = data.get("error")
        if isinstance(error, dict) and "message" in error:
            raise RPCError(f"RPC error: {error.get('code')} {error['message']}")
    raise RPCError("Malformed response")
