from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Connection settings for the Ethereum node."""

    node_url: str = "http://localhost:8545"
    node_key: str = ""  # appended to the URL path when set (e.g. Infura project id)
    timeout_s: int = 20
    max_connections: int = 64

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from `ETH_EVENT_*` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            node_url=env.get("ETH_EVENT_NODE_URL", defaults.node_url),
            node_key=env.get("ETH_EVENT_NODE_KEY", defaults.node_key),
            timeout_s=int(env.get("ETH_EVENT_TIMEOUT_S", defaults.timeout_s)),
            max_connections=int(env.get("ETH_EVENT_MAX_CONNECTIONS", defaults.max_connections)),
        )

    @property
    def endpoint(self) -> str:
        """URL the JSON-RPC requests are posted to."""
        base = self.node_url.rstrip("/")
        return f"{base}/{self.node_key}" if self.node_key else base
