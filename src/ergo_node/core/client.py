"""
NodeClient: async REST client for an Ergo full node.

Docs: https://docs.ergoplatform.com/node/swagger/openapi/
"""

from __future__ import annotations

from typing import Any

import httpx

from ergo_node.core.config import DEFAULT_TIMEOUT, NodeConfig
from ergo_node.endpoints import NodeEndpoint
from ergo_node.extensions import NodeExtension


class NodeClient:
    """
    Owns the single httpx.AsyncClient every endpoint handle shares.

    Headers and timeout are fixed when the client is built. The underlying
    transport is safe for concurrent requests, so independent workflows may
    run at the same time on one NodeClient.

    Usage:
        async with NodeClient.from_url("http://127.0.0.1:9053", api_key="secret") as node:
            info = await node.endpoints().root().info()
    """

    def __init__(
        self,
        config: NodeConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._client = httpx.AsyncClient(
            headers=config.headers,
            timeout=config.timeout,
            transport=transport,
        )
        self._endpoints = NodeEndpoint(self._client, config.base_url)

    @classmethod
    def from_url(
        cls,
        url: str,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> NodeClient:
        """
        Build a client from a URL string.

        Raises:
            ConfigError: malformed URL or an API key that is not a legal header value
        """
        return cls(NodeConfig(base_url=url, api_key=api_key, timeout=timeout), transport)

    @property
    def url(self) -> str:
        return self.config.base_url

    def endpoints(self) -> NodeEndpoint:
        return self._endpoints

    def extensions(self) -> NodeExtension:
        return NodeExtension(self._endpoints)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> NodeClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"NodeClient(url={self.url!r})"
