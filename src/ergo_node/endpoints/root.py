"""Node root: /info."""

from __future__ import annotations

import httpx

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import NodeModel


class NodeInfo(NodeModel):
    """Subset of the node's /info response."""
    network: str
    name: str | None = None
    app_version: str | None = None
    difficulty: int | None = None
    full_height: int | None = None
    headers_height: int | None = None
    state_type: str | None = None
    peers_count: int | None = None


class RootEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = url

    async def info(self) -> NodeInfo:
        response = await send(self._client, "GET", join_url(self.url, "info"))
        return process_response(response, NodeInfo)
