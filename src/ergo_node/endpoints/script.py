"""ErgoScript compilation: /script/*."""

from __future__ import annotations

import httpx

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import NodeModel


class _AddressResponse(NodeModel):
    address: str


class _TreeResponse(NodeModel):
    tree: str


class ScriptEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "script")

    async def p2s_address(self, source: str) -> str:
        """
        Compile ErgoScript source into a P2S address.

        Raises:
            RequestError: the source does not compile; the message carries the
                          compiler's error
        """
        response = await send(
            self._client, "POST", join_url(self.url, "p2sAddress"), json={"source": source}
        )
        return process_response(response, _AddressResponse).address

    async def address_to_tree(self, address: str) -> str:
        """ErgoTree (hex) behind any address, resolved by the node."""
        response = await send(
            self._client, "GET", join_url(self.url, "addressToTree", address)
        )
        return process_response(response, _TreeResponse).tree
