"""Encoding helpers served by the node: /utils/*."""

from __future__ import annotations

import httpx

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import NodeModel


class _RawToAddressResponse(NodeModel):
    address: str


class _AddressToRawResponse(NodeModel):
    raw: str


class UtilsEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "utils")

    async def raw_to_address(self, public_key: str) -> str:
        """P2PK address for a compressed public key (hex), in the node's network."""
        response = await send(
            self._client, "GET", join_url(self.url, "rawToAddress", public_key)
        )
        return process_response(response, _RawToAddressResponse).address

    async def address_to_raw(self, address: str) -> str:
        """Public key (hex) behind a P2PK address."""
        response = await send(
            self._client, "GET", join_url(self.url, "addressToRaw", address)
        )
        return process_response(response, _AddressToRawResponse).raw
