"""
Blockchain index: /blockchain/*.

These routes are only served by nodes running with extra indexing enabled.
"""

from __future__ import annotations

from typing import Literal

import httpx
from pydantic import Field

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import IndexedBox, IndexedTransaction, NodeModel, Token


class IndexQuery(NodeModel):
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=50, ge=0)
    sort_direction: Literal["asc", "desc"] = "desc"
    include_unconfirmed: bool = False


class IndexedHeight(NodeModel):
    indexed_height: int
    full_height: int


class BalanceEntry(NodeModel):
    nano_ergs: int
    tokens: list[Token] = Field(default_factory=list)


class AddressBalance(NodeModel):
    confirmed: BalanceEntry
    unconfirmed: BalanceEntry | None = None


class BlockchainEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "blockchain")

    async def indexed_height(self) -> IndexedHeight:
        response = await send(self._client, "GET", join_url(self.url, "indexedHeight"))
        return process_response(response, IndexedHeight)

    async def unspent_by_address(
        self, address: str, query: IndexQuery | None = None
    ) -> list[IndexedBox]:
        query = query or IndexQuery()
        # the address goes in the body as a bare JSON string
        response = await send(
            self._client,
            "POST",
            join_url(self.url, "box", "unspent", "byAddress"),
            params=query.to_json_dict(),
            json=address,
        )
        return process_response(response, list[IndexedBox])

    async def get_transaction_by_id(self, tx_id: str) -> IndexedTransaction:
        response = await send(
            self._client, "GET", join_url(self.url, "transaction", "byId", tx_id)
        )
        return process_response(response, IndexedTransaction)

    async def get_box_by_id(self, box_id: str) -> IndexedBox:
        response = await send(self._client, "GET", join_url(self.url, "box", "byId", box_id))
        return process_response(response, IndexedBox)

    async def get_unspent_boxes_by_token_id(
        self, token_id: str, query: IndexQuery | None = None
    ) -> list[IndexedBox]:
        query = query or IndexQuery()
        response = await send(
            self._client,
            "GET",
            join_url(self.url, "box", "unspent", "byTokenId", token_id),
            params=query.to_json_dict(),
        )
        return process_response(response, list[IndexedBox])

    async def get_balance(self, address: str) -> AddressBalance:
        response = await send(
            self._client, "POST", join_url(self.url, "balance"), json=address
        )
        return process_response(response, AddressBalance)
